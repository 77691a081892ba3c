from __future__ import annotations

import asyncio
from typing import Callable, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from charity.core.exceptions import ForbiddenError, UnauthorizedError
from charity.core.security import has_permission, verify_access_token
from charity.models import Employee
from charity.storage import EmployeeDirectory, SubmissionRepository
from charity.utils.audit import AuditLog

http_bearer = HTTPBearer(auto_error=False)


def get_directory(request: Request) -> EmployeeDirectory:
    return request.app.state.directory


def get_audit_log(request: Request) -> AuditLog:
    return request.app.state.audit_log


def get_submissions(request: Request) -> SubmissionRepository:
    return request.app.state.submissions


async def resolve_employee(
    bearer_token: Optional[HTTPAuthorizationCredentials],
    directory: EmployeeDirectory,
) -> Optional[Employee]:
    """Resolve a bearer token, when one is sent, to an active employee."""

    if not bearer_token or not bearer_token.credentials:
        return None

    payload = verify_access_token(bearer_token.credentials)
    subject = payload.get("sub")
    if not subject:
        raise UnauthorizedError("Invalid token")

    employee = await asyncio.to_thread(directory.find_by_email, subject)
    if employee is None or not employee.active:
        raise ForbiddenError("Employee account is not active")
    return employee


async def get_optional_employee(
    request: Request,
    bearer_token: Optional[HTTPAuthorizationCredentials] = Depends(http_bearer),
    directory: EmployeeDirectory = Depends(get_directory),
) -> Optional[Employee]:
    employee = await resolve_employee(bearer_token, directory)
    if employee is not None:
        request.state.user = employee
    return employee


async def get_current_employee(employee: Optional[Employee] = Depends(get_optional_employee)) -> Employee:
    if employee is None:
        raise UnauthorizedError("Authentication required")
    return employee


def require_permission(capability: str, message: str = "Insufficient permissions") -> Callable:
    """Dependency factory that admits only employees holding ``capability``."""

    async def dependency(employee: Employee = Depends(get_current_employee)) -> Employee:
        if not has_permission(employee, capability):
            raise ForbiddenError(message)
        return employee

    return dependency
