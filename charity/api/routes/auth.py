"""Staff authentication endpoints."""

from __future__ import annotations

import asyncio
from typing import List

from fastapi import APIRouter, Depends
from pydantic import BaseModel, field_validator

from charity.api.dependencies import get_audit_log, get_current_employee, get_directory
from charity.core.exceptions import ForbiddenError
from charity.core.security import create_access_token
from charity.models import Employee
from charity.storage import EmployeeDirectory
from charity.utils.audit import AuditLog
from charity.utils.validators import INVALID_EMAIL_MESSAGE, is_email, rule

router = APIRouter(prefix="/auth", tags=["auth"])


class DirectLoginRequest(BaseModel):
    email: str

    @field_validator("email", mode="before")
    def _normalize(cls, value):
        return value.strip().lower() if isinstance(value, str) else value

    @field_validator("email")
    def _email(cls, value: str) -> str:
        rule(is_email(value), INVALID_EMAIL_MESSAGE)
        return value


class LoginResponse(BaseModel):
    success: bool = True
    token: str
    message: str = "Signed in"


class SessionResponse(BaseModel):
    success: bool = True
    email: str
    name: str
    role: str
    permissions: List[str]


@router.post("/direct-login", response_model=LoginResponse)
async def direct_login(
    payload: DirectLoginRequest,
    directory: EmployeeDirectory = Depends(get_directory),
    audit_log: AuditLog = Depends(get_audit_log),
) -> LoginResponse:
    """Issue a bearer token to an active employee identified by email."""

    email = str(payload.email)
    employee = await asyncio.to_thread(directory.find_by_email, email)
    if employee is None or not employee.active:
        raise ForbiddenError("Employee account is not active")

    token = create_access_token(subject=employee.email.lower(), claims={"role": employee.role})
    await asyncio.to_thread(audit_log.record, "direct_login", employee.email, {"method": "direct"})
    return LoginResponse(token=token)


@router.get("/verify", response_model=SessionResponse)
async def verify_session(employee: Employee = Depends(get_current_employee)) -> SessionResponse:
    return SessionResponse(
        email=employee.email,
        name=employee.name,
        role=employee.role,
        permissions=employee.permissions,
    )
