"""Employee directory administration endpoints."""

from __future__ import annotations

import asyncio
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, Header, status
from pydantic import BaseModel, Field

from charity.api.dependencies import get_audit_log, get_current_employee, get_directory, require_permission
from charity.core.config import settings
from charity.core.exceptions import EmployeeNotFoundError, ForbiddenError
from charity.core.security import head_key_matches
from charity.models import PRESIDENT_ROLE, Employee, EmployeeCreate, EmployeeUpdate
from charity.storage import EmployeeDirectory
from charity.utils.audit import AuditLog

router = APIRouter(prefix="/employees", tags=["employees"])


class EmployeeCreateRequest(EmployeeCreate):
    name: str = Field(min_length=2)


class EmployeeUpdateRequest(EmployeeUpdate):
    name: Optional[str] = Field(None, min_length=2)


class PermissionsUpdateRequest(BaseModel):
    permissions: Optional[List[str]] = None
    active: Optional[bool] = None
    role: Optional[str] = None


class EmployeeList(BaseModel):
    employees: List[Employee]


@router.get("", response_model=EmployeeList, response_model_exclude_none=True)
async def list_employees(
    _: Employee = Depends(get_current_employee),
    directory: EmployeeDirectory = Depends(get_directory),
) -> EmployeeList:
    employees = await asyncio.to_thread(directory.list_employees)
    return EmployeeList(employees=employees)


@router.post(
    "",
    response_model=Employee,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def add_employee(
    payload: EmployeeCreateRequest,
    current: Employee = Depends(require_permission("employees:add", "Insufficient permissions to hire")),
    directory: EmployeeDirectory = Depends(get_directory),
    audit_log: AuditLog = Depends(get_audit_log),
) -> Employee:
    if payload.role == PRESIDENT_ROLE:
        await _refuse_second_president(directory)

    employee = await asyncio.to_thread(directory.add, payload)
    await asyncio.to_thread(
        audit_log.record,
        "add_employee",
        current.email,
        {"id": employee.id, "email": employee.email, "name": employee.name, "role": employee.role},
    )
    return employee


@router.put("/{employee_id}", response_model=Employee, response_model_exclude_none=True)
async def update_employee(
    employee_id: str,
    payload: EmployeeUpdateRequest,
    current: Employee = Depends(require_permission("employees:edit", "Insufficient permissions to edit")),
    directory: EmployeeDirectory = Depends(get_directory),
    audit_log: AuditLog = Depends(get_audit_log),
) -> Employee:
    target = await _require_target(directory, employee_id)

    if target.matches_email(current.email) and not _is_configured_president(current):
        raise ForbiddenError("Employees cannot edit their own account")

    if payload.role == PRESIDENT_ROLE and target.role != PRESIDENT_ROLE:
        await _refuse_second_president(directory)

    changes = EmployeeUpdate(**payload.changes())
    updated = await asyncio.to_thread(directory.update, employee_id, changes)
    await asyncio.to_thread(
        audit_log.record,
        "update_employee",
        current.email,
        {"id": employee_id, **changes.changes()},
    )
    return updated


@router.delete("/{employee_id}")
async def delete_employee(
    employee_id: str,
    current: Employee = Depends(require_permission("employees:remove", "Insufficient permissions to remove")),
    directory: EmployeeDirectory = Depends(get_directory),
    audit_log: AuditLog = Depends(get_audit_log),
) -> Dict[str, object]:
    target = await _require_target(directory, employee_id)

    if target.matches_email(current.email):
        raise ForbiddenError("Employees cannot remove their own account")
    if _is_configured_president(target) or target.role == PRESIDENT_ROLE:
        raise ForbiddenError("The president account is protected and cannot be removed")

    await asyncio.to_thread(directory.remove, employee_id)
    await asyncio.to_thread(
        audit_log.record,
        "delete_employee",
        current.email,
        {"id": employee_id, "email": target.email},
    )
    return {"success": True, "message": "Employee removed"}


@router.put("/{employee_id}/permissions", response_model=Employee, response_model_exclude_none=True)
async def update_permissions(
    employee_id: str,
    payload: PermissionsUpdateRequest,
    x_head_key: Optional[str] = Header(None),
    directory: EmployeeDirectory = Depends(get_directory),
    audit_log: AuditLog = Depends(get_audit_log),
) -> Employee:
    """Operator override authorised by the ``X-Head-Key`` header."""

    if not head_key_matches(x_head_key):
        raise ForbiddenError("Not authorised")

    changes = EmployeeUpdate(**payload.model_dump(exclude_unset=True))
    updated = await asyncio.to_thread(directory.update, employee_id, changes)
    await asyncio.to_thread(
        audit_log.record,
        "update_permissions",
        PRESIDENT_ROLE,
        {"id": employee_id, **changes.changes()},
    )
    return updated


async def _require_target(directory: EmployeeDirectory, employee_id: str) -> Employee:
    target = await asyncio.to_thread(directory.get, employee_id)
    if target is None:
        raise EmployeeNotFoundError(employee_id)
    return target


async def _refuse_second_president(directory: EmployeeDirectory) -> None:
    # Only enforced once a president identity is configured.
    if not settings.PRESIDENT_EMAIL:
        return
    presidents = await asyncio.to_thread(directory.presidents)
    if presidents:
        raise ForbiddenError(f"Only one president is allowed; the current president is {presidents[0].name}")


def _is_configured_president(employee: Employee) -> bool:
    return bool(settings.PRESIDENT_EMAIL) and employee.matches_email(settings.PRESIDENT_EMAIL)
