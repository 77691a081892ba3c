"""Audit trail endpoint."""

from __future__ import annotations

import asyncio
from typing import List, Optional

from fastapi import APIRouter, Depends, Header, Query
from fastapi.security import HTTPAuthorizationCredentials
from pydantic import BaseModel

from charity.api.dependencies import get_audit_log, get_directory, http_bearer, resolve_employee
from charity.core.exceptions import ForbiddenError, UnauthorizedError
from charity.core.security import has_permission, head_key_matches
from charity.models import AuditEntry
from charity.storage import EmployeeDirectory
from charity.utils.audit import AuditLog
from charity.utils.validators import parse_limit, parse_timestamp

router = APIRouter(prefix="/audit", tags=["audit"])

DEFAULT_LIMIT = 1000
MAX_LIMIT = 5000


class AuditEntries(BaseModel):
    entries: List[AuditEntry]


@router.get("", response_model=AuditEntries, response_model_exclude_none=True)
async def list_audit_entries(
    limit: Optional[str] = None,
    action: Optional[str] = None,
    since: Optional[str] = Query(None, alias="from"),
    until: Optional[str] = Query(None, alias="to"),
    x_head_key: Optional[str] = Header(None),
    bearer_token: Optional[HTTPAuthorizationCredentials] = Depends(http_bearer),
    directory: EmployeeDirectory = Depends(get_directory),
    audit_log: AuditLog = Depends(get_audit_log),
) -> AuditEntries:
    """Newest-first audit entries; requires the operator head key or ``audit:view``.

    Unreadable ``limit``, ``from`` and ``to`` values fall back to their defaults.
    """

    if not head_key_matches(x_head_key):
        employee = await resolve_employee(bearer_token, directory)
        if employee is None:
            raise UnauthorizedError("Authentication required")
        if not has_permission(employee, "audit:view"):
            raise ForbiddenError("Not authorised")

    entries = await asyncio.to_thread(
        audit_log.entries,
        parse_limit(limit, DEFAULT_LIMIT, MAX_LIMIT),
        action=(action or "").strip() or None,
        since=parse_timestamp(since),
        until=parse_timestamp(until),
    )
    return AuditEntries(entries=entries)
