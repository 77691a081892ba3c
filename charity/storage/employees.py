"""File-backed employee directory."""

from __future__ import annotations

import logging
import secrets
import string
import time
from pathlib import Path
from typing import List, Optional

from charity.core.config import settings
from charity.core.exceptions import DuplicateEmailError, EmployeeNotFoundError
from charity.models.employee import (
    DEFAULT_PERMISSIONS,
    PRESIDENT_PERMISSIONS,
    PRESIDENT_ROLE,
    Employee,
    EmployeeCreate,
    EmployeeUpdate,
)
from charity.storage.json_file import JSONFileStore

logger = logging.getLogger(__name__)

_ID_ALPHABET = string.ascii_lowercase + string.digits


def generate_id(suffix: Optional[str] = None) -> str:
    """Return ``<epoch-millis>-<suffix>``; the suffix defaults to six random base36 characters."""

    if suffix is None:
        suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(6))
    return f"{int(time.time() * 1000)}-{suffix}"


class EmployeeDirectory:
    """Staff accounts and their permissions, kept in one JSON file.

    Lookups scan the whole list; the directory holds tens of records.
    """

    def __init__(self, path: Path | str) -> None:
        self._store = JSONFileStore(path, default={"employees": []})

    @property
    def path(self) -> Path:
        return self._store.path

    def list_employees(self) -> List[Employee]:
        document = self._store.read()
        return [Employee.model_validate(item) for item in document.get("employees") or []]

    def find_by_email(self, email: str) -> Optional[Employee]:
        for employee in self.list_employees():
            if employee.matches_email(email):
                return employee
        return None

    def get(self, employee_id: str) -> Optional[Employee]:
        for employee in self.list_employees():
            if employee.id == employee_id:
                return employee
        return None

    def add(self, payload: EmployeeCreate) -> Employee:
        with self._store.transaction() as document:
            records = document.setdefault("employees", [])
            email = str(payload.email)
            if any(str(item.get("email", "")).lower() == email.lower() for item in records):
                raise DuplicateEmailError(email)

            employee = Employee(
                id=generate_id(),
                name=payload.name,
                email=email,
                role=payload.role or "",
                phone=payload.phone,
                notes=payload.notes,
                active=payload.active,
                permissions=list(payload.permissions) if payload.permissions is not None else list(DEFAULT_PERMISSIONS),
            )
            records.append(employee.to_record())

        logger.info("Employee added: %s", employee.id)
        return employee

    def update(self, employee_id: str, changes: EmployeeUpdate) -> Employee:
        with self._store.transaction() as document:
            records = document.setdefault("employees", [])
            index = _index_of(records, employee_id)
            updated = changes.apply_to(Employee.model_validate(records[index]))
            records[index] = updated.to_record()

        logger.info("Employee updated: %s fields=%s", employee_id, sorted(changes.changes()))
        return updated

    def remove(self, employee_id: str) -> Employee:
        with self._store.transaction() as document:
            records = document.setdefault("employees", [])
            index = _index_of(records, employee_id)
            removed = Employee.model_validate(records.pop(index))

        logger.info("Employee removed: %s", employee_id)
        return removed

    def ensure_president(self, email: Optional[str] = None, *, name: Optional[str] = None) -> Optional[Employee]:
        """Create the president account once; returns it, or ``None`` when nothing was created."""

        president_email = email if email is not None else settings.PRESIDENT_EMAIL
        if not president_email:
            return None

        with self._store.transaction() as document:
            records = document.setdefault("employees", [])
            if any(str(item.get("email", "")).lower() == president_email.lower() for item in records):
                return None

            president = Employee(
                id=generate_id("president"),
                name=name or settings.PRESIDENT_NAME,
                email=president_email,
                role=PRESIDENT_ROLE,
                active=True,
                permissions=list(PRESIDENT_PERMISSIONS),
            )
            records.append(president.to_record())

        logger.info("President account created for %s", president_email)
        return president

    def presidents(self) -> List[Employee]:
        return [employee for employee in self.list_employees() if employee.role == PRESIDENT_ROLE]


def _index_of(records: list, employee_id: str) -> int:
    for index, item in enumerate(records):
        if item.get("id") == employee_id:
            return index
    raise EmployeeNotFoundError(employee_id)
