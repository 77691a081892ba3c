from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from charity.utils.validators import INVALID_EMAIL_MESSAGE, is_email, rule

DEFAULT_PERMISSIONS: tuple[str, ...] = (
    "beneficiaries:view",
    "jobs:view",
    "contact:view",
    "volunteers:view",
)

PRESIDENT_PERMISSIONS: tuple[str, ...] = DEFAULT_PERMISSIONS + (
    "analytics:view",
    "employees:add",
    "employees:remove",
    "employees:edit",
    "audit:view",
)

PRESIDENT_ROLE = "president"


class Employee(BaseModel):
    id: str
    name: str
    email: str
    role: str = ""  # free text: staff, manager, president, accountant, ...
    phone: Optional[str] = None
    notes: Optional[str] = None
    active: bool = True
    permissions: List[str] = Field(default_factory=list)

    def to_record(self) -> Dict[str, Any]:
        """Serialize for the directory file; absent optional fields are omitted."""

        return self.model_dump(mode="json", exclude_none=True)

    def matches_email(self, email: str) -> bool:
        return self.email.lower() == email.strip().lower()


class EmployeeCreate(BaseModel):
    name: str
    email: str
    role: Optional[str] = None
    phone: Optional[str] = None
    notes: Optional[str] = None
    active: bool = True
    permissions: Optional[List[str]] = None

    @field_validator("email")
    def _email(cls, value: str) -> str:
        # Stored exactly as given; matching is case-insensitive.
        rule(is_email(value), INVALID_EMAIL_MESSAGE)
        return value


class EmployeeUpdate(BaseModel):
    """Partial update; a field counts as provided only when it was explicitly set."""

    name: Optional[str] = None
    phone: Optional[str] = None
    notes: Optional[str] = None
    role: Optional[str] = None
    active: Optional[bool] = None
    permissions: Optional[List[str]] = None

    def changes(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True)

    def apply_to(self, employee: Employee) -> Employee:
        record = employee.to_record()
        for field, value in self.changes().items():
            if value is None:
                if field == "role":
                    record["role"] = ""
                elif field in {"phone", "notes"}:
                    record.pop(field, None)
                # null name/active/permissions carries no meaning; keep the stored value
                continue
            record[field] = value
        return Employee.model_validate(record)
