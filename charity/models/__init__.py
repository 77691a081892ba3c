from .audit import AuditEntry
from .employee import (
    DEFAULT_PERMISSIONS,
    PRESIDENT_PERMISSIONS,
    PRESIDENT_ROLE,
    Employee,
    EmployeeCreate,
    EmployeeUpdate,
)
from .forms import BeneficiaryInput, ContactMessageInput, JobApplicationInput, VolunteerInput

__all__ = [
    "AuditEntry",
    "BeneficiaryInput",
    "ContactMessageInput",
    "DEFAULT_PERMISSIONS",
    "Employee",
    "EmployeeCreate",
    "EmployeeUpdate",
    "JobApplicationInput",
    "PRESIDENT_PERMISSIONS",
    "PRESIDENT_ROLE",
    "VolunteerInput",
]
