"""Custom exception hierarchy for the charity back office."""

from __future__ import annotations

from fastapi import status


class ApplicationError(Exception):
    """Base application error with HTTP semantics."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    code: str = "application_error"

    def __init__(self, message: str, *, status_code: int | None = None, code: str | None = None) -> None:
        super().__init__(message)
        if status_code is not None:
            self.status_code = status_code
        if code is not None:
            self.code = code
        self.message = message


class ValidationError(ApplicationError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "validation_error"


class UnauthorizedError(ApplicationError):
    status_code = status.HTTP_401_UNAUTHORIZED
    code = "unauthorized"


class ForbiddenError(ApplicationError):
    status_code = status.HTTP_403_FORBIDDEN
    code = "forbidden"


class NotFoundError(ApplicationError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "not_found"


class ConflictError(ApplicationError):
    status_code = status.HTTP_409_CONFLICT
    code = "conflict"


class EmployeeNotFoundError(NotFoundError):
    """Raised when no employee carries the requested id."""

    code = "employee_not_found"

    def __init__(self, employee_id: str) -> None:
        super().__init__(f"Employee {employee_id} does not exist")
        self.employee_id = employee_id


class DuplicateEmailError(ConflictError):
    """Raised when adding an employee whose email is already in the directory."""

    code = "duplicate_email"

    def __init__(self, email: str) -> None:
        super().__init__("An employee with this email already exists")
        self.email = email
