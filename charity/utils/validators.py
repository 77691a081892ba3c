"""Input validation helpers."""

from __future__ import annotations

import re
from datetime import datetime
from typing import Optional, Tuple
from urllib.parse import urlparse

from email_validator import EmailNotValidError, validate_email
from pydantic import ValidationError
from pydantic_core import PydanticCustomError

PHONE_PATTERN = re.compile(r"^[0-9]{9,15}$")
NATIONAL_ID_PATTERN = re.compile(r"^[0-9]{10}$")
ARABIC_NAME_PATTERN = re.compile(r"^[\u0600-\u06FF\s]+$")

DEFAULT_INVALID_MESSAGE = "Invalid data"
INVALID_EMAIL_MESSAGE = "Email address is invalid"


def rule(condition: bool, message: str) -> None:
    """Fail field validation with ``message`` when ``condition`` does not hold."""

    if not condition:
        raise PydanticCustomError("form_rule", message)


def is_email(value: str) -> bool:
    """Syntax check shared by the public forms and the employee directory."""

    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def is_url(value: str) -> bool:
    parsed = urlparse(value)
    return bool(parsed.scheme and parsed.netloc)


def parse_limit(raw: Optional[str], default: int, maximum: Optional[int] = None) -> int:
    """Lenient query-string limit: anything unusable falls back to ``default``."""

    try:
        value = int(float(raw)) if raw not in (None, "") else default
    except (TypeError, ValueError, OverflowError):
        return default
    if value < 1 or (maximum is not None and value > maximum):
        return default
    return value


def parse_timestamp(raw: Optional[str]) -> Optional[datetime]:
    """ISO-8601 date or timestamp; unreadable input is treated as absent."""

    if not raw or not raw.strip():
        return None
    try:
        return datetime.fromisoformat(raw.strip().replace("Z", "+00:00"))
    except ValueError:
        return None


def first_error(exc: ValidationError) -> Tuple[str, str]:
    """Return ``(message, field_path)`` of the first error pydantic reported."""

    errors = exc.errors()
    if not errors:
        return DEFAULT_INVALID_MESSAGE, ""
    error = errors[0]
    field = ".".join(str(part) for part in error.get("loc", ()))
    return error.get("msg") or DEFAULT_INVALID_MESSAGE, field
