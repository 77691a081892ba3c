"""Security utilities: staff access tokens and capability checks."""

from __future__ import annotations

import hmac
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Iterable, Optional

from jose import JWTError, jwt

from charity.core.config import settings
from charity.core.exceptions import UnauthorizedError
from charity.models.employee import Employee

WILDCARD_PERMISSION = "*"


def create_access_token(
    subject: str,
    expires_delta: timedelta | None = None,
    claims: Optional[Dict[str, Any]] = None,
) -> str:
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))
    payload: Dict[str, Any] = {
        "sub": subject,
        "exp": expire,
        "iat": now,
    }
    if claims:
        payload.update(claims)
    return jwt.encode(payload, settings.SECRET_KEY, algorithm="HS256")


def verify_access_token(token: str) -> Dict[str, Any]:
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=["HS256"])
        return payload
    except JWTError as exc:
        raise UnauthorizedError("Invalid token") from exc


def has_permission(
    employee: Optional[Employee],
    capability: str,
    superuser_roles: Optional[Iterable[str]] = None,
) -> bool:
    """Return whether ``employee`` holds ``capability``.

    Superuser roles (``SUPERUSER_ROLES``) pass every check; otherwise the
    capability, or the ``*`` wildcard, must be among the employee's permissions.
    """

    if employee is None:
        return False
    roles = set(settings.SUPERUSER_ROLES if superuser_roles is None else superuser_roles)
    if employee.role and employee.role in roles:
        return True
    return capability in employee.permissions or WILDCARD_PERMISSION in employee.permissions


def head_key_matches(provided: Optional[str]) -> bool:
    """Constant-time comparison against the configured ``HEAD_KEY``; false when unset."""

    expected = settings.HEAD_KEY
    if not expected or not provided:
        return False
    return hmac.compare_digest(expected.encode("utf-8"), provided.encode("utf-8"))
