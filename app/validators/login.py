"""
Login form rules.

The client reports each problem on its own field; the server answers with a
single message for the first failing rule. Both behaviours are kept.
"""
from dataclasses import dataclass
from typing import Optional

from app.validators.base import MIN_PASSWORD_LENGTH, ValidationResult

FIELD_IDENTIFIER = "email"
FIELD_SECRET = "password"

MSG_IDENTIFIER_REQUIRED = "Email is required."
MSG_CREDENTIALS_REQUIRED = "Email and password are required."
MSG_SECRET_TOO_SHORT = f"Password must be at least {MIN_PASSWORD_LENGTH} characters."


@dataclass(frozen=True)
class LoginInput:
    identifier: str = ""
    secret: str = ""


def validate_login_fields(data: LoginInput) -> ValidationResult:
    """Client-side check: both rules run, both messages may be reported."""
    result = ValidationResult()
    if not data.identifier:
        result.add(FIELD_IDENTIFIER, MSG_IDENTIFIER_REQUIRED)
    if len(data.secret) < MIN_PASSWORD_LENGTH:
        result.add(FIELD_SECRET, MSG_SECRET_TOO_SHORT)
    return result


def first_login_error(data: LoginInput) -> Optional[str]:
    """Server-side check: message of the first failing rule, or None."""
    if not data.identifier or not data.secret:
        return MSG_CREDENTIALS_REQUIRED
    if len(data.secret) < MIN_PASSWORD_LENGTH:
        return MSG_SECRET_TOO_SHORT
    return None
