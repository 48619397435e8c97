"""
Password change rules, shared verbatim by the form client and the API.
"""
from dataclasses import dataclass

from app.validators.base import MIN_PASSWORD_LENGTH, ValidationResult

FIELD_CURRENT = "currentPassword"
FIELD_NEXT = "newPassword"
FIELD_CONFIRM = "confirmPassword"

MSG_CURRENT_REQUIRED = "Current password is required."
MSG_NEXT_REQUIRED = "New password is required."
MSG_NEXT_TOO_SHORT = f"New password must be at least {MIN_PASSWORD_LENGTH} characters."
MSG_CONFIRM_REQUIRED = "Password confirmation is required."
MSG_MISMATCH = "Passwords do not match."
MSG_NEXT_SAME_AS_CURRENT = "New password must be different from current password."


@dataclass(frozen=True)
class PasswordChangeInput:
    current: str = ""
    next: str = ""
    confirm_next: str = ""


def validate_password_change(data: PasswordChangeInput) -> ValidationResult:
    """
    Evaluate every rule; rules on different fields never short-circuit.
    The same-as-current check runs last and replaces any earlier
    ``newPassword`` message.
    """
    result = ValidationResult()

    if not data.current:
        result.add(FIELD_CURRENT, MSG_CURRENT_REQUIRED)

    if not data.next:
        result.add(FIELD_NEXT, MSG_NEXT_REQUIRED)
    elif len(data.next) < MIN_PASSWORD_LENGTH:
        result.add(FIELD_NEXT, MSG_NEXT_TOO_SHORT)

    if not data.confirm_next:
        result.add(FIELD_CONFIRM, MSG_CONFIRM_REQUIRED)
    elif data.next and data.confirm_next != data.next:
        result.add(FIELD_CONFIRM, MSG_MISMATCH)

    if data.current and data.next and data.current == data.next:
        result.add(FIELD_NEXT, MSG_NEXT_SAME_AS_CURRENT)

    return result
