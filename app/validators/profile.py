"""
Profile update rules.

Six independent checks, no cross-field rules. Every failing field is
reported in one pass.
"""
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from app.validators.base import (
    EMAIL_PATTERN,
    MAX_BIO_LENGTH,
    MIN_USERNAME_LENGTH,
    PHONE_PATTERN,
    MessageVariant,
    ValidationResult,
)

FIELD_USERNAME = "username"
FIELD_FULL_NAME = "fullName"
FIELD_EMAIL = "email"
FIELD_PHONE = "phone"
FIELD_BIRTH_DATE = "birthDate"
FIELD_BIO = "bio"

MSG_USERNAME_TOO_SHORT = f"Username must be at least {MIN_USERNAME_LENGTH} characters."
MSG_FULL_NAME_REQUIRED = "Full name is required."
MSG_PHONE_INVALID = "Phone must be 10-15 digits."
MSG_BIRTH_DATE_IN_FUTURE = "Birth date cannot be in the future."
MSG_BIRTH_DATE_INVALID = "Birth date must be a valid date."
MSG_BIO_TOO_LONG = f"Bio must be {MAX_BIO_LENGTH} characters or less."

EMAIL_MESSAGES = {
    MessageVariant.CLIENT: "Invalid email format.",
    MessageVariant.SERVER: "Must be a valid email format.",
}


@dataclass(frozen=True)
class ProfileInput:
    username: str = ""
    full_name: str = ""
    email: str = ""
    phone: str = ""
    birth_date: str = ""
    bio: str = ""


def parse_birth_date(value: str) -> Optional[date]:
    """Parse an ISO date (or datetime) string. Returns None when unparseable."""
    try:
        return date.fromisoformat(value)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(value).date()
    except ValueError:
        return None


def validate_profile(
    data: ProfileInput,
    variant: MessageVariant = MessageVariant.SERVER,
    today: Optional[date] = None,
) -> ValidationResult:
    result = ValidationResult()
    today = today or date.today()

    # An empty username fails the length check, no separate message
    if len(data.username) < MIN_USERNAME_LENGTH:
        result.add(FIELD_USERNAME, MSG_USERNAME_TOO_SHORT)

    if not data.full_name.strip():
        result.add(FIELD_FULL_NAME, MSG_FULL_NAME_REQUIRED)

    if not EMAIL_PATTERN.fullmatch(data.email):
        result.add(FIELD_EMAIL, EMAIL_MESSAGES[variant])

    if not PHONE_PATTERN.fullmatch(data.phone):
        result.add(FIELD_PHONE, MSG_PHONE_INVALID)

    if data.birth_date:
        born = parse_birth_date(data.birth_date)
        if born is None:
            result.add(FIELD_BIRTH_DATE, MSG_BIRTH_DATE_INVALID)
        elif born > today:
            result.add(FIELD_BIRTH_DATE, MSG_BIRTH_DATE_IN_FUTURE)

    if data.bio and len(data.bio) > MAX_BIO_LENGTH:
        result.add(FIELD_BIO, MSG_BIO_TOO_LONG)

    return result
