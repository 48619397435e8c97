"""
Shared building blocks for the form validators.

Every validator is a pure function of its input. The same rule set serves the
browser-facing form client and the HTTP handlers; the only difference is the
wording of a few messages, selected with ``MessageVariant``.
"""
import enum
import re
from dataclasses import dataclass, field


class MessageVariant(str, enum.Enum):
    """Which caller a validation message is worded for."""
    CLIENT = "CLIENT"
    SERVER = "SERVER"


MIN_PASSWORD_LENGTH = 6
MIN_USERNAME_LENGTH = 6
MAX_BIO_LENGTH = 160

EMAIL_PATTERN = re.compile(r"^\S+@\S+\.\S+$")
PHONE_PATTERN = re.compile(r"^\d{10,15}$")


@dataclass
class ValidationResult:
    """Field error map. At most one message per field; later rules win."""
    field_errors: dict[str, str] = field(default_factory=dict)

    @property
    def valid(self) -> bool:
        return not self.field_errors

    def add(self, field_name: str, message: str) -> None:
        self.field_errors[field_name] = message

    def to_dict(self) -> dict:
        return {"valid": self.valid, "field_errors": dict(self.field_errors)}
