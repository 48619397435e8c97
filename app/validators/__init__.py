# Shared form validation rules

from app.validators.base import MessageVariant, ValidationResult
from app.validators.login import LoginInput, first_login_error, validate_login_fields
from app.validators.password import PasswordChangeInput, validate_password_change
from app.validators.profile import ProfileInput, validate_profile

__all__ = [
    "MessageVariant",
    "ValidationResult",
    "LoginInput",
    "first_login_error",
    "validate_login_fields",
    "PasswordChangeInput",
    "validate_password_change",
    "ProfileInput",
    "validate_profile",
]
