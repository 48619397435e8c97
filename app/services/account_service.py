"""
AccountService: the authoritative gate for the three account forms.

Each operation:
1. Re-runs the shared validation rules (server wording)
2. Short-circuits with a typed error on failure
3. Consults the credential verifier where the flow needs it
4. Performs the mock action and reports the outcome

Nothing is persisted. Secrets never reach the logs.
"""
from typing import Any, Optional

from app.core.logging import get_logger, redact
from app.services.credentials import CredentialVerifier
from app.validators import (
    LoginInput,
    MessageVariant,
    PasswordChangeInput,
    ProfileInput,
    first_login_error,
    validate_password_change,
    validate_profile,
)

logger = get_logger(__name__)

MSG_LOGIN_OK = "Login successful!"
MSG_INVALID_CREDENTIALS = "Invalid credentials."
MSG_VALIDATION_FAILED = "Validation failed"
MSG_CURRENT_PASSWORD_INCORRECT = "Current password is incorrect."
MSG_PASSWORD_CHANGED = "Password changed successfully!"


class AccountError(Exception):
    """Base error for a rejected form submission."""
    status_code = 400
    errors: Optional[dict[str, str]] = None

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class LoginRejected(AccountError):
    """Login input failed a server rule (single combined message)."""
    pass


class FieldValidationError(AccountError):
    """One or more fields failed validation."""

    def __init__(self, errors: dict[str, str]):
        self.errors = dict(errors)
        super().__init__(MSG_VALIDATION_FAILED)


class AuthorizationFailed(AccountError):
    """The mock credential oracle rejected the supplied secret."""
    status_code = 401


class AccountService:
    def __init__(
        self,
        login_verifier: CredentialVerifier,
        password_verifier: CredentialVerifier,
        account_identifier: str,
    ):
        self.login_verifier = login_verifier
        self.password_verifier = password_verifier
        # Identifier whose password the password form changes (no sessions)
        self.account_identifier = account_identifier

    def login(self, data: LoginInput) -> dict[str, Any]:
        error = first_login_error(data)
        if error:
            logger.info("login_rejected", reason=error)
            raise LoginRejected(error)

        if not self.login_verifier.verify(data.identifier, data.secret):
            logger.info("login_unauthorized", identifier=data.identifier)
            raise AuthorizationFailed(MSG_INVALID_CREDENTIALS)

        logger.info("login_succeeded", identifier=data.identifier)
        return {"message": MSG_LOGIN_OK}

    def change_password(self, data: PasswordChangeInput) -> dict[str, Any]:
        result = validate_password_change(data)
        if not result.valid:
            logger.info("password_change_invalid", fields=sorted(result.field_errors))
            raise FieldValidationError(result.field_errors)

        if not self.password_verifier.verify(self.account_identifier, data.current):
            logger.info("password_change_unauthorized")
            raise AuthorizationFailed(MSG_CURRENT_PASSWORD_INCORRECT)

        record = {"currentPassword": data.current, "newPassword": data.next}
        logger.info("password_changed", **redact(record, "currentPassword", "newPassword"))
        return {"message": MSG_PASSWORD_CHANGED, "success": True}

    def update_profile(self, data: ProfileInput) -> dict[str, Any]:
        result = validate_profile(data, MessageVariant.SERVER)
        if not result.valid:
            logger.info("profile_update_invalid", fields=sorted(result.field_errors))
            raise FieldValidationError(result.field_errors)

        logger.info(
            "profile_updated",
            username=data.username,
            full_name=data.full_name,
            email=data.email,
            phone=data.phone,
            birth_date=data.birth_date,
            bio=data.bio,
        )
        return {"success": True}
