from pydantic import AliasChoices, Field

from app.schemas.common import FormRequest, MessageResponse
from app.validators import LoginInput, PasswordChangeInput


class LoginRequest(FormRequest):
    """Schema for login request."""
    identifier: str = Field("", validation_alias=AliasChoices("identifier", "email"))
    secret: str = Field("", validation_alias=AliasChoices("secret", "password"))

    def to_input(self) -> LoginInput:
        return LoginInput(identifier=self.identifier, secret=self.secret)


class PasswordChangeRequest(FormRequest):
    """Schema for password change."""
    current: str = Field("", validation_alias=AliasChoices("current", "currentPassword"))
    next: str = Field("", validation_alias=AliasChoices("next", "newPassword"))
    confirm_next: str = Field(
        "", validation_alias=AliasChoices("confirmNext", "confirmPassword", "confirm_next")
    )

    def to_input(self) -> PasswordChangeInput:
        return PasswordChangeInput(
            current=self.current, next=self.next, confirm_next=self.confirm_next
        )


class PasswordChangeResponse(MessageResponse):
    success: bool = True
