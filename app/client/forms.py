"""
View state for the three account forms.

A form holds what the user typed, the field errors currently shown and
purely visual state such as secret visibility. Validation is delegated to
the shared rules in ``app.validators`` with client wording.
"""
import abc
from dataclasses import dataclass, field
from typing import Any, ClassVar, Optional
from datetime import date

from app.validators import (
    LoginInput,
    MessageVariant,
    PasswordChangeInput,
    ProfileInput,
    ValidationResult,
    validate_login_fields,
    validate_password_change,
    validate_profile,
)


@dataclass
class AccountForm(abc.ABC):
    """Common contract used by FormSubmission."""
    endpoint: ClassVar[str] = ""
    method: ClassVar[str] = "POST"
    loading_message: ClassVar[str] = ""
    success_message: ClassVar[str] = ""
    clear_on_success: ClassVar[bool] = False

    errors: dict[str, str] = field(default_factory=dict, init=False)

    @abc.abstractmethod
    def validate(self) -> ValidationResult:
        """Run the shared rules with client wording."""

    @abc.abstractmethod
    def payload(self) -> dict[str, Any]:
        """JSON body sent to the endpoint."""

    def clear(self) -> None:
        self.errors = {}

    def run_validation(self) -> bool:
        """Validate and replace the displayed errors. Returns True when valid."""
        result = self.validate()
        self.errors = dict(result.field_errors)
        return result.valid


@dataclass
class LoginForm(AccountForm):
    endpoint: ClassVar[str] = "/login"
    loading_message: ClassVar[str] = "Logging in..."
    success_message: ClassVar[str] = "Login successful!"

    email: str = ""
    password: str = ""
    show_password: bool = False

    def toggle_password_visibility(self) -> None:
        self.show_password = not self.show_password

    def validate(self) -> ValidationResult:
        return validate_login_fields(LoginInput(identifier=self.email, secret=self.password))

    def payload(self) -> dict[str, Any]:
        return {"identifier": self.email, "secret": self.password}


@dataclass
class PasswordChangeForm(AccountForm):
    endpoint: ClassVar[str] = "/password"
    loading_message: ClassVar[str] = "Changing password..."
    success_message: ClassVar[str] = "Password changed successfully!"
    clear_on_success: ClassVar[bool] = True

    current_password: str = ""
    new_password: str = ""
    confirm_password: str = ""
    show_current_password: bool = False
    show_new_password: bool = False
    show_confirm_password: bool = False

    def toggle_visibility(self, which: str) -> None:
        """Flip one of the three visibility toggles: current, new or confirm."""
        attr = f"show_{which}_password"
        if not hasattr(self, attr):
            raise ValueError(f"Unknown password field: {which}")
        setattr(self, attr, not getattr(self, attr))

    def validate(self) -> ValidationResult:
        return validate_password_change(
            PasswordChangeInput(
                current=self.current_password,
                next=self.new_password,
                confirm_next=self.confirm_password,
            )
        )

    def payload(self) -> dict[str, Any]:
        return {
            "current": self.current_password,
            "next": self.new_password,
            "confirmNext": self.confirm_password,
        }

    def clear(self) -> None:
        self.current_password = ""
        self.new_password = ""
        self.confirm_password = ""
        self.errors = {}


@dataclass
class ProfileForm(AccountForm):
    endpoint: ClassVar[str] = "/profile"
    method: ClassVar[str] = "PUT"
    loading_message: ClassVar[str] = "Updating profile..."
    success_message: ClassVar[str] = "Profile updated successfully!"

    username: str = ""
    full_name: str = ""
    email: str = ""
    phone: str = ""
    birth_date: str = ""
    bio: str = ""
    today: Optional[date] = field(default=None, repr=False)

    def validate(self) -> ValidationResult:
        return validate_profile(
            ProfileInput(
                username=self.username,
                full_name=self.full_name,
                email=self.email,
                phone=self.phone,
                birth_date=self.birth_date,
                bio=self.bio,
            ),
            MessageVariant.CLIENT,
            today=self.today,
        )

    def payload(self) -> dict[str, Any]:
        return {
            "username": self.username,
            "fullName": self.full_name,
            "email": self.email,
            "phone": self.phone,
            "birthDate": self.birth_date,
            "bio": self.bio,
        }

