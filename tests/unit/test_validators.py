"""
Unit tests for the shared form validation rules.
"""
import pytest
from datetime import date, timedelta

from app.validators import (
    LoginInput,
    MessageVariant,
    PasswordChangeInput,
    ProfileInput,
    ValidationResult,
    first_login_error,
    validate_login_fields,
    validate_password_change,
    validate_profile,
)


# ──────────────────────────────────────────────
# Login
# ──────────────────────────────────────────────

class TestLoginRules:
    """Client reports per field; server reports the first failing rule."""

    def test_client_reports_both_fields(self):
        result = validate_login_fields(LoginInput(identifier="", secret="123"))
        assert result.field_errors == {
            "email": "Email is required.",
            "password": "Password must be at least 6 characters.",
        }
        assert not result.valid

    def test_client_empty_secret_is_a_length_error(self):
        result = validate_login_fields(LoginInput(identifier="a@b.co", secret=""))
        assert result.field_errors == {"password": "Password must be at least 6 characters."}

    def test_client_valid(self):
        result = validate_login_fields(LoginInput(identifier="a@b.co", secret="123456"))
        assert result.valid
        assert result.field_errors == {}

    @pytest.mark.parametrize(
        "identifier,secret",
        [("", "password123"), ("test@example.com", ""), ("", ""), ("", "12")],
    )
    def test_server_merges_missing_fields(self, identifier, secret):
        assert first_login_error(LoginInput(identifier, secret)) == "Email and password are required."

    def test_server_short_secret(self):
        assert first_login_error(LoginInput("test@example.com", "123")) == (
            "Password must be at least 6 characters."
        )

    def test_server_passes_well_formed_input(self):
        assert first_login_error(LoginInput("anyone@example.com", "wrongpassword")) is None

    def test_secret_length_counts_characters(self):
        # Three emoji are six UTF-16 units but three characters
        secret = "\U0001F511" * 3
        assert first_login_error(LoginInput("a@b.co", secret)) == (
            "Password must be at least 6 characters."
        )
        assert "password" in validate_login_fields(LoginInput("a@b.co", secret)).field_errors


# ──────────────────────────────────────────────
# Password change
# ──────────────────────────────────────────────

class TestPasswordChangeRules:

    def test_all_empty(self):
        result = validate_password_change(PasswordChangeInput("", "", ""))
        assert result.field_errors == {
            "currentPassword": "Current password is required.",
            "newPassword": "New password is required.",
            "confirmPassword": "Password confirmation is required.",
        }

    def test_multiple_errors(self):
        result = validate_password_change(PasswordChangeInput("", "123", "different"))
        assert result.field_errors == {
            "currentPassword": "Current password is required.",
            "newPassword": "New password must be at least 6 characters.",
            "confirmPassword": "Passwords do not match.",
        }

    def test_mismatch_only_checked_when_next_present(self):
        result = validate_password_change(PasswordChangeInput("password123", "", "something"))
        assert "confirmPassword" not in result.field_errors
        assert result.field_errors["newPassword"] == "New password is required."

    @pytest.mark.parametrize("value", ["abc", "password123", "a-very-long-password"])
    def test_same_as_current_overrides_next(self, value):
        result = validate_password_change(PasswordChangeInput(value, value, value))
        assert result.field_errors["newPassword"] == (
            "New password must be different from current password."
        )

    def test_same_as_current_when_next_otherwise_valid(self):
        result = validate_password_change(
            PasswordChangeInput("password123", "password123", "password123")
        )
        assert result.field_errors == {
            "newPassword": "New password must be different from current password."
        }

    def test_minimum_length_is_valid(self):
        result = validate_password_change(PasswordChangeInput("password123", "123456", "123456"))
        assert result.valid


# ──────────────────────────────────────────────
# Profile
# ──────────────────────────────────────────────

def _profile(**overrides) -> ProfileInput:
    fields = {
        "username": "validuser",
        "full_name": "Valid User",
        "email": "valid@email.com",
        "phone": "1234567890",
    }
    fields.update(overrides)
    return ProfileInput(**fields)


class TestProfileRules:

    def test_valid_minimal(self, today):
        assert validate_profile(_profile(), today=today).valid

    def test_valid_with_optional_fields(self, today):
        result = validate_profile(
            _profile(birth_date="1990-01-01", bio="This is a valid bio."), today=today
        )
        assert result.field_errors == {}

    def test_empty_form_reports_every_required_field(self, today):
        result = validate_profile(ProfileInput(), today=today)
        assert result.field_errors == {
            "username": "Username must be at least 6 characters.",
            "fullName": "Full name is required.",
            "email": "Must be a valid email format.",
            "phone": "Phone must be 10-15 digits.",
        }

    def test_username_boundary(self, today):
        assert "username" in validate_profile(_profile(username="short"), today=today).field_errors
        assert validate_profile(_profile(username="sixsix"), today=today).valid

    def test_blank_full_name(self, today):
        result = validate_profile(_profile(full_name="   "), today=today)
        assert result.field_errors == {"fullName": "Full name is required."}

    @pytest.mark.parametrize("email", ["invalid-email", "a@b", "a b@c.d", "@b.co", "a@.c"])
    def test_invalid_email(self, email, today):
        result = validate_profile(_profile(email=email), today=today)
        assert result.field_errors == {"email": "Must be a valid email format."}

    def test_email_wording_per_variant(self, today):
        client = validate_profile(_profile(email="nope"), MessageVariant.CLIENT, today=today)
        server = validate_profile(_profile(email="nope"), MessageVariant.SERVER, today=today)
        assert client.field_errors["email"] == "Invalid email format."
        assert server.field_errors["email"] == "Must be a valid email format."

    @pytest.mark.parametrize("length", [9, 16])
    def test_phone_length_out_of_range(self, length, today):
        result = validate_profile(_profile(phone="1" * length), today=today)
        assert result.field_errors == {"phone": "Phone must be 10-15 digits."}

    @pytest.mark.parametrize("length", [10, 12, 15])
    def test_phone_length_in_range(self, length, today):
        assert validate_profile(_profile(phone="9" * length), today=today).valid

    @pytest.mark.parametrize("phone", ["+1234567890", "123-456-7890", "12345abcde", "1234567890\n"])
    def test_phone_digits_only(self, phone, today):
        assert "phone" in validate_profile(_profile(phone=phone), today=today).field_errors

    def test_birth_date_today_is_valid(self, today):
        assert validate_profile(_profile(birth_date=today.isoformat()), today=today).valid

    def test_birth_date_tomorrow(self, today):
        tomorrow = (today + timedelta(days=1)).isoformat()
        result = validate_profile(_profile(birth_date=tomorrow), today=today)
        assert result.field_errors == {"birthDate": "Birth date cannot be in the future."}

    def test_birth_date_with_time_component(self, today):
        result = validate_profile(_profile(birth_date="2024-06-15T23:59:59"), today=today)
        assert result.valid

    def test_birth_date_unparseable(self, today):
        result = validate_profile(_profile(birth_date="not-a-date"), today=today)
        assert result.field_errors == {"birthDate": "Birth date must be a valid date."}

    def test_birth_date_defaults_to_current_day(self):
        future = (date.today() + timedelta(days=30)).isoformat()
        assert "birthDate" in validate_profile(_profile(birth_date=future)).field_errors

    def test_bio_boundary(self, today):
        assert validate_profile(_profile(bio="a" * 160), today=today).valid
        result = validate_profile(_profile(bio="a" * 161), today=today)
        assert result.field_errors == {"bio": "Bio must be 160 characters or less."}

    def test_bio_length_counts_characters(self, today):
        assert validate_profile(_profile(bio="\U0001F600" * 160), today=today).valid
        result = validate_profile(_profile(bio="\U0001F600" * 161), today=today)
        assert result.field_errors == {"bio": "Bio must be 160 characters or less."}


class TestValidationResult:

    def test_later_message_overwrites(self):
        result = ValidationResult()
        result.add("field", "first")
        result.add("field", "second")
        assert result.field_errors == {"field": "second"}
        assert result.to_dict() == {"valid": False, "field_errors": {"field": "second"}}
