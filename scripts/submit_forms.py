"""
Smoke check against a running server: submits each form once with the mock
credentials and prints the outcome.

    uvicorn main:app --port 8000
    python scripts/submit_forms.py
"""
import asyncio

from app.client import (
    FormSubmission,
    LoginForm,
    PasswordChangeForm,
    ProfileForm,
    create_client,
)
from app.core.config import settings
from app.core.logging import setup_logging


async def main():
    forms = [
        LoginForm(email=settings.MOCK_LOGIN_EMAIL, password=settings.MOCK_LOGIN_PASSWORD),
        PasswordChangeForm(
            current_password=settings.MOCK_CURRENT_PASSWORD,
            new_password="newpassword123",
            confirm_password="newpassword123",
        ),
        ProfileForm(
            username="validuser",
            full_name="John Doe",
            email="john.doe@example.com",
            phone="1234567890",
            birth_date="1990-01-01",
        ),
    ]

    async with create_client() as client:
        for form in forms:
            submission = FormSubmission(form, client)
            outcome = await submission.submit()
            print(f"{form.method} {form.endpoint}: {outcome.state.value} ({outcome.status_code}) {outcome.message}")
            if form.errors:
                print(f"  field errors: {form.errors}")


if __name__ == "__main__":
    setup_logging()
    asyncio.run(main())
