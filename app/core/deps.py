"""
FastAPI dependencies for dependency injection.
"""
from typing import Annotated

from fastapi import Depends

from app.core.config import Settings, get_settings
from app.services.account_service import AccountService
from app.services.credentials import CredentialVerifier, MockCredentialVerifier


SettingsDep = Annotated[Settings, Depends(get_settings)]


def get_login_verifier(settings: SettingsDep) -> CredentialVerifier:
    """Get the verifier consulted by the login form."""
    return MockCredentialVerifier(settings.MOCK_LOGIN_EMAIL, settings.MOCK_LOGIN_PASSWORD)


def get_password_verifier(settings: SettingsDep) -> CredentialVerifier:
    """Get the verifier consulted for the current password."""
    return MockCredentialVerifier(settings.MOCK_LOGIN_EMAIL, settings.MOCK_CURRENT_PASSWORD)


LoginVerifierDep = Annotated[CredentialVerifier, Depends(get_login_verifier)]
PasswordVerifierDep = Annotated[CredentialVerifier, Depends(get_password_verifier)]


def get_account_service(
    settings: SettingsDep,
    login_verifier: LoginVerifierDep,
    password_verifier: PasswordVerifierDep,
) -> AccountService:
    """Get AccountService instance."""
    return AccountService(login_verifier, password_verifier, settings.MOCK_LOGIN_EMAIL)


AccountServiceDep = Annotated[AccountService, Depends(get_account_service)]
