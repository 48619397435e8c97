"""
Credential verification seam.

The handlers only ever ask "does this secret belong to this identifier?".
A real credential store can replace the mock without touching validation.
"""
import hmac
from typing import Protocol


class CredentialVerifier(Protocol):
    def verify(self, identifier: str, secret: str) -> bool:
        ...


class MockCredentialVerifier:
    """Accepts exactly one fixed (identifier, secret) pair."""

    def __init__(self, identifier: str, secret: str):
        self._identifier = identifier
        self._secret = secret

    def verify(self, identifier: str, secret: str) -> bool:
        same_identifier = hmac.compare_digest(identifier.encode(), self._identifier.encode())
        same_secret = hmac.compare_digest(secret.encode(), self._secret.encode())
        return same_identifier and same_secret
