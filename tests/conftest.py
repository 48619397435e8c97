import pytest
from datetime import date
from typing import AsyncGenerator

from httpx import ASGITransport, AsyncClient

from main import app
from app.client import Notifier
from app.core.config import settings


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
def notifier() -> Notifier:
    return Notifier()


@pytest.fixture
def today() -> date:
    return date(2024, 6, 15)


@pytest.fixture
def valid_profile() -> dict:
    return {
        "username": "validuser",
        "fullName": "Valid User",
        "email": "valid@email.com",
        "phone": "1234567890",
    }


@pytest.fixture
def mock_credentials() -> dict:
    return {
        "email": settings.MOCK_LOGIN_EMAIL,
        "password": settings.MOCK_LOGIN_PASSWORD,
    }
