"""
Login and password change endpoints.

Validation failures and credential rejections are raised by AccountService
and rendered by the AccountError handler.
"""
from fastapi import APIRouter

from app.core.deps import AccountServiceDep
from app.schemas.auth import LoginRequest, PasswordChangeRequest, PasswordChangeResponse
from app.schemas.common import ErrorResponse, MessageResponse

router = APIRouter(tags=["auth"])

_ERRORS = {400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}}


@router.post("/login", response_model=MessageResponse, responses=_ERRORS)
async def login(data: LoginRequest, service: AccountServiceDep):
    """
    Check the submitted credentials against the mock oracle.
    Only the first failing rule is reported.
    """
    return service.login(data.to_input())


@router.post("/password", response_model=PasswordChangeResponse, responses=_ERRORS)
async def change_password(data: PasswordChangeRequest, service: AccountServiceDep):
    """Validate all three fields, then check the current password."""
    return service.change_password(data.to_input())
