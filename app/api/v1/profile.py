from fastapi import APIRouter

from app.core.deps import AccountServiceDep
from app.schemas.common import ErrorResponse
from app.schemas.profile import ProfileUpdateRequest, ProfileUpdateResponse

router = APIRouter(tags=["profile"])


@router.put("/profile", response_model=ProfileUpdateResponse, responses={400: {"model": ErrorResponse}})
async def update_profile(data: ProfileUpdateRequest, service: AccountServiceDep):
    """Validate every profile field and report all failures at once."""
    return service.update_profile(data.to_input())
