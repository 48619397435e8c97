from pydantic import AliasChoices, BaseModel, Field

from app.schemas.common import FormRequest
from app.validators import ProfileInput


class ProfileUpdateRequest(FormRequest):
    """Schema for profile update. birthDate and bio may be empty or absent."""
    username: str = ""
    full_name: str = Field("", validation_alias=AliasChoices("fullName", "full_name"))
    email: str = ""
    phone: str = ""
    birth_date: str = Field("", validation_alias=AliasChoices("birthDate", "birth_date"))
    bio: str = ""

    def to_input(self) -> ProfileInput:
        return ProfileInput(
            username=self.username,
            full_name=self.full_name,
            email=self.email,
            phone=self.phone,
            birth_date=self.birth_date,
            bio=self.bio,
        )


class ProfileUpdateResponse(BaseModel):
    success: bool = True
