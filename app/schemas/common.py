from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


class FormRequest(BaseModel):
    """Base for form payloads. Missing or null string fields count as empty input."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("*", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return "" if value is None else value


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    """Shape of every 4xx/5xx body."""
    message: str
    errors: Optional[dict[str, str]] = None
