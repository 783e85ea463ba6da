from typing import Optional

from pydantic import BaseModel, Field, field_validator

from .common import CamelRequest, UTCDateTime


class TeamCreate(CamelRequest):
    name: str = Field(min_length=1, max_length=200)
    description: Optional[str] = None

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Team name must not be empty")
        return value


class TeamUpdate(CamelRequest):
    """Partial update. Omitted or empty fields keep their stored value."""
    name: Optional[str] = Field(default=None, max_length=200)
    description: Optional[str] = None

    @field_validator("name")
    @classmethod
    def _strip_name(cls, value: Optional[str]) -> Optional[str]:
        return value.strip() if value is not None else None


class TeamRead(BaseModel):
    id: int
    organisation_id: int
    name: str
    description: Optional[str] = None
    created_at: UTCDateTime

    model_config = {"from_attributes": True}
