from typing import Optional

from pydantic import BaseModel, EmailStr, Field

from .common import CamelRequest, UTCDateTime


class EmployeeWrite(CamelRequest):
    """Create body; also the update body, since updates replace every field."""
    first_name: str = Field(min_length=1, max_length=200)
    last_name: str = Field(min_length=1, max_length=200)
    email: EmailStr
    phone: Optional[str] = Field(default=None, max_length=50)


class EmployeeRead(BaseModel):
    id: int
    organisation_id: int
    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None
    created_at: UTCDateTime

    model_config = {"from_attributes": True}
