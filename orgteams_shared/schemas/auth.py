"""Registration, login and identity schemas."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

from .common import CamelRequest

# bcrypt only looks at the first 72 bytes of a password.
BCRYPT_MAX_BYTES = 72


# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------

class RegisterRequest(CamelRequest):
    """Register a new organization together with its admin user."""
    org_name: str = Field(min_length=1, max_length=200)
    admin_name: str = Field(min_length=1, max_length=200)
    email: EmailStr
    password: str = Field(min_length=1)

    @field_validator("password")
    @classmethod
    def _fits_bcrypt(cls, value: str) -> str:
        if len(value.encode()) > BCRYPT_MAX_BYTES:
            raise ValueError(f"Password must be at most {BCRYPT_MAX_BYTES} bytes")
        return value


class LoginRequest(CamelRequest):
    email: EmailStr
    password: str = Field(min_length=1)


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------

class UserRead(BaseModel):
    id: int
    name: Optional[str] = None
    email: str
    organisation_id: int

    model_config = {"from_attributes": True}


class AuthResponse(BaseModel):
    """Bearer token plus the authenticated user."""
    token: str
    user: UserRead
