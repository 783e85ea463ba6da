"""
Application configuration loaded from environment variables.
"""

from functools import lru_cache
from typing import Literal

from fastapi import Request
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Org Teams server configuration."""

    model_config = SettingsConfigDict(env_prefix="ORGTEAMS_", env_file=".env", extra="ignore")

    # Database
    database_url: str = "sqlite+aiosqlite:///./orgteams.db"
    auto_create_tables: bool = True

    # Security (no default for the signing secret: startup fails without it)
    secret_key: str
    jwt_algorithm: str = "HS256"
    jwt_expire_minutes: int = 24 * 60
    bcrypt_rounds: int = Field(default=10, ge=4, le=16)

    # Tenancy policy. Org-name uniqueness is an application check at
    # registration only; no storage constraint backs it, so two concurrent
    # registrations with the same name can both succeed.
    unique_org_names: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 5000
    debug: bool = False

    # Logging
    log_level: str = "info"
    log_format: Literal["json", "text"] = "json"

    # CORS
    cors_origins: list[str] = ["*"]

    @field_validator("secret_key")
    @classmethod
    def _secret_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("secret_key must not be empty")
        return value


@lru_cache
def get_settings() -> Settings:
    return Settings()


def get_request_settings(request: Request) -> Settings:
    """FastAPI dependency: the settings the running app was built with."""
    return request.app.state.settings
