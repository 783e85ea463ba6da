"""User model."""

from typing import Optional

from sqlmodel import Field, SQLModel

from .base import CreatedAtMixin, IntIdMixin


class User(IntIdMixin, CreatedAtMixin, SQLModel, table=True):
    __tablename__ = "users"
    __table_args__ = {"sqlite_autoincrement": True}

    organisation_id: int = Field(foreign_key="organisations.id", nullable=False, index=True)
    # Globally unique: login is by email alone.
    email: str = Field(unique=True, index=True, nullable=False)
    password_hash: str = Field(nullable=False)  # bcrypt hash
    name: Optional[str] = None
