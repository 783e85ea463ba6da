"""Employee model."""

from typing import Optional

import sqlalchemy as sa
from sqlmodel import Field, SQLModel

from .base import CreatedAtMixin, IntIdMixin


class Employee(IntIdMixin, CreatedAtMixin, SQLModel, table=True):
    __tablename__ = "employees"
    __table_args__ = (
        sa.UniqueConstraint("organisation_id", "email", name="uq_employees_org_email"),
        {"sqlite_autoincrement": True},
    )

    organisation_id: int = Field(foreign_key="organisations.id", nullable=False, index=True)
    first_name: str = Field(nullable=False)
    last_name: str = Field(nullable=False)
    email: str = Field(nullable=False)
    phone: Optional[str] = None
