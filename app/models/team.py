"""Team model."""

from typing import Optional

import sqlalchemy as sa
from sqlmodel import Field, SQLModel

from .base import CreatedAtMixin, IntIdMixin


class Team(IntIdMixin, CreatedAtMixin, SQLModel, table=True):
    __tablename__ = "teams"
    __table_args__ = (
        sa.UniqueConstraint("organisation_id", "name", name="uq_teams_org_name"),
        sa.CheckConstraint("length(name) > 0", name="ck_teams_name_not_empty"),
        {"sqlite_autoincrement": True},
    )

    organisation_id: int = Field(foreign_key="organisations.id", nullable=False, index=True)
    name: str = Field(nullable=False)
    description: Optional[str] = None
