"""Employee-to-team assignment join table (org-scoped)."""

from datetime import datetime
from typing import Optional

import sqlalchemy as sa
from sqlmodel import Field, SQLModel

from .base import _utcnow


class EmployeeTeam(SQLModel, table=True):
    __tablename__ = "employee_teams"
    __table_args__ = (
        sa.UniqueConstraint(
            "employee_id", "team_id", "organisation_id", name="uq_employee_teams_member"
        ),
        {"sqlite_autoincrement": True},
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    employee_id: int = Field(
        foreign_key="employees.id", ondelete="CASCADE", nullable=False, index=True
    )
    team_id: int = Field(foreign_key="teams.id", ondelete="CASCADE", nullable=False, index=True)
    organisation_id: int = Field(foreign_key="organisations.id", nullable=False, index=True)
    assigned_at: datetime = Field(
        default_factory=_utcnow,
        nullable=False,
        sa_column_kwargs={"server_default": sa.func.now()},
        sa_type=sa.DateTime(timezone=True),
    )
