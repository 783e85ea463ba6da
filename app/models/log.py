"""Activity log table. Part of the schema; nothing writes to it yet."""

from datetime import datetime
from typing import Optional

import sqlalchemy as sa
from sqlmodel import Field, SQLModel

from .base import _utcnow


class Log(SQLModel, table=True):
    __tablename__ = "logs"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(default=None, primary_key=True)
    organisation_id: Optional[int] = Field(default=None, foreign_key="organisations.id")
    user_id: Optional[int] = Field(default=None, foreign_key="users.id")
    action: Optional[str] = None
    meta: Optional[str] = None
    timestamp: datetime = Field(
        default_factory=_utcnow,
        nullable=False,
        sa_column_kwargs={"server_default": sa.func.now()},
        sa_type=sa.DateTime(timezone=True),
    )
