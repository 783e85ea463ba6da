"""Organization (tenant) model."""

from sqlmodel import Field, SQLModel

from .base import CreatedAtMixin, IntIdMixin


class Organization(IntIdMixin, CreatedAtMixin, SQLModel, table=True):
    __tablename__ = "organisations"
    __table_args__ = {"sqlite_autoincrement": True}

    # Not unique by default; see Settings.unique_org_names.
    name: str = Field(nullable=False, index=True)
