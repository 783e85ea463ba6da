"""Initial schema: organisations, users, employees, teams, assignments, logs.

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-18 09:00:00.000000
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "0001_initial_schema"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _created_at(name: str = "created_at") -> sa.Column:
    return sa.Column(name, sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now())


# ---------------------------------------------------------------------------
# UPGRADE
# ---------------------------------------------------------------------------


def upgrade() -> None:
    # organisations (the tenants themselves; name uniqueness is an app policy)
    op.create_table(
        "organisations",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        _created_at(),
        sqlite_autoincrement=True,
    )
    op.create_index("ix_organisations_name", "organisations", ["name"])

    # users (email unique across every organisation)
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("organisation_id", sa.Integer(), sa.ForeignKey("organisations.id"), nullable=False),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("password_hash", sa.String(), nullable=False),
        sa.Column("name", sa.String(), nullable=True),
        _created_at(),
        sqlite_autoincrement=True,
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)
    op.create_index("ix_users_organisation_id", "users", ["organisation_id"])

    # employees
    op.create_table(
        "employees",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("organisation_id", sa.Integer(), sa.ForeignKey("organisations.id"), nullable=False),
        sa.Column("first_name", sa.String(), nullable=False),
        sa.Column("last_name", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("phone", sa.String(), nullable=True),
        _created_at(),
        sa.UniqueConstraint("organisation_id", "email", name="uq_employees_org_email"),
        sqlite_autoincrement=True,
    )
    op.create_index("ix_employees_organisation_id", "employees", ["organisation_id"])

    # teams
    op.create_table(
        "teams",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("organisation_id", sa.Integer(), sa.ForeignKey("organisations.id"), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("description", sa.String(), nullable=True),
        _created_at(),
        sa.UniqueConstraint("organisation_id", "name", name="uq_teams_org_name"),
        sa.CheckConstraint("length(name) > 0", name="ck_teams_name_not_empty"),
        sqlite_autoincrement=True,
    )
    op.create_index("ix_teams_organisation_id", "teams", ["organisation_id"])

    # employee_teams (assignments cascade with either endpoint)
    op.create_table(
        "employee_teams",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "employee_id",
            sa.Integer(),
            sa.ForeignKey("employees.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "team_id",
            sa.Integer(),
            sa.ForeignKey("teams.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("organisation_id", sa.Integer(), sa.ForeignKey("organisations.id"), nullable=False),
        _created_at("assigned_at"),
        sa.UniqueConstraint(
            "employee_id", "team_id", "organisation_id", name="uq_employee_teams_member"
        ),
        sqlite_autoincrement=True,
    )
    op.create_index("ix_employee_teams_employee_id", "employee_teams", ["employee_id"])
    op.create_index("ix_employee_teams_team_id", "employee_teams", ["team_id"])
    op.create_index("ix_employee_teams_organisation_id", "employee_teams", ["organisation_id"])

    # logs (schema only)
    op.create_table(
        "logs",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("organisation_id", sa.Integer(), sa.ForeignKey("organisations.id"), nullable=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=True),
        sa.Column("action", sa.String(), nullable=True),
        sa.Column("meta", sa.String(), nullable=True),
        _created_at("timestamp"),
        sqlite_autoincrement=True,
    )


# ---------------------------------------------------------------------------
# DOWNGRADE
# ---------------------------------------------------------------------------


def downgrade() -> None:
    op.drop_table("logs")
    op.drop_table("employee_teams")
    op.drop_table("teams")
    op.drop_table("employees")
    op.drop_table("users")
    op.drop_table("organisations")
