"""
Team store: org-scoped team CRUD.

Updates are partial: a field that is omitted or empty keeps its stored value.
"""

from __future__ import annotations

from typing import Optional

import structlog
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from app.core.errors import Conflict
from app.models.team import Team
from app.services.scoped import delete_scoped, flush_or_conflict, get_scoped_or_404, list_scoped
from orgteams_shared.schemas.teams import TeamCreate, TeamUpdate

log = structlog.get_logger()

DUPLICATE_NAME = "Team with this name already exists"


async def _ensure_name_free(
    session: AsyncSession,
    org_id: int,
    name: str,
    *,
    exclude_id: Optional[int] = None,
) -> None:
    stmt = select(Team.id).where(Team.organisation_id == org_id, Team.name == name)
    if exclude_id is not None:
        stmt = stmt.where(Team.id != exclude_id)
    result = await session.execute(stmt)
    if result.first() is not None:
        raise Conflict(DUPLICATE_NAME)


async def create_team(org_id: int, req: TeamCreate, session: AsyncSession) -> Team:
    await _ensure_name_free(session, org_id, req.name)

    team = Team(
        organisation_id=org_id,
        name=req.name,
        description=req.description or None,
    )
    session.add(team)
    await flush_or_conflict(session, DUPLICATE_NAME)

    log.info("team.created", org_id=org_id, team_id=team.id)
    return team


async def list_teams(org_id: int, session: AsyncSession) -> list[Team]:
    return await list_scoped(session, Team, org_id)


async def get_team(org_id: int, team_id: int, session: AsyncSession) -> Team:
    return await get_scoped_or_404(session, Team, team_id, org_id, "Team")


async def update_team(
    org_id: int, team_id: int, req: TeamUpdate, session: AsyncSession
) -> Team:
    """Partial-merge update."""
    team = await get_scoped_or_404(session, Team, team_id, org_id, "Team")

    name = req.name or team.name
    if name != team.name:
        await _ensure_name_free(session, org_id, name, exclude_id=team.id)

    team.name = name
    team.description = req.description or team.description
    session.add(team)
    await flush_or_conflict(session, DUPLICATE_NAME)

    log.info("team.updated", org_id=org_id, team_id=team_id)
    return team


async def delete_team(org_id: int, team_id: int, session: AsyncSession) -> None:
    await delete_scoped(session, Team, team_id, org_id, "Team")
    log.info("team.deleted", org_id=org_id, team_id=team_id)
