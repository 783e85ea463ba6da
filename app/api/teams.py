"""
Team endpoints: CRUD and membership.

PUT is a partial merge: omitted or empty fields keep their stored value.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.auth import AuthContext, require_member
from app.core.database import get_session
from app.services import assignments as assignment_service
from app.services import teams as team_service
from orgteams_shared.schemas.assignments import AssignmentRequest
from orgteams_shared.schemas.common import MessageResponse
from orgteams_shared.schemas.employees import EmployeeRead
from orgteams_shared.schemas.teams import TeamCreate, TeamRead, TeamUpdate

router = APIRouter()


# ---------------------------------------------------------------------------
# Teams
# ---------------------------------------------------------------------------


@router.post("", response_model=TeamRead, status_code=201)
async def create_team(
    body: TeamCreate,
    auth: AuthContext = Depends(require_member),
    session: AsyncSession = Depends(get_session),
):
    team = await team_service.create_team(auth.org_id, body, session)
    await session.commit()
    return team


@router.get("", response_model=List[TeamRead])
async def list_teams(
    auth: AuthContext = Depends(require_member),
    session: AsyncSession = Depends(get_session),
):
    return await team_service.list_teams(auth.org_id, session)


@router.get("/{team_id}", response_model=TeamRead)
async def get_team(
    team_id: int,
    auth: AuthContext = Depends(require_member),
    session: AsyncSession = Depends(get_session),
):
    return await team_service.get_team(auth.org_id, team_id, session)


@router.put("/{team_id}", response_model=TeamRead)
async def update_team(
    team_id: int,
    body: TeamUpdate,
    auth: AuthContext = Depends(require_member),
    session: AsyncSession = Depends(get_session),
):
    team = await team_service.update_team(auth.org_id, team_id, body, session)
    await session.commit()
    return team


@router.delete("/{team_id}", response_model=MessageResponse)
async def delete_team(
    team_id: int,
    auth: AuthContext = Depends(require_member),
    session: AsyncSession = Depends(get_session),
):
    await team_service.delete_team(auth.org_id, team_id, session)
    await session.commit()
    return MessageResponse(message="Team deleted successfully")


# ---------------------------------------------------------------------------
# Team Membership
# ---------------------------------------------------------------------------


@router.post("/{team_id}/assign", response_model=MessageResponse)
async def assign_employee(
    team_id: int,
    body: AssignmentRequest,
    auth: AuthContext = Depends(require_member),
    session: AsyncSession = Depends(get_session),
):
    await assignment_service.assign(auth.org_id, body.employee_id, team_id, session)
    await session.commit()
    return MessageResponse(message="Employee assigned to team")


@router.delete("/{team_id}/unassign", response_model=MessageResponse)
async def unassign_employee(
    team_id: int,
    body: AssignmentRequest,
    auth: AuthContext = Depends(require_member),
    session: AsyncSession = Depends(get_session),
):
    await assignment_service.unassign(auth.org_id, body.employee_id, team_id, session)
    await session.commit()
    return MessageResponse(message="Employee unassigned from team")


@router.get("/{team_id}/members", response_model=List[EmployeeRead])
async def list_team_members(
    team_id: int,
    auth: AuthContext = Depends(require_member),
    session: AsyncSession = Depends(get_session),
):
    return await assignment_service.list_members(auth.org_id, team_id, session)
