"""
Employee endpoints: CRUD and team listing.

PUT replaces the whole record; every required field must be supplied.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.auth import AuthContext, require_member
from app.core.database import get_session
from app.services import assignments as assignment_service
from app.services import employees as employee_service
from orgteams_shared.schemas.common import MessageResponse
from orgteams_shared.schemas.employees import EmployeeRead, EmployeeWrite
from orgteams_shared.schemas.teams import TeamRead

router = APIRouter()


@router.post("", response_model=EmployeeRead, status_code=201)
async def create_employee(
    body: EmployeeWrite,
    auth: AuthContext = Depends(require_member),
    session: AsyncSession = Depends(get_session),
):
    employee = await employee_service.create_employee(auth.org_id, body, session)
    await session.commit()
    return employee


@router.get("", response_model=List[EmployeeRead])
async def list_employees(
    auth: AuthContext = Depends(require_member),
    session: AsyncSession = Depends(get_session),
):
    return await employee_service.list_employees(auth.org_id, session)


@router.get("/{employee_id}", response_model=EmployeeRead)
async def get_employee(
    employee_id: int,
    auth: AuthContext = Depends(require_member),
    session: AsyncSession = Depends(get_session),
):
    return await employee_service.get_employee(auth.org_id, employee_id, session)


@router.put("/{employee_id}", response_model=EmployeeRead)
async def update_employee(
    employee_id: int,
    body: EmployeeWrite,
    auth: AuthContext = Depends(require_member),
    session: AsyncSession = Depends(get_session),
):
    employee = await employee_service.replace_employee(auth.org_id, employee_id, body, session)
    await session.commit()
    return employee


@router.delete("/{employee_id}", response_model=MessageResponse)
async def delete_employee(
    employee_id: int,
    auth: AuthContext = Depends(require_member),
    session: AsyncSession = Depends(get_session),
):
    """Delete an employee and, through the cascade, its team assignments."""
    await employee_service.delete_employee(auth.org_id, employee_id, session)
    await session.commit()
    return MessageResponse(message="Employee deleted successfully")


@router.get("/{employee_id}/teams", response_model=List[TeamRead])
async def list_employee_teams(
    employee_id: int,
    auth: AuthContext = Depends(require_member),
    session: AsyncSession = Depends(get_session),
):
    return await assignment_service.list_teams_for_employee(auth.org_id, employee_id, session)
