"""
Assignment store: employee/team membership within one organisation.
"""

from __future__ import annotations

import structlog
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from app.core.errors import Conflict, NotFound
from app.models.assignments import EmployeeTeam
from app.models.employee import Employee
from app.models.team import Team
from app.services.scoped import flush_or_conflict, get_scoped_or_404

log = structlog.get_logger()

ALREADY_ASSIGNED = "Employee already assigned to team"


async def _resolve_pair(
    session: AsyncSession, org_id: int, employee_id: int, team_id: int
) -> tuple[Employee, Team]:
    # Team first, then employee: each miss has its own message.
    team = await get_scoped_or_404(session, Team, team_id, org_id, "Team")
    employee = await get_scoped_or_404(session, Employee, employee_id, org_id, "Employee")
    return employee, team


async def assign(
    org_id: int, employee_id: int, team_id: int, session: AsyncSession
) -> EmployeeTeam:
    employee, team = await _resolve_pair(session, org_id, employee_id, team_id)

    # Both rows already belong to org_id, so (employee, team) identifies the pair.
    existing = await session.execute(
        select(EmployeeTeam.id).where(
            EmployeeTeam.employee_id == employee.id,
            EmployeeTeam.team_id == team.id,
        )
    )
    if existing.first() is not None:
        raise Conflict(ALREADY_ASSIGNED)

    assignment = EmployeeTeam(
        employee_id=employee.id,
        team_id=team.id,
        organisation_id=org_id,
    )
    session.add(assignment)
    await flush_or_conflict(session, ALREADY_ASSIGNED)

    log.info("assignment.created", org_id=org_id, employee_id=employee_id, team_id=team_id)
    return assignment


async def unassign(
    org_id: int, employee_id: int, team_id: int, session: AsyncSession
) -> None:
    employee, team = await _resolve_pair(session, org_id, employee_id, team_id)

    result = await session.execute(
        select(EmployeeTeam).where(
            EmployeeTeam.employee_id == employee.id,
            EmployeeTeam.team_id == team.id,
            EmployeeTeam.organisation_id == org_id,
        )
    )
    assignment = result.scalar_one_or_none()
    if assignment is None:
        raise NotFound("Assignment not found")

    await session.delete(assignment)
    await session.flush()
    log.info("assignment.removed", org_id=org_id, employee_id=employee_id, team_id=team_id)


async def list_members(org_id: int, team_id: int, session: AsyncSession) -> list[Employee]:
    """Employees assigned to a team, scoped by team, assignment org and employee org."""
    await get_scoped_or_404(session, Team, team_id, org_id, "Team")
    result = await session.execute(
        select(Employee)
        .join(EmployeeTeam, EmployeeTeam.employee_id == Employee.id)
        .where(
            EmployeeTeam.team_id == team_id,
            EmployeeTeam.organisation_id == org_id,
            Employee.organisation_id == org_id,
        )
        .order_by(Employee.id)
    )
    return list(result.scalars().all())


async def list_teams_for_employee(
    org_id: int, employee_id: int, session: AsyncSession
) -> list[Team]:
    await get_scoped_or_404(session, Employee, employee_id, org_id, "Employee")
    result = await session.execute(
        select(Team)
        .join(EmployeeTeam, EmployeeTeam.team_id == Team.id)
        .where(
            EmployeeTeam.employee_id == employee_id,
            EmployeeTeam.organisation_id == org_id,
            Team.organisation_id == org_id,
        )
        .order_by(Team.id)
    )
    return list(result.scalars().all())


async def list_assignments(org_id: int, session: AsyncSession) -> list[EmployeeTeam]:
    result = await session.execute(
        select(EmployeeTeam)
        .where(EmployeeTeam.organisation_id == org_id)
        .order_by(EmployeeTeam.id)
    )
    return list(result.scalars().all())
