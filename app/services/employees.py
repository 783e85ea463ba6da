"""
Employee store: org-scoped employee CRUD.

Updates replace every mutable field; callers resupply the whole record.
"""

from __future__ import annotations

from typing import Optional

import structlog
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from app.core.errors import Conflict
from app.models.employee import Employee
from app.services.scoped import delete_scoped, flush_or_conflict, get_scoped_or_404, list_scoped
from orgteams_shared.schemas.employees import EmployeeWrite

log = structlog.get_logger()

DUPLICATE_EMAIL = "Employee with this email already exists"


async def _ensure_email_free(
    session: AsyncSession,
    org_id: int,
    email: str,
    *,
    exclude_id: Optional[int] = None,
) -> None:
    stmt = select(Employee.id).where(
        Employee.organisation_id == org_id, Employee.email == email
    )
    if exclude_id is not None:
        stmt = stmt.where(Employee.id != exclude_id)
    result = await session.execute(stmt)
    if result.first() is not None:
        raise Conflict(DUPLICATE_EMAIL)


async def create_employee(
    org_id: int, req: EmployeeWrite, session: AsyncSession
) -> Employee:
    await _ensure_email_free(session, org_id, req.email)

    employee = Employee(
        organisation_id=org_id,
        first_name=req.first_name,
        last_name=req.last_name,
        email=req.email,
        phone=req.phone,
    )
    session.add(employee)
    await flush_or_conflict(session, DUPLICATE_EMAIL)

    log.info("employee.created", org_id=org_id, employee_id=employee.id)
    return employee


async def list_employees(org_id: int, session: AsyncSession) -> list[Employee]:
    return await list_scoped(session, Employee, org_id)


async def get_employee(org_id: int, employee_id: int, session: AsyncSession) -> Employee:
    return await get_scoped_or_404(session, Employee, employee_id, org_id, "Employee")


async def replace_employee(
    org_id: int, employee_id: int, req: EmployeeWrite, session: AsyncSession
) -> Employee:
    """Full-replace update: all four fields are overwritten."""
    employee = await get_scoped_or_404(session, Employee, employee_id, org_id, "Employee")
    if req.email != employee.email:
        await _ensure_email_free(session, org_id, req.email, exclude_id=employee.id)

    employee.first_name = req.first_name
    employee.last_name = req.last_name
    employee.email = req.email
    employee.phone = req.phone
    session.add(employee)
    await flush_or_conflict(session, DUPLICATE_EMAIL)

    log.info("employee.updated", org_id=org_id, employee_id=employee_id)
    return employee


async def delete_employee(org_id: int, employee_id: int, session: AsyncSession) -> None:
    await delete_scoped(session, Employee, employee_id, org_id, "Employee")
    log.info("employee.deleted", org_id=org_id, employee_id=employee_id)
