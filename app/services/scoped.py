"""
Helpers shared by the tenant-scoped stores (employees, teams).

Every lookup filters on both the row id and the caller's organisation id, so a
row owned by another tenant is indistinguishable from a missing one.
"""

from __future__ import annotations

from typing import TypeVar, Union

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from app.core.errors import Conflict, NotFound
from app.models.employee import Employee
from app.models.team import Team

ScopedModel = TypeVar("ScopedModel", bound=Union[Employee, Team])

# Primary keys are sa.Integer: 32-bit on Postgres, the narrowest backend.
MAX_ID = 2**31 - 1


async def get_scoped_or_404(
    session: AsyncSession,
    model: type[ScopedModel],
    entity_id: int,
    org_id: int,
    label: str,
) -> ScopedModel:
    if not 0 < entity_id <= MAX_ID:
        # Out of column range: no such row can exist, and the driver would reject the bind.
        raise NotFound(f"{label} not found")
    result = await session.execute(
        select(model).where(model.id == entity_id, model.organisation_id == org_id)
    )
    entity = result.scalar_one_or_none()
    if entity is None:
        raise NotFound(f"{label} not found")
    return entity


async def list_scoped(
    session: AsyncSession, model: type[ScopedModel], org_id: int
) -> list[ScopedModel]:
    result = await session.execute(
        select(model).where(model.organisation_id == org_id).order_by(model.id)
    )
    return list(result.scalars().all())


async def flush_or_conflict(session: AsyncSession, message: str) -> None:
    """Flush pending writes, turning a storage constraint violation into Conflict.

    The unique constraints are what actually stop concurrent duplicates; the
    pre-checks in the stores only give a friendlier answer in the common case.
    """
    try:
        await session.flush()
    except IntegrityError:
        await session.rollback()
        raise Conflict(message)


async def delete_scoped(
    session: AsyncSession,
    model: type[ScopedModel],
    entity_id: int,
    org_id: int,
    label: str,
) -> None:
    """Delete a row under the dual check. Assignments go with it via ON DELETE CASCADE."""
    entity = await get_scoped_or_404(session, model, entity_id, org_id, label)
    await session.delete(entity)
    await session.flush()
