"""
Organisation-wide assignment listing (admin/debug view).
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.auth import AuthContext, require_member
from app.core.database import get_session
from app.services import assignments as assignment_service
from orgteams_shared.schemas.assignments import AssignmentRead

router = APIRouter()


@router.get("/assigned_members", response_model=List[AssignmentRead])
async def list_assigned_members(
    auth: AuthContext = Depends(require_member),
    session: AsyncSession = Depends(get_session),
):
    """Every employee/team assignment in the caller's organisation."""
    return await assignment_service.list_assignments(auth.org_id, session)
