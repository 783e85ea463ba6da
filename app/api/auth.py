"""
Authentication endpoints.

- Organisation + admin registration
- Email/password login
- Current user profile
"""

from __future__ import annotations

import structlog
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.auth import AuthContext, require_member
from app.core.config import Settings, get_request_settings
from app.core.database import get_session
from app.services import identity as identity_service
from orgteams_shared.schemas.auth import AuthResponse, LoginRequest, RegisterRequest, UserRead

log = structlog.get_logger()
router = APIRouter()


@router.post("/register", response_model=AuthResponse)
async def register(
    body: RegisterRequest,
    settings: Settings = Depends(get_request_settings),
    session: AsyncSession = Depends(get_session),
):
    """Register an organisation and its admin user; returns a bearer token."""
    token, user = await identity_service.register(body, settings, session)
    await session.commit()
    return AuthResponse(token=token, user=UserRead.model_validate(user))


@router.post("/login", response_model=AuthResponse)
async def login(
    body: LoginRequest,
    settings: Settings = Depends(get_request_settings),
    session: AsyncSession = Depends(get_session),
):
    """Authenticate with email/password and receive a bearer token."""
    token, user = await identity_service.login(body, settings, session)
    return AuthResponse(token=token, user=UserRead.model_validate(user))


@router.get("/me", response_model=UserRead)
async def me(
    auth: AuthContext = Depends(require_member),
    session: AsyncSession = Depends(get_session),
):
    return await identity_service.get_user(auth.org_id, auth.user_id, session)
