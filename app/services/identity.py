"""
Identity service: organisation registration, admin login, profile lookup.
"""

from __future__ import annotations

import structlog
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from app.core.auth import create_access_token, hash_password, verify_password
from app.core.config import Settings
from app.core.errors import Conflict, NotFound, Unauthorized
from app.models.organization import Organization
from app.models.user import User
from app.services.scoped import flush_or_conflict
from orgteams_shared.schemas.auth import LoginRequest, RegisterRequest

log = structlog.get_logger()

EMAIL_TAKEN = "Email already exists"
INVALID_CREDENTIALS = "Invalid email or password"


async def register(
    req: RegisterRequest, settings: Settings, session: AsyncSession
) -> tuple[str, User]:
    """Create an organisation and its admin user. Returns (token, user).

    The org and user inserts share the request transaction, so a failure after
    the org insert leaves no half-registered tenant behind.
    """
    result = await session.execute(select(User.id).where(User.email == req.email))
    if result.first() is not None:
        raise Conflict(EMAIL_TAKEN)

    if settings.unique_org_names:
        result = await session.execute(
            select(Organization.id).where(Organization.name == req.org_name)
        )
        if result.first() is not None:
            raise Conflict("Organisation name already exists")

    password_hash = hash_password(req.password, rounds=settings.bcrypt_rounds)

    org = Organization(name=req.org_name)
    session.add(org)
    await session.flush()  # get org.id

    user = User(
        organisation_id=org.id,
        email=req.email,
        password_hash=password_hash,
        name=req.admin_name,
    )
    session.add(user)
    await flush_or_conflict(session, EMAIL_TAKEN)

    token = create_access_token(user.id, org.id, settings)
    log.info("user.registered", user_id=user.id, org_id=org.id)
    return token, user


async def login(
    req: LoginRequest, settings: Settings, session: AsyncSession
) -> tuple[str, User]:
    """Authenticate by email and password. Returns (token, user).

    Unknown email and wrong password fail identically.
    """
    result = await session.execute(select(User).where(User.email == req.email))
    user = result.scalar_one_or_none()

    if user is None:
        log.warning("auth.login_failure", reason="unknown_email")
        raise Unauthorized(INVALID_CREDENTIALS, code="INVALID_CREDENTIALS")

    if not verify_password(req.password, user.password_hash):
        log.warning("auth.login_failure", user_id=user.id, reason="bad_password")
        raise Unauthorized(INVALID_CREDENTIALS, code="INVALID_CREDENTIALS")

    token = create_access_token(user.id, user.organisation_id, settings)
    log.info("auth.login_success", user_id=user.id, org_id=user.organisation_id)
    return token, user


async def get_user(org_id: int, user_id: int, session: AsyncSession) -> User:
    """The user named by a credential, within the credential's org."""
    result = await session.execute(
        select(User).where(User.id == user_id, User.organisation_id == org_id)
    )
    user = result.scalar_one_or_none()
    if user is None:
        raise NotFound("User not found")
    return user
