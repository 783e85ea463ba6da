"""
Authentication and request authorization.

- Password hashing (bcrypt)
- Bearer credentials: HS256 JWTs carrying the user id and organisation id
- ``require_member``: the gate in front of every tenant-scoped route

Credentials are stateless. Verification is a local signature and expiry
check; there is no revocation list and no store access.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
import jwt
import structlog
from fastapi import Depends, Request
from fastapi.security import APIKeyHeader

from app.core.config import Settings, get_request_settings
from app.core.errors import Unauthorized

log = structlog.get_logger()

bearer_header = APIKeyHeader(name="Authorization", auto_error=False)

# ---------------------------------------------------------------------------
# Password hashing
# ---------------------------------------------------------------------------

def hash_password(password: str, rounds: int = 10) -> str:
    """Hash a password using bcrypt with the given cost factor."""
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt(rounds=rounds)).decode()


def verify_password(password: str, hashed: str) -> bool:
    """Verify a password against a bcrypt hash."""
    try:
        return bcrypt.checkpw(password.encode(), hashed.encode())
    except ValueError:
        # Over-long input or a malformed stored hash never matches.
        return False


# ---------------------------------------------------------------------------
# Bearer credentials
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class AuthContext:
    """Verified identity attached to a request."""

    user_id: int
    org_id: int


def create_access_token(
    user_id: int,
    org_id: int,
    settings: Settings,
    *,
    expires_delta: timedelta | None = None,
) -> str:
    """Create a signed, time-boxed credential over ``(user_id, org_id)``."""
    now = datetime.now(timezone.utc)
    exp = now + (expires_delta or timedelta(minutes=settings.jwt_expire_minutes))
    payload = {
        "sub": str(user_id),
        "org_id": org_id,
        "iat": now,
        "exp": exp,
    }
    return jwt.encode(payload, settings.secret_key, algorithm=settings.jwt_algorithm)


def verify_credential(token: Optional[str], settings: Settings) -> AuthContext:
    """Decode and verify a credential. Raises Unauthorized on any failure."""
    if not token:
        raise Unauthorized("Token missing", code="TOKEN_MISSING")

    try:
        payload = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp", "sub"]},
        )
    except jwt.ExpiredSignatureError:
        raise Unauthorized("Token expired", code="TOKEN_INVALID")
    except jwt.PyJWTError:
        raise Unauthorized("Invalid token", code="TOKEN_INVALID")

    try:
        return AuthContext(user_id=int(payload["sub"]), org_id=int(payload["org_id"]))
    except (KeyError, TypeError, ValueError):
        raise Unauthorized("Invalid token", code="TOKEN_INVALID")


def extract_bearer_token(authorization: Optional[str]) -> str:
    """Return the token from an ``Authorization: Bearer <token>`` header value."""
    if not authorization:
        raise Unauthorized("Token missing", code="TOKEN_MISSING")
    scheme, _, token = authorization.partition(" ")
    token = token.strip()
    if scheme.lower() != "bearer" or not token:
        raise Unauthorized("Expected 'Bearer <token>' authorization", code="TOKEN_MISSING")
    return token


# ---------------------------------------------------------------------------
# Authorization dependency
# ---------------------------------------------------------------------------

async def require_member(
    request: Request,
    authorization: Optional[str] = Depends(bearer_header),
    settings: Settings = Depends(get_request_settings),
) -> AuthContext:
    """Any authenticated member of an org. The org id comes only from the credential."""
    token = extract_bearer_token(authorization)
    try:
        auth = verify_credential(token, settings)
    except Unauthorized as exc:
        log.info("auth.token_rejected", reason=exc.message)
        raise

    request.state.auth = auth
    structlog.contextvars.bind_contextvars(org_id=auth.org_id, user_id=auth.user_id)
    return auth
