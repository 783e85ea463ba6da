"""
Register an organisation and its admin user straight against the database.

    python -m app.scripts.create_org_admin --org "Acme" --name "Ada" \
        --email ada@acme.com --password s3cret
"""

import argparse
import asyncio
import sys
from typing import Optional

from pydantic import ValidationError

from app.core.config import Settings, get_settings
from app.core.database import build_engine, build_session_factory, init_db, session_context
from app.core.errors import APIError
from app.services import identity as identity_service
from orgteams_shared.schemas.auth import RegisterRequest


async def create_org_admin(
    org_name: str,
    admin_name: str,
    email: str,
    password: str,
    settings: Settings,
) -> tuple[str, int, int]:
    """Returns (token, user_id, organisation_id)."""
    req = RegisterRequest(org_name=org_name, admin_name=admin_name, email=email, password=password)

    engine = build_engine(settings)
    try:
        if settings.auto_create_tables:
            await init_db(engine)
        async with session_context(build_session_factory(engine)) as session:
            token, user = await identity_service.register(req, settings, session)
            user_id, org_id = user.id, user.organisation_id
    finally:
        await engine.dispose()
    return token, user_id, org_id


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Create an organisation and its admin user.")
    parser.add_argument("--org", required=True, help="Organisation name")
    parser.add_argument("--name", required=True, help="Admin display name")
    parser.add_argument("--email", required=True, help="Admin email address")
    parser.add_argument("--password", required=True, help="Admin password")
    args = parser.parse_args(argv)

    try:
        token, user_id, org_id = asyncio.run(
            create_org_admin(args.org, args.name, args.email, args.password, get_settings())
        )
    except ValidationError as exc:
        print(f"Invalid input: {exc}", file=sys.stderr)
        return 2
    except APIError as exc:
        print(f"Error: {exc.message}", file=sys.stderr)
        return 1

    print(f"Created organisation {org_id} with admin user {user_id}.")
    print(f"Token: {token}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
