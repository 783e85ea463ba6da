"""
Shared fixtures: an app per test on a throwaway SQLite file.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.core.database import build_engine, build_session_factory, init_db
from app.main import create_app


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        secret_key="test-secret-key-with-enough-length-for-hs256",
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'orgteams.db'}",
        bcrypt_rounds=4,
        log_format="text",
        log_level="warning",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    # Context manager runs the startup hook, which creates the tables.
    with TestClient(app) as c:
        yield c


@pytest.fixture
def register_org(client):
    """Register an organisation; returns the JSON body ({token, user})."""

    def _register(
        org_name: str = "Acme",
        email: str = "admin@acme.com",
        password: str = "pw123",
        admin_name: str = "Admin",
    ) -> dict:
        resp = client.post(
            "/auth/register",
            json={
                "orgName": org_name,
                "adminName": admin_name,
                "email": email,
                "password": password,
            },
        )
        assert resp.status_code == 200, resp.text
        return resp.json()

    return _register


@pytest.fixture
def auth_headers(register_org) -> dict:
    return bearer(register_org()["token"])


@pytest.fixture
def other_headers(register_org) -> dict:
    """Credentials for a second, unrelated organisation."""
    return bearer(register_org(org_name="Globex", email="admin@globex.com")["token"])


@pytest.fixture
def make_employee(client):
    def _make(headers: dict, email: str = "e@x.com", **fields) -> dict:
        body = {"firstName": "Eve", "lastName": "Example", "email": email, "phone": "555-0100"}
        body.update(fields)
        resp = client.post("/employees", json=body, headers=headers)
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _make


@pytest.fixture
def make_team(client):
    def _make(headers: dict, name: str = "Eng", **fields) -> dict:
        resp = client.post("/teams", json={"name": name, **fields}, headers=headers)
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _make


# ---------------------------------------------------------------------------
# Service-level fixtures (no HTTP)
# ---------------------------------------------------------------------------


@pytest.fixture
async def session_factory(settings):
    engine = build_engine(settings)
    await init_db(engine)
    yield build_session_factory(engine)
    await engine.dispose()


@pytest.fixture
async def session(session_factory):
    async with session_factory() as s:
        yield s
