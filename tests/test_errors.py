"""
Error envelope and configuration fail-fast tests.
"""

import pytest
from fastapi.testclient import TestClient
from pydantic import ValidationError

from app.core.config import Settings
from app.core.errors import Conflict, NotFound, Unauthorized, ValidationFailed, error_body
from app.main import create_app


class TestErrorBody:
    def test_shape(self):
        assert error_body(404, "NOT_FOUND", "Team not found") == {
            "error": {"code": "NOT_FOUND", "message": "Team not found", "status": 404}
        }

    def test_details_included_when_given(self):
        body = error_body(400, "VALIDATION_ERROR", "Invalid request", [{"field": "name"}])
        assert body["error"]["details"] == [{"field": "name"}]

    @pytest.mark.parametrize(
        "exc_class, status",
        [(ValidationFailed, 400), (Conflict, 400), (Unauthorized, 401), (NotFound, 404)],
    )
    def test_status_codes(self, exc_class, status):
        assert exc_class().status_code == status

    def test_custom_code(self):
        exc = Unauthorized("Token expired", code="TOKEN_INVALID")
        assert exc.code == "TOKEN_INVALID"
        assert str(exc) == "Token expired"


class TestEnvelopes:
    def test_unknown_route(self, client):
        resp = client.get("/nope")
        assert resp.status_code == 404
        assert resp.json()["error"]["code"] == "NOT_FOUND"

    def test_method_not_allowed(self, client):
        resp = client.patch("/health")
        assert resp.status_code == 405
        assert resp.json()["error"]["status"] == 405

    def test_validation_details_name_fields(self, client, auth_headers):
        resp = client.post("/employees", json={"firstName": "A"}, headers=auth_headers)
        assert resp.status_code == 400
        fields = {d["field"] for d in resp.json()["error"]["details"]}
        assert {"lastName", "email"} <= fields

    def test_malformed_json(self, client, auth_headers):
        resp = client.post(
            "/teams",
            content=b"{not json",
            headers={**auth_headers, "Content-Type": "application/json"},
        )
        assert resp.status_code == 400
        assert resp.json()["error"]["code"] == "VALIDATION_ERROR"

    def test_unhandled_error_is_generic_500(self, settings):
        app = create_app(settings)

        @app.get("/boom")
        async def boom():
            raise RuntimeError("database exploded with secrets")

        with TestClient(app, raise_server_exceptions=False) as client:
            resp = client.get("/boom")
        assert resp.status_code == 500
        body = resp.json()
        assert body["error"]["code"] == "INTERNAL_ERROR"
        assert "secrets" not in resp.text


class TestSettings:
    def test_secret_key_required(self, monkeypatch):
        monkeypatch.delenv("ORGTEAMS_SECRET_KEY", raising=False)
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_blank_secret_key_rejected(self):
        with pytest.raises(ValidationError):
            Settings(secret_key="   ", _env_file=None)

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("ORGTEAMS_SECRET_KEY", "from-env")
        monkeypatch.setenv("ORGTEAMS_UNIQUE_ORG_NAMES", "true")
        settings = Settings(_env_file=None)
        assert settings.secret_key == "from-env"
        assert settings.unique_org_names is True
        assert settings.jwt_expire_minutes == 24 * 60


def test_openapi_documents_error_envelope(client):
    schema = client.get("/openapi.json").json()
    responses = schema["paths"]["/employees"]["get"]["responses"]
    assert responses["404"]["content"]["application/json"]["schema"]["$ref"].endswith(
        "/ErrorResponse"
    )
