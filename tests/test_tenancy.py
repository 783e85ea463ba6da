"""
Tenant isolation: nothing owned by one organisation is visible to, or
changeable by, another. Foreign rows look exactly like missing ones.
"""

import pytest


@pytest.fixture
def acme_data(client, auth_headers, make_employee, make_team):
    emp = make_employee(auth_headers, email="secret@acme.com")
    team = make_team(auth_headers, name="Skunkworks", description="hidden")
    client.post(f"/teams/{team['id']}/assign", json={"employeeId": emp["id"]}, headers=auth_headers)
    return emp, team


class TestReadIsolation:
    def test_lists_are_scoped(self, client, acme_data, other_headers):
        assert client.get("/employees", headers=other_headers).json() == []
        assert client.get("/teams", headers=other_headers).json() == []
        assert client.get("/assigned_members", headers=other_headers).json() == []

    def test_foreign_employee_is_not_found(self, client, acme_data, other_headers):
        emp, _ = acme_data
        foreign = client.get(f"/employees/{emp['id']}", headers=other_headers)
        missing = client.get("/employees/9999", headers=other_headers)
        assert foreign.status_code == missing.status_code == 404
        assert foreign.json()["error"]["message"] == missing.json()["error"]["message"]

    def test_foreign_team_is_not_found(self, client, acme_data, other_headers):
        _, team = acme_data
        assert client.get(f"/teams/{team['id']}", headers=other_headers).status_code == 404
        assert client.get(f"/teams/{team['id']}/members", headers=other_headers).status_code == 404

    def test_foreign_employee_teams_not_found(self, client, acme_data, other_headers):
        emp, _ = acme_data
        resp = client.get(f"/employees/{emp['id']}/teams", headers=other_headers)
        assert resp.status_code == 404


class TestWriteIsolation:
    def test_cannot_update_foreign_employee(self, client, acme_data, auth_headers, other_headers):
        emp, _ = acme_data
        resp = client.put(
            f"/employees/{emp['id']}",
            json={"firstName": "Hacked", "lastName": "X", "email": "h@x.com"},
            headers=other_headers,
        )
        assert resp.status_code == 404
        assert client.get(f"/employees/{emp['id']}", headers=auth_headers).json() == emp

    def test_cannot_delete_foreign_employee(self, client, acme_data, auth_headers, other_headers):
        emp, _ = acme_data
        assert client.delete(f"/employees/{emp['id']}", headers=other_headers).status_code == 404
        assert client.get(f"/employees/{emp['id']}", headers=auth_headers).status_code == 200

    def test_cannot_update_foreign_team(self, client, acme_data, auth_headers, other_headers):
        _, team = acme_data
        resp = client.put(f"/teams/{team['id']}", json={"name": "Hacked"}, headers=other_headers)
        assert resp.status_code == 404
        assert client.get(f"/teams/{team['id']}", headers=auth_headers).json()["name"] == "Skunkworks"

    def test_cannot_delete_foreign_team(self, client, acme_data, auth_headers, other_headers):
        _, team = acme_data
        assert client.delete(f"/teams/{team['id']}", headers=other_headers).status_code == 404
        assert client.get(f"/teams/{team['id']}", headers=auth_headers).status_code == 200


class TestCrossOrgAssignment:
    def test_own_team_foreign_employee(self, client, acme_data, other_headers, make_team):
        emp, _ = acme_data
        team = make_team(other_headers, name="Globex Team")
        resp = client.post(
            f"/teams/{team['id']}/assign", json={"employeeId": emp["id"]}, headers=other_headers
        )
        assert resp.status_code == 404
        assert resp.json()["error"]["message"] == "Employee not found"

    def test_foreign_team_own_employee(self, client, acme_data, other_headers, make_employee):
        _, team = acme_data
        emp = make_employee(other_headers, email="g@globex.com")
        resp = client.post(
            f"/teams/{team['id']}/assign", json={"employeeId": emp["id"]}, headers=other_headers
        )
        assert resp.status_code == 404
        assert resp.json()["error"]["message"] == "Team not found"

    def test_cannot_unassign_foreign_assignment(self, client, acme_data, auth_headers, other_headers):
        emp, team = acme_data
        resp = client.request(
            "DELETE",
            f"/teams/{team['id']}/unassign",
            json={"employeeId": emp["id"]},
            headers=other_headers,
        )
        assert resp.status_code == 404
        members = client.get(f"/teams/{team['id']}/members", headers=auth_headers).json()
        assert [m["id"] for m in members] == [emp["id"]]
