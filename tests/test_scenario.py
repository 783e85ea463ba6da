"""
End-to-end walk through the API: register, log in, build a team, tear it down.
"""


def test_register_to_team_teardown(client):
    resp = client.post(
        "/auth/register",
        json={"orgName": "Acme", "adminName": "Admin", "email": "a@x.com", "password": "pw123"},
    )
    assert resp.status_code == 200
    t1 = {"Authorization": f"Bearer {resp.json()['token']}"}

    resp = client.post("/auth/login", json={"email": "a@x.com", "password": "pw123"})
    assert resp.status_code == 200
    t2 = {"Authorization": f"Bearer {resp.json()['token']}"}
    assert client.get("/employees", headers=t2).status_code == 200

    employee = {"firstName": "Eve", "lastName": "Example", "email": "e@x.com"}
    resp = client.post("/employees", json=employee, headers=t1)
    assert resp.status_code == 201
    employee_id = resp.json()["id"]
    assert employee_id == 1

    resp = client.post("/employees", json=employee, headers=t1)
    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "CONFLICT"

    resp = client.post("/teams", json={"name": "Eng"}, headers=t1)
    assert resp.status_code == 201
    assert resp.json()["id"] == 1

    resp = client.post("/teams/1/assign", json={"employeeId": employee_id}, headers=t1)
    assert resp.status_code == 200

    resp = client.get("/teams/1/members", headers=t1)
    assert resp.status_code == 200
    assert [m["email"] for m in resp.json()] == ["e@x.com"]

    assert client.delete("/teams/1", headers=t1).status_code == 200
    assert client.get("/teams/1/members", headers=t1).status_code == 404
    assert client.get("/assigned_members", headers=t1).json() == []
