"""Integration tests for the /users endpoints."""


def test_get_user_returns_profile_with_projects(client, seeded, auth):
    resp = client.get(f"/users/{seeded['dev']}", headers=auth("DEVELOPPER", seeded["dev"]))
    assert resp.status_code == 200
    body = resp.json()
    assert body["username"] == "dev"
    assert body["role"] == "DEVELOPPER"
    assert body["matricule"] == "D001"
    assert {p["name"] for p in body["projects"]} == {"Done", "Doing"}


def test_get_user_not_found_returns_404(client, seeded, auth):
    resp = client.get("/users/99999", headers=auth())
    assert resp.status_code == 404
