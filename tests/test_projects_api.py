"""Integration tests for the /projects endpoints."""


def test_list_projects_returns_project_list(client, seeded, auth):
    resp = client.get("/projects", headers=auth("INFRA"))
    assert resp.status_code == 200
    body = resp.json()
    assert body["total"] == 3
    assert [p["name"] for p in body["items"]] == ["Done", "Doing", "Todo"]


def test_list_projects_filters_by_status(client, seeded, auth):
    resp = client.get("/projects", params={"status": "En cours"}, headers=auth())
    assert resp.status_code == 200
    body = resp.json()
    assert body["total"] == 1
    assert body["items"][0]["status"] == "En cours"


def test_list_projects_unknown_status_returns_422(client, seeded, auth):
    resp = client.get("/projects", params={"status": "Bloqué"}, headers=auth())
    assert resp.status_code == 422


def test_get_project_returns_200(client, seeded, auth):
    resp = client.get(f"/projects/{seeded['todo']}", headers=auth())
    assert resp.status_code == 200
    body = resp.json()
    assert body["priorite"] == "Faible"
    assert body["etat"] == "Projet existant"


def test_get_project_not_found_returns_404(client, seeded, auth):
    assert client.get("/projects/99999", headers=auth()).status_code == 404


def test_list_project_tasks(client, seeded, auth):
    resp = client.get(f"/projects/{seeded['doing']}/tasks", headers=auth("DEVELOPPER"))
    assert resp.status_code == 200
    body = resp.json()
    assert body["project_id"] == seeded["doing"]
    assert body["total"] == 2
    assert {t["status"] for t in body["items"]} == {"Done", "In Progress"}


def test_list_tasks_of_missing_project_returns_404(client, seeded, auth):
    assert client.get("/projects/99999/tasks", headers=auth()).status_code == 404
