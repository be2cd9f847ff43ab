"""Integration tests for GET /dashboard/stats."""
import pytest


@pytest.mark.parametrize("role", ["ADMIN", "INFRA", "DEVELOPPER"])
def test_every_role_reads_stats(client, seeded, auth, role):
    resp = client.get("/dashboard/stats", headers=auth(role))
    assert resp.status_code == 200


def test_stats_are_camel_case(client, seeded, auth):
    body = client.get("/dashboard/stats", headers=auth()).json()
    assert set(body) == {"users", "projects", "tasks", "conges"}
    assert body["projects"]["byStatus"] == {"Fini": 1, "En cours": 1, "A faire": 1}
    assert body["projects"]["byPriority"] == {"Haute": 2, "Faible": 1}
    productivity = body["projects"]["productivity"]
    assert productivity["completionRate"] == 33
    assert productivity["highPriorityCompletion"] == 50
    assert productivity["lowPriorityCompletion"] == 0
    assert len(body["conges"]["byMonth"]) == 12
    assert body["conges"]["byMonth"][2] == 2
    assert body["users"]["byRole"] == {"ADMIN": 1, "DEVELOPPER": 1, "INFRA": 1}


def test_stats_on_empty_database(client, auth):
    body = client.get("/dashboard/stats", headers=auth()).json()
    assert body["projects"]["total"] == 0
    assert body["projects"]["productivity"]["completionRate"] == 0
    assert body["conges"]["byMonth"] == [0] * 12
