"""Dashboard page state: single stats fetch, cross-filters, scoped panels."""
import httpx
import pytest

from gdp.api.schemas.conges import CongeList
from gdp.api.schemas.dashboard import DashboardStats
from gdp.api.schemas.projects import ProjectList, ProjectStatusDTO
from gdp.ui.api_client import APIError, GDPClient, NetworkError
from gdp.ui.dashboard import (
    MONTH_PANEL, STATS_ERROR, STATUS_PANEL,
    DashboardState, PanelStatus,
    completion_rate, conges_month_series, priority_series, project_status_series,
)

STATS_PAYLOAD = {
    "users": {"total": 2, "byRole": {"ADMIN": 1, "INFRA": 1}, "productivity": []},
    "projects": {
        "total": 10,
        "byStatus": {"Fini": 5, "En cours": 3, "A faire": 2},
        "byPriority": {"Haute": 4, "Faible": 6},
        "productivity": {"completionRate": 50},
    },
    "tasks": {"total": 3, "byStatus": {"Done": 1}, "byPriority": {"high": 3}, "productivity": {}},
    "conges": {"total": 4, "byMonth": [0, 0, 3, 1, 0, 0, 0, 0, 0, 0, 0, 0], "byType": {}, "byStatus": {}},
}


class FakeClient:
    def __init__(self, stats_error: Exception | None = None):
        self.stats_error = stats_error
        self.calls: list[tuple] = []

    def get_dashboard_stats(self, token=None):
        self.calls.append(("stats", token))
        if self.stats_error is not None:
            raise self.stats_error
        return DashboardStats.model_validate(STATS_PAYLOAD)

    def conges_by_month(self, month):
        self.calls.append(("month", month))
        if month == "Dec":
            raise APIError(400, "Mois invalide")
        return CongeList(items=[], total=0)

    def list_projects(self, status=None):
        self.calls.append(("projects", status))
        return ProjectList(items=[], total=0)


def test_initial_state_is_loading():
    state = DashboardState(FakeClient())
    assert state.loading
    assert state.stats is None


def test_fetch_stats_ready():
    client = FakeClient()
    state = DashboardState(client)
    stats = state.fetch_stats("tok")
    assert state.page.status is PanelStatus.READY
    assert not state.loading
    assert state.stats is stats
    assert client.calls == [("stats", "tok")]
    assert completion_rate(stats) == 50
    assert project_status_series(stats) == [("Complété", 50), ("En cours", 30), ("À faire", 20)]


@pytest.mark.parametrize("exc", [APIError(500, "boom"), NetworkError("refused"), APIError(401, "expired")])
def test_fetch_failure_leaves_no_partial_stats(exc):
    state = DashboardState(FakeClient(stats_error=exc))
    assert state.fetch_stats("tok") is None
    assert state.stats is None
    assert state.error == STATS_ERROR
    assert not state.loading


def test_fetch_without_token_is_an_error_and_skips_request():
    client = FakeClient()
    state = DashboardState(client)
    state.fetch_stats(None)
    assert state.error == STATS_ERROR
    assert client.calls == []


def test_selections_are_independent():
    state = DashboardState(FakeClient())
    state.select_month("Mar")
    state.select_status("approved")
    assert state.selection.selected_month == "Mar"
    assert state.selection.selected_status == "approved"
    state.clear_status()
    assert state.selection.selected_month == "Mar"
    assert state.selection.selected_status is None


def test_month_panel_loads_selected_month():
    client = FakeClient()
    state = DashboardState(client)
    assert state.load_month_panel().status is PanelStatus.IDLE

    state.select_month("Mar")
    panel = state.load_month_panel()
    assert panel.status is PanelStatus.READY
    assert panel.request_key == "Mar"
    assert ("month", "Mar") in client.calls


def test_month_panel_error_is_scoped():
    state = DashboardState(FakeClient())
    state.fetch_stats("tok")
    state.select_month("Dec")
    panel = state.load_month_panel()
    assert panel.status is PanelStatus.ERROR
    assert panel.error == "Mois invalide"
    assert state.page.status is PanelStatus.READY


def test_status_panel_maps_label_to_stored_status():
    client = FakeClient()
    state = DashboardState(client)
    state.select_status("Complété")
    assert state.load_status_panel().status is PanelStatus.READY
    assert client.calls[-1] == ("projects", ProjectStatusDTO.COMPLETED)


def test_stale_settle_is_dropped():
    state = DashboardState(FakeClient())
    state.begin(MONTH_PANEL, "Mar")
    state.begin(MONTH_PANEL, "Apr")
    assert state.settle(MONTH_PANEL, "Mar", data="old") is False
    assert state.panel(MONTH_PANEL).loading
    assert state.settle(MONTH_PANEL, "Apr", data="new") is True
    assert state.panel(MONTH_PANEL).data == "new"


def test_settle_after_clear_is_dropped():
    state = DashboardState(FakeClient())
    state.select_status("En cours")
    state.begin(STATUS_PANEL, "En cours")
    state.clear_status()
    assert state.settle(STATUS_PANEL, "En cours", data="late") is False
    assert state.panel(STATUS_PANEL).status is PanelStatus.IDLE


def test_series_without_stats():
    assert completion_rate(None) == 0
    assert [v for _, v in conges_month_series(None)] == [0] * 12
    assert priority_series(None) == {"Projets": {}, "Tâches": {}}


def test_series_from_stats():
    stats = DashboardStats.model_validate(STATS_PAYLOAD)
    assert conges_month_series(stats)[2] == ("Mar", 3)
    assert priority_series(stats)["Projets"] == {"Haute": 4, "Faible": 6}


def test_month_panel_with_malformed_body_is_an_error():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/dashboard/stats":
            return httpx.Response(200, json=STATS_PAYLOAD)
        return httpx.Response(200, json={"unexpected": True})

    client = GDPClient(base_url="http://gdp.test", token="tok", transport=httpx.MockTransport(handler))
    state = DashboardState(client)
    state.fetch_stats("tok")
    state.select_month("Mar")

    panel = state.load_month_panel()
    assert panel.status is PanelStatus.ERROR
    assert panel.request_key == "Mar"
    assert state.page.status is PanelStatus.READY


def test_unknown_status_label_clears_panel_without_fetching():
    client = FakeClient()
    state = DashboardState(client)
    state.select_status("Complété")
    state.load_status_panel()

    state.select_status("approved")
    panel = state.load_status_panel()
    assert panel.status is PanelStatus.IDLE
    assert state.panel(STATUS_PANEL).status is PanelStatus.IDLE
    assert client.calls == [("projects", ProjectStatusDTO.COMPLETED)]
