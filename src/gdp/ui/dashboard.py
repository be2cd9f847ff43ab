"""Dashboard page state: stats snapshot, cross-filter selection, scoped panels.

Page load follows ``LOADING -> READY | ERROR``. Once ``READY``, a sub-panel
(congés of the selected month, projects of the selected status) can go
through its own ``LOADING`` without touching the rest of the dashboard.

Scoped fetches are tagged with the selection they were issued for; a result
that settles after the selection moved on is dropped.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Callable, Generic, TypeVar

from gdp.api.schemas.conges import CongeList
from gdp.api.schemas.dashboard import DashboardStats
from gdp.api.schemas.projects import ProjectList, ProjectStatusDTO
from gdp.domain.calendar import MONTH_LABELS
from gdp.domain.rates import status_rates
from gdp.ui.api_client import APIError, GDPClient

logger = logging.getLogger(__name__)

T = TypeVar("T")

STATS_ERROR = "Failed to load dashboard statistics"

# Donut labels, in series order, and the stored status each one filters on
DONUT_LABELS: tuple[str, ...] = ("Complété", "En cours", "À faire")
STATUS_FOR_LABEL: dict[str, ProjectStatusDTO] = {
    "Complété": ProjectStatusDTO.COMPLETED,
    "En cours": ProjectStatusDTO.IN_PROGRESS,
    "À faire": ProjectStatusDTO.TO_DO,
}

MONTH_PANEL = "month"
STATUS_PANEL = "status"


class PanelStatus(str, Enum):
    IDLE = "IDLE"
    LOADING = "LOADING"
    READY = "READY"
    ERROR = "ERROR"


@dataclass(frozen=True)
class Panel(Generic[T]):
    status: PanelStatus = PanelStatus.IDLE
    data: T | None = None
    error: str | None = None
    request_key: Any = None

    @property
    def loading(self) -> bool:
        return self.status is PanelStatus.LOADING


@dataclass(frozen=True)
class CrossFilterSelection:
    selected_status: str | None = None
    selected_month: str | None = None


@dataclass
class DashboardState:
    """Owned by the dashboard page; chart views get read-only values plus the ``select_*`` handles."""

    client: GDPClient
    page: Panel[DashboardStats] = field(default_factory=lambda: Panel(PanelStatus.LOADING))
    selection: CrossFilterSelection = field(default_factory=CrossFilterSelection)
    panels: dict[str, Panel] = field(default_factory=dict)

    # ------------------------------------------------------------------
    # Page-level stats
    # ------------------------------------------------------------------

    @property
    def stats(self) -> DashboardStats | None:
        return self.page.data

    @property
    def error(self) -> str | None:
        return self.page.error

    @property
    def loading(self) -> bool:
        return self.page.loading

    def fetch_stats(self, token: str | None) -> DashboardStats | None:
        """Single fetch; any failure is terminal for this page run (no retry, no partial stats)."""
        self.page = Panel(PanelStatus.LOADING)
        try:
            if not token:
                raise APIError(401, "No token found")
            stats = self.client.get_dashboard_stats(token)
        except (APIError, ValueError) as exc:
            logger.error("Error loading dashboard stats: %s", exc)
            self.page = Panel(PanelStatus.ERROR, error=STATS_ERROR)
            return None
        self.page = Panel(PanelStatus.READY, data=stats)
        return stats

    # ------------------------------------------------------------------
    # Cross-filter selection
    # ------------------------------------------------------------------

    def select_status(self, status: str) -> None:
        self.selection = replace(self.selection, selected_status=status)

    def select_month(self, month: str) -> None:
        self.selection = replace(self.selection, selected_month=month)

    def clear_status(self) -> None:
        self.selection = replace(self.selection, selected_status=None)
        self.panels.pop(STATUS_PANEL, None)

    def clear_month(self) -> None:
        self.selection = replace(self.selection, selected_month=None)
        self.panels.pop(MONTH_PANEL, None)

    # ------------------------------------------------------------------
    # Scoped panels
    # ------------------------------------------------------------------

    def panel(self, name: str) -> Panel:
        return self.panels.get(name, Panel())

    def begin(self, name: str, key: Any) -> None:
        self.panels[name] = Panel(PanelStatus.LOADING, request_key=key)

    def settle(self, name: str, key: Any, *, data: Any = None, error: str | None = None) -> bool:
        """Apply a scoped result; returns ``False`` when it arrived for a stale request."""
        current = self.panels.get(name)
        if current is None or current.request_key != key:
            logger.debug("Dropping stale %s panel result for %r", name, key)
            return False
        if error is not None:
            self.panels[name] = Panel(PanelStatus.ERROR, error=error, request_key=key)
        else:
            self.panels[name] = Panel(PanelStatus.READY, data=data, request_key=key)
        return True

    def _load(self, name: str, key: Any, fetch: Callable[[], T]) -> Panel[T]:
        self.begin(name, key)
        try:
            result = fetch()
        except APIError as exc:
            self.settle(name, key, error=exc.detail)
        else:
            self.settle(name, key, data=result)
        return self.panel(name)

    def load_month_panel(self) -> Panel[CongeList]:
        month = self.selection.selected_month
        if month is None:
            self.panels.pop(MONTH_PANEL, None)
            return Panel()
        return self._load(MONTH_PANEL, month, lambda: self.client.conges_by_month(month))

    def load_status_panel(self) -> Panel[ProjectList]:
        label = self.selection.selected_status
        status = STATUS_FOR_LABEL.get(label) if label else None
        if status is None:
            if label is not None:
                logger.warning("Ignoring unknown project status label %r", label)
            self.panels.pop(STATUS_PANEL, None)
            return Panel()
        return self._load(STATUS_PANEL, label, lambda: self.client.list_projects(status))


# ----------------------------------------------------------------------
# Chart series
# ----------------------------------------------------------------------

def project_status_series(stats: DashboardStats | None) -> list[tuple[str, int]]:
    """Donut series: completion / in-progress / to-do rates from ``projects.by_status``."""
    by_status = stats.projects.by_status if stats else {}
    return list(zip(DONUT_LABELS, status_rates(by_status)))


def completion_rate(stats: DashboardStats | None) -> int:
    return project_status_series(stats)[0][1]


def conges_month_series(stats: DashboardStats | None) -> list[tuple[str, int]]:
    by_month = stats.conges.by_month if stats else [0] * 12
    return list(zip(MONTH_LABELS, by_month))


def priority_series(stats: DashboardStats | None) -> dict[str, dict[str, int]]:
    """Counts per priority for projects and tasks, keyed by chart category."""
    if stats is None:
        return {"Projets": {}, "Tâches": {}}
    return {
        "Projets": dict(stats.projects.by_priority),
        "Tâches": dict(stats.tasks.by_priority),
    }
