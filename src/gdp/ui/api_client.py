"""Typed HTTP client for Streamlit pages.

Only imports from ``gdp.api.schemas``; never ORM, never DB.
Instantiate via ``get_client()`` which caches per Streamlit session.
"""
from __future__ import annotations

from typing import Any, TypeVar

import httpx
from pydantic import BaseModel
import streamlit as st

from gdp.config import settings
from gdp.api.schemas.users import UserRead
from gdp.api.schemas.projects import ProjectRead, ProjectList, ProjectStatusDTO, TaskList
from gdp.api.schemas.conges import CongeList, CongeRead, CongeStatusDTO
from gdp.api.schemas.dashboard import DashboardStats
from gdp.api.schemas.notifications import NotificationList, MarkReadResponse
from gdp.api.schemas.periodic_tasks import PeriodicTaskList, PeriodicTaskRead

M = TypeVar("M", bound=BaseModel)


class APIError(Exception):
    """Raised when the backend returns a 4xx/5xx response."""

    def __init__(self, status_code: int, detail: str) -> None:
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"[{status_code}] {detail}")

    @property
    def unauthorized(self) -> bool:
        return self.status_code == 401


class NetworkError(APIError):
    """The backend could not be reached (connect error, timeout, ...)."""

    def __init__(self, detail: str) -> None:
        super().__init__(0, detail)


class GDPClient:
    """One method per backend endpoint.  All return pure Pydantic DTOs."""

    def __init__(
        self,
        base_url: str | None = None,
        token: str | None = None,
        *,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._token = token
        self._client = httpx.Client(
            base_url=base_url or settings.API_BASE_URL,
            timeout=timeout if timeout is not None else settings.API_TIMEOUT,
            headers={"Accept": "application/json"},
            transport=transport,
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @property
    def token(self) -> str | None:
        return self._token

    def set_token(self, token: str | None) -> None:
        self._token = token

    def _headers(self, token: str | None = None) -> dict[str, str]:
        bearer = token or self._token
        return {"Authorization": f"Bearer {bearer}"} if bearer else {}

    def _send(self, method: str, url: str, *, token: str | None = None, **kwargs: Any) -> httpx.Response:
        try:
            resp = self._client.request(method, url, headers=self._headers(token), **kwargs)
        except httpx.TransportError as exc:
            raise NetworkError(f"{type(exc).__name__}: {exc}") from exc
        self._raise_for_status(resp)
        return resp

    def _raise_for_status(self, resp: httpx.Response) -> None:
        if resp.is_success:
            return
        try:
            body = resp.json()
        except ValueError:
            body = None
        detail = body.get("detail", resp.text) if isinstance(body, dict) else resp.text
        raise APIError(resp.status_code, str(detail))

    def _json(self, resp: httpx.Response, model: type[M] | None = None) -> Any:
        """Decode a 2xx body; a body that is not JSON or not shaped like ``model`` is an ``APIError``."""
        try:
            body = resp.json()
            return model.model_validate(body) if model is not None else body
        except ValueError as exc:
            # JSONDecodeError and pydantic ValidationError are both ValueError
            raise APIError(resp.status_code, f"Invalid response from {resp.request.url.path}: {exc}") from exc

    def close(self) -> None:
        self._client.close()

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    def get_user(self, user_id: int) -> UserRead:
        resp = self._send("GET", f"/users/{user_id}")
        return self._json(resp, UserRead)

    # ------------------------------------------------------------------
    # Projects
    # ------------------------------------------------------------------

    def list_projects(self, status: ProjectStatusDTO | None = None) -> ProjectList:
        params = {"status": status.value} if status else None
        resp = self._send("GET", "/projects", params=params)
        return self._json(resp, ProjectList)

    def get_project(self, project_id: int) -> ProjectRead:
        resp = self._send("GET", f"/projects/{project_id}")
        return self._json(resp, ProjectRead)

    def list_project_tasks(self, project_id: int) -> TaskList:
        resp = self._send("GET", f"/projects/{project_id}/tasks")
        return self._json(resp, TaskList)

    # ------------------------------------------------------------------
    # Congés
    # ------------------------------------------------------------------

    def conges_by_matricule(self, matricule: str) -> CongeList:
        resp = self._send("GET", "/conges", params={"matricule": matricule})
        return self._json(resp, CongeList)

    def conges_by_month(self, month: str) -> CongeList:
        resp = self._send("GET", "/conges", params={"month": month})
        return self._json(resp, CongeList)

    def update_conge_status(self, conge_id: int, status: CongeStatusDTO) -> CongeRead:
        resp = self._send("PUT", f"/conges/{conge_id}/status", json={"status": status.value})
        return self._json(resp, CongeRead)

    # ------------------------------------------------------------------
    # Periodic tasks
    # ------------------------------------------------------------------

    def list_periodic_tasks(self) -> PeriodicTaskList:
        resp = self._send("GET", "/periodic-tasks")
        return self._json(resp, PeriodicTaskList)

    def list_user_periodic_tasks(self, user_id: int) -> PeriodicTaskList:
        resp = self._send("GET", f"/periodic-tasks/user/{user_id}")
        return self._json(resp, PeriodicTaskList)

    def set_periodic_task_active(self, task_id: int, active: bool) -> PeriodicTaskRead:
        resp = self._send("PUT", f"/periodic-tasks/{task_id}", json={"est_active": active})
        return self._json(resp, PeriodicTaskRead)

    # ------------------------------------------------------------------
    # Dashboard
    # ------------------------------------------------------------------

    def get_dashboard_stats(self, token: str | None = None) -> DashboardStats:
        resp = self._send("GET", "/dashboard/stats", token=token)
        return self._json(resp, DashboardStats)

    # ------------------------------------------------------------------
    # Notifications
    # ------------------------------------------------------------------

    def list_admin_notifications(self) -> NotificationList:
        resp = self._send("GET", "/notifications/admin")
        return self._json(resp, NotificationList)

    def mark_notification_read(self, notification_id: int) -> MarkReadResponse:
        resp = self._send("PUT", f"/notifications/read/{notification_id}")
        return self._json(resp, MarkReadResponse)

    # ------------------------------------------------------------------
    # Health
    # ------------------------------------------------------------------

    def health(self) -> dict:
        resp = self._send("GET", "/health")
        return self._json(resp)


# ------------------------------------------------------------------
# Streamlit helper: one client per session
# ------------------------------------------------------------------

def get_client() -> GDPClient:
    """Return a cached ``GDPClient`` for the current Streamlit session."""
    if "gdp_api_client" not in st.session_state:
        base_url = st.session_state.get("gdp_api_url", settings.API_BASE_URL)
        st.session_state["gdp_api_client"] = GDPClient(base_url=base_url)
    return st.session_state["gdp_api_client"]
