"""Concurrent per-project task loading and board helpers."""
import threading
from datetime import datetime

import httpx

from gdp.api.schemas.projects import TaskList, TaskRead, TaskStatusDTO, TaskPriorityDTO
from gdp.ui.api_client import APIError, GDPClient
from gdp.ui.dashboard import PanelStatus
from gdp.ui.sprints import board_columns, load_project_tasks, sprint_progress


def _task(task_id: int, status: TaskStatusDTO, project_id: int = 1) -> TaskRead:
    return TaskRead(
        id=task_id, title=f"t{task_id}", status=status, priority=TaskPriorityDTO.LOW,
        creation_date=datetime(2024, 1, 1), project_id=project_id,
    )


class SlowFirstClient:
    """Project 1 answers last; project 3 fails."""

    def __init__(self):
        self.release = threading.Event()
        self.calls: list[int] = []
        self._lock = threading.Lock()

    def list_project_tasks(self, project_id):
        with self._lock:
            self.calls.append(project_id)
        if project_id == 1:
            self.release.wait(timeout=2)
        else:
            self.release.set()
        if project_id == 3:
            raise APIError(500, "boom")
        return TaskList(project_id=project_id, items=[_task(project_id * 10, TaskStatusDTO.DONE, project_id)], total=1)


def test_results_keyed_by_project_id():
    client = SlowFirstClient()
    results = load_project_tasks(client, [1, 2, 3, 2])

    assert sorted(client.calls) == [1, 2, 3]
    assert set(results) == {1, 2, 3}
    assert results[1].data.project_id == 1
    assert results[2].data.items[0].project_id == 2
    assert results[3].status is PanelStatus.ERROR
    assert results[3].error == "boom"
    assert results[1].status is PanelStatus.READY


def test_no_projects_no_requests():
    assert load_project_tasks(SlowFirstClient(), []) == {}


def test_board_columns_and_progress():
    tasks = [
        _task(1, TaskStatusDTO.DONE), _task(2, TaskStatusDTO.TO_DO),
        _task(3, TaskStatusDTO.DONE), _task(4, TaskStatusDTO.IN_PROGRESS),
    ]
    board = board_columns(tasks)
    assert [t.id for t in board[TaskStatusDTO.DONE]] == [1, 3]
    assert list(board) == [TaskStatusDTO.TO_DO, TaskStatusDTO.IN_PROGRESS, TaskStatusDTO.DONE]
    assert sprint_progress(tasks) == 50
    assert sprint_progress([]) == 0


def test_unparseable_success_body_marks_only_that_card():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/projects/2/tasks":
            return httpx.Response(200, text="<html>proxy error</html>")
        return httpx.Response(200, json={"project_id": 1, "items": [], "total": 0})

    client = GDPClient(base_url="http://gdp.test", token="tok", transport=httpx.MockTransport(handler))
    results = load_project_tasks(client, [1, 2])

    assert {pid: panel.status for pid, panel in results.items()} == {
        1: PanelStatus.READY, 2: PanelStatus.ERROR,
    }
    assert "Invalid response" in results[2].error
