"""Sprint cards: per-project task boards loaded concurrently."""
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Iterable

from gdp.api.schemas.projects import TaskList, TaskRead, TaskStatusDTO
from gdp.domain.rates import percent
from gdp.ui.api_client import APIError, GDPClient
from gdp.ui.dashboard import Panel, PanelStatus

logger = logging.getLogger(__name__)

BOARD_COLUMNS: tuple[TaskStatusDTO, ...] = (
    TaskStatusDTO.TO_DO, TaskStatusDTO.IN_PROGRESS, TaskStatusDTO.DONE,
)


def load_project_tasks(
    client: GDPClient, project_ids: Iterable[int], *, max_workers: int = 4,
) -> dict[int, Panel[TaskList]]:
    """Fetch every project's tasks in parallel.

    Results are keyed by project id, whatever order they complete in; a
    failing project only marks its own card as ``ERROR``.
    """
    ids = list(dict.fromkeys(project_ids))
    if not ids:
        return {}

    results: dict[int, Panel[TaskList]] = {}
    with ThreadPoolExecutor(max_workers=min(max_workers, len(ids))) as pool:
        futures = {pool.submit(client.list_project_tasks, pid): pid for pid in ids}
        for future in as_completed(futures):
            pid = futures[future]
            try:
                tasks = future.result()
            except APIError as exc:
                logger.warning("Could not load tasks for project %s: %s", pid, exc)
                results[pid] = Panel(PanelStatus.ERROR, error=exc.detail, request_key=pid)
            else:
                results[pid] = Panel(PanelStatus.READY, data=tasks, request_key=pid)
    return results


def board_columns(tasks: Iterable[TaskRead]) -> dict[TaskStatusDTO, list[TaskRead]]:
    """Group tasks into the To Do / In Progress / Done columns."""
    board: dict[TaskStatusDTO, list[TaskRead]] = {status: [] for status in BOARD_COLUMNS}
    for task in tasks:
        board[task.status].append(task)
    return board


def sprint_progress(tasks: Iterable[TaskRead]) -> int:
    items = list(tasks)
    done = sum(1 for t in items if t.status == TaskStatusDTO.DONE)
    return percent(done, len(items))
