"""Dashboard use-case service: one aggregate snapshot over the whole database."""
from __future__ import annotations
from collections import Counter
from datetime import date
from typing import Iterable

from gdp.domain.rates import percent, ratio
from gdp.infra.db.uow import UnitOfWork
from gdp.models.core import Project, ProjectPriority, ProjectStatus, Tache, TaskPriority, TaskStatus, User
from gdp.models.hr import Conge
from gdp.api.schemas.dashboard import (
    DashboardStats, ProjectStats, ProjectProductivity, TaskStats, TaskProductivity,
    UserStats, UserProductivity, CongeStats,
)


def _count_by(values: Iterable) -> dict[str, int]:
    return dict(Counter(getattr(v, "value", v) for v in values))


class DashboardService:
    def __init__(self, uow: UnitOfWork, *, today: date | None = None) -> None:
        self._uow = uow
        self._today = today

    def get_stats(self) -> DashboardStats:
        uow = self._uow
        projects = uow.projects.list_all()
        tasks = uow.projects.list_all_tasks()
        users = uow.users.list_all()
        conges = uow.conges.list_all()

        return DashboardStats(
            projects=self._project_stats(projects),
            tasks=self._task_stats(tasks),
            users=self._user_stats(users, tasks),
            conges=self._conge_stats(conges),
        )

    # --- Projects ---

    def _project_stats(self, projects: list[Project]) -> ProjectStats:
        total = len(projects)
        by_status = Counter(p.status for p in projects)

        def priority_completion(priority: ProjectPriority) -> int:
            scoped = [p for p in projects if p.priorite == priority]
            done = sum(1 for p in scoped if p.status == ProjectStatus.COMPLETED)
            return percent(done, len(scoped))

        return ProjectStats(
            total=total,
            by_status=_count_by(p.status for p in projects),
            by_priority=_count_by(p.priorite for p in projects),
            productivity=ProjectProductivity(
                completion_rate=percent(by_status[ProjectStatus.COMPLETED], total),
                in_progress_rate=percent(by_status[ProjectStatus.IN_PROGRESS], total),
                to_do_rate=percent(by_status[ProjectStatus.TO_DO], total),
                high_priority_completion=priority_completion(ProjectPriority.HIGH),
                medium_priority_completion=priority_completion(ProjectPriority.MEDIUM),
                low_priority_completion=priority_completion(ProjectPriority.LOW),
            ),
        )

    # --- Tasks ---

    def _task_stats(self, tasks: list[Tache]) -> TaskStats:
        total = len(tasks)
        by_status = Counter(t.status for t in tasks)

        def priority_completion(priority: TaskPriority) -> float:
            scoped = [t for t in tasks if t.priority == priority]
            done = sum(1 for t in scoped if t.status == TaskStatus.DONE)
            return ratio(done, len(scoped))

        return TaskStats(
            total=total,
            by_status=_count_by(t.status for t in tasks),
            by_priority=_count_by(t.priority for t in tasks),
            productivity=TaskProductivity(
                completion_rate=ratio(by_status[TaskStatus.DONE], total),
                in_progress_rate=ratio(by_status[TaskStatus.IN_PROGRESS], total),
                to_do_rate=ratio(by_status[TaskStatus.TO_DO], total),
                high_priority_completion=priority_completion(TaskPriority.HIGH),
                low_priority_completion=priority_completion(TaskPriority.LOW),
            ),
        )

    # --- Users ---

    def _user_stats(self, users: list[User], tasks: list[Tache]) -> UserStats:
        per_user: list[UserProductivity] = []
        for user in users:
            own = [t for t in tasks if t.user_id == user.id]
            done = sum(1 for t in own if t.status == TaskStatus.DONE)
            per_user.append(UserProductivity(
                user_id=user.id,
                username=user.username,
                total_tasks=len(own),
                completed_tasks=done,
                completion_rate=ratio(done, len(own)),
            ))
        return UserStats(
            total=len(users),
            by_role=_count_by(u.role for u in users),
            productivity=per_user,
        )

    # --- Congés ---

    def _conge_stats(self, conges: list[Conge]) -> CongeStats:
        year = (self._today or date.today()).year
        by_month = [0] * 12
        for c in conges:
            if c.start_date.year == year:
                by_month[c.start_date.month - 1] += 1
        return CongeStats(
            total=len(conges),
            by_month=by_month,
            by_type=_count_by(c.type for c in conges),
            by_status=_count_by(c.status for c in conges),
        )
