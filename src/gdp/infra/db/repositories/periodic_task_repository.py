"""Repository for PeriodicTask records. No business logic."""
from __future__ import annotations
from sqlmodel import Session, select
from gdp.models.periodic import PeriodicTask, UserPeriodicTaskLink


class PeriodicTaskRepository:
    def __init__(self, session: Session) -> None:
        self._s = session

    def get_by_id(self, task_id: int) -> PeriodicTask | None:
        return self._s.get(PeriodicTask, task_id)

    def list_all(self) -> list[PeriodicTask]:
        return list(self._s.exec(select(PeriodicTask).order_by(PeriodicTask.id)).all())

    def list_for_user(self, user_id: int) -> list[PeriodicTask]:
        return list(self._s.exec(
            select(PeriodicTask)
            .join(UserPeriodicTaskLink, UserPeriodicTaskLink.periodic_task_id == PeriodicTask.id)
            .where(UserPeriodicTaskLink.user_id == user_id)
            .order_by(PeriodicTask.id)
        ).all())

    def add(self, task: PeriodicTask) -> PeriodicTask:
        self._s.add(task)
        self._s.flush()
        return task

    def delete(self, task: PeriodicTask) -> None:
        self._s.delete(task)
        self._s.flush()
