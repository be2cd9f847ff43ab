"""Periodic tasks use-case service."""
from __future__ import annotations
from typing import Iterable
from gdp.domain.exceptions import InvalidRequestError, NotFoundError
from gdp.infra.db.uow import UnitOfWork
from gdp.models.periodic import PeriodicTask
from gdp.api.schemas.periodic_tasks import (
    PeriodicTaskCreate, PeriodicTaskDeleted, PeriodicTaskList, PeriodicTaskRead, PeriodicTaskUpdate,
)
from gdp.logging import logger

NO_VALID_USERS = "Aucun utilisateur valide trouvé pour cette tâche."


class PeriodicTasksService:
    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def _to_list(self, tasks) -> PeriodicTaskList:
        return PeriodicTaskList(items=[PeriodicTaskRead.model_validate(t) for t in tasks], total=len(tasks))

    def _get(self, task_id: int) -> PeriodicTask:
        task = self._uow.periodic_tasks.get_by_id(task_id)
        if task is None:
            raise NotFoundError(f"Tâche périodique avec l'ID {task_id} introuvable.")
        return task

    def _assignees(self, user_ids: Iterable[int]):
        users = self._uow.users.list_by_ids(user_ids)
        if not users:
            raise InvalidRequestError(NO_VALID_USERS)
        return users

    def list_all(self) -> PeriodicTaskList:
        return self._to_list(self._uow.periodic_tasks.list_all())

    def list_for_user(self, user_id: int) -> PeriodicTaskList:
        return self._to_list(self._uow.periodic_tasks.list_for_user(user_id))

    def get(self, task_id: int) -> PeriodicTaskRead:
        return PeriodicTaskRead.model_validate(self._get(task_id))

    def create(self, body: PeriodicTaskCreate) -> PeriodicTaskRead:
        users = self._assignees(body.users)
        task = PeriodicTask(**body.model_dump(exclude={"users"}), users=users)
        self._uow.periodic_tasks.add(task)
        logger.info("Periodic task %s created for %d user(s)", task.id, len(users))
        return PeriodicTaskRead.model_validate(task)

    def update(self, task_id: int, body: PeriodicTaskUpdate) -> PeriodicTaskRead:
        task = self._get(task_id)
        changes = body.model_dump(exclude_unset=True)
        user_ids = changes.pop("users", None)
        if user_ids is not None:
            task.users = self._assignees(user_ids)
        for name, value in changes.items():
            # explicit nulls only clear the optional execution time
            if value is None and name != "heure_execution":
                continue
            setattr(task, name, value)
        self._uow.session.add(task)
        self._uow.session.flush()
        return PeriodicTaskRead.model_validate(task)

    def delete(self, task_id: int) -> PeriodicTaskDeleted:
        task = self._get(task_id)
        self._uow.periodic_tasks.delete(task)
        logger.info("Periodic task %s deleted", task_id)
        return PeriodicTaskDeleted(id=task_id)
