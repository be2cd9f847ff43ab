"""Periodic task endpoints."""
from fastapi import APIRouter, Depends
from gdp.api.deps import get_uow, require
from gdp.api.schemas.periodic_tasks import (
    PeriodicTaskCreate, PeriodicTaskDeleted, PeriodicTaskList, PeriodicTaskRead, PeriodicTaskUpdate,
)
from gdp.domain.roles import Capability
from gdp.infra.db.uow import UnitOfWork
from gdp.services.periodic_tasks_service import PeriodicTasksService

router = APIRouter(
    prefix="/periodic-tasks",
    tags=["periodic-tasks"],
    dependencies=[Depends(require(Capability.VIEW_PERIODIC_TASKS))],
)


@router.post(
    "",
    response_model=PeriodicTaskRead,
    status_code=201,
    dependencies=[Depends(require(Capability.MANAGE_PERIODIC_TASKS))],
)
def create_periodic_task(body: PeriodicTaskCreate, uow: UnitOfWork = Depends(get_uow)) -> PeriodicTaskRead:
    return PeriodicTasksService(uow).create(body)


@router.get("", response_model=PeriodicTaskList)
def list_periodic_tasks(uow: UnitOfWork = Depends(get_uow)) -> PeriodicTaskList:
    return PeriodicTasksService(uow).list_all()


@router.get("/user/{user_id}", response_model=PeriodicTaskList)
def list_user_periodic_tasks(user_id: int, uow: UnitOfWork = Depends(get_uow)) -> PeriodicTaskList:
    return PeriodicTasksService(uow).list_for_user(user_id)


@router.get("/{task_id}", response_model=PeriodicTaskRead)
def get_periodic_task(task_id: int, uow: UnitOfWork = Depends(get_uow)) -> PeriodicTaskRead:
    return PeriodicTasksService(uow).get(task_id)


@router.put(
    "/{task_id}",
    response_model=PeriodicTaskRead,
    dependencies=[Depends(require(Capability.EDIT_PERIODIC_TASKS))],
)
def update_periodic_task(
    task_id: int, body: PeriodicTaskUpdate, uow: UnitOfWork = Depends(get_uow),
) -> PeriodicTaskRead:
    return PeriodicTasksService(uow).update(task_id, body)


@router.delete(
    "/{task_id}",
    response_model=PeriodicTaskDeleted,
    dependencies=[Depends(require(Capability.MANAGE_PERIODIC_TASKS))],
)
def delete_periodic_task(task_id: int, uow: UnitOfWork = Depends(get_uow)) -> PeriodicTaskDeleted:
    return PeriodicTasksService(uow).delete(task_id)
