"""Project endpoints."""
from fastapi import APIRouter, Depends
from gdp.api.deps import get_uow, get_session
from gdp.api.schemas.projects import ProjectRead, ProjectList, ProjectStatusDTO, TaskList
from gdp.infra.db.uow import UnitOfWork
from gdp.services.projects_service import ProjectsService

router = APIRouter(prefix="/projects", tags=["projects"], dependencies=[Depends(get_session)])


@router.get("", response_model=ProjectList)
def list_projects(
    status: ProjectStatusDTO | None = None,
    uow: UnitOfWork = Depends(get_uow),
) -> ProjectList:
    return ProjectsService(uow).list_projects(status)


@router.get("/{project_id}", response_model=ProjectRead)
def get_project(project_id: int, uow: UnitOfWork = Depends(get_uow)) -> ProjectRead:
    return ProjectsService(uow).get_project(project_id)


@router.get("/{project_id}/tasks", response_model=TaskList)
def list_project_tasks(project_id: int, uow: UnitOfWork = Depends(get_uow)) -> TaskList:
    return ProjectsService(uow).list_tasks(project_id)
