"""Projects use-case service. Owns ORM→DTO mapping; routers never see ORM objects."""
from __future__ import annotations
from gdp.domain.exceptions import NotFoundError
from gdp.infra.db.uow import UnitOfWork
from gdp.models.core import ProjectStatus
from gdp.api.schemas.projects import ProjectRead, ProjectList, ProjectStatusDTO, TaskRead, TaskList


class ProjectsService:
    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def list_projects(self, status: ProjectStatusDTO | None = None) -> ProjectList:
        repo = self._uow.projects
        projects = repo.list_all(ProjectStatus(status.value) if status else None)
        return ProjectList(
            items=[ProjectRead.model_validate(p) for p in projects],
            total=len(projects),
        )

    def get_project(self, project_id: int) -> ProjectRead:
        project = self._uow.projects.get_by_id(project_id)
        if project is None:
            raise NotFoundError(f"Project {project_id} not found")
        return ProjectRead.model_validate(project)

    def list_tasks(self, project_id: int) -> TaskList:
        repo = self._uow.projects
        if repo.get_by_id(project_id) is None:
            raise NotFoundError(f"Project {project_id} not found")
        tasks = repo.list_tasks(project_id)
        return TaskList(
            project_id=project_id,
            items=[TaskRead.model_validate(t) for t in tasks],
            total=len(tasks),
        )
