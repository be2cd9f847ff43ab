"""Repository for Project and Tache records. No business logic."""
from __future__ import annotations
from sqlmodel import Session, select
from gdp.models.core import Project, ProjectStatus, Tache


class ProjectRepository:
    def __init__(self, session: Session) -> None:
        self._s = session

    def get_by_id(self, project_id: int) -> Project | None:
        return self._s.get(Project, project_id)

    def list_all(self, status: ProjectStatus | None = None) -> list[Project]:
        stmt = select(Project)
        if status is not None:
            stmt = stmt.where(Project.status == status)
        return list(self._s.exec(stmt.order_by(Project.id)).all())

    def add(self, project: Project) -> Project:
        self._s.add(project)
        self._s.flush()
        return project

    # --- Tache ---

    def list_tasks(self, project_id: int) -> list[Tache]:
        return list(self._s.exec(
            select(Tache).where(Tache.project_id == project_id).order_by(Tache.id)
        ).all())

    def list_all_tasks(self) -> list[Tache]:
        return list(self._s.exec(select(Tache)).all())

    def add_task(self, task: Tache) -> Tache:
        self._s.add(task)
        self._s.flush()
        return task
