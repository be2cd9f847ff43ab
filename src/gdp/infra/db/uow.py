"""Unit of Work: one session per logical operation, with its repositories."""
from __future__ import annotations
from sqlmodel import Session
from gdp.infra.db.engine import engine
from gdp.infra.db.repositories.user_repository import UserRepository
from gdp.infra.db.repositories.project_repository import ProjectRepository
from gdp.infra.db.repositories.conge_repository import CongeRepository
from gdp.infra.db.repositories.notification_repository import NotificationRepository
from gdp.infra.db.repositories.periodic_task_repository import PeriodicTaskRepository

_INACTIVE = "UnitOfWork is not active, use it as a context manager."


class UnitOfWork:
    """Context manager wrapping a single DB session.

    Commits on clean exit, rolls back on exception, always closes.
    Repositories share the session, so they see each other's pending writes.
    """

    def __init__(self) -> None:
        self._session: Session | None = None

    def __enter__(self) -> "UnitOfWork":
        self._session = Session(engine)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        try:
            if exc_type is None:
                self._session.commit()
            else:
                self._session.rollback()
        finally:
            self._session.close()
            self._session = None

    @property
    def session(self) -> Session:
        if self._session is None:
            raise RuntimeError(_INACTIVE)
        return self._session

    @property
    def users(self) -> UserRepository:
        return UserRepository(self.session)

    @property
    def projects(self) -> ProjectRepository:
        return ProjectRepository(self.session)

    @property
    def conges(self) -> CongeRepository:
        return CongeRepository(self.session)

    @property
    def notifications(self) -> NotificationRepository:
        return NotificationRepository(self.session)

    @property
    def periodic_tasks(self) -> PeriodicTaskRepository:
        return PeriodicTaskRepository(self.session)

    def commit(self) -> None:
        """Mid-operation commit, e.g. to make a write visible before the request ends."""
        self.session.commit()
