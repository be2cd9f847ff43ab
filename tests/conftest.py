"""Shared test fixtures.

  use_test_engine: redirects UoW + infra layer to a temp-file SQLite DB.
  client: FastAPI TestClient wired to the test engine.
  make_token: signs bearer tokens the API accepts.
  seeded: a small dataset: one user per role, projects, tasks, congés.
"""
import time
from datetime import date

import pytest
from jose import jwt
from sqlmodel import SQLModel, create_engine, Session

from gdp.config import settings


@pytest.fixture
def use_test_engine(tmp_path, monkeypatch):
    """Monkeypatch infra/db engine references to an isolated temp-file SQLite DB."""
    db_path = tmp_path / "test_gdp.db"
    test_engine = create_engine(
        f"sqlite:///{db_path}", echo=False, connect_args={"check_same_thread": False},
    )

    import gdp.models  # noqa: F401 (registers all ORM mappers)
    SQLModel.metadata.create_all(test_engine)

    monkeypatch.setattr("gdp.infra.db.engine.engine", test_engine)
    monkeypatch.setattr("gdp.infra.db.uow.engine", test_engine)

    yield test_engine

    SQLModel.metadata.drop_all(test_engine)
    test_engine.dispose()


@pytest.fixture
def client(use_test_engine):
    """FastAPI TestClient backed by the isolated test engine."""
    from fastapi.testclient import TestClient
    from gdp.api.app import create_app

    app = create_app()
    with TestClient(app) as c:
        yield c


def sign_token(user_id: int, role: str, *, expires_in: int = 3600, **extra) -> str:
    claims = {
        "sub": str(user_id),
        "userId": user_id,
        "role": role,
        "firstName": extra.pop("first_name", "Test"),
        "lastName": extra.pop("last_name", "User"),
        "matricule": extra.pop("matricule", None),
        "email": extra.pop("email", f"user{user_id}@gdp.local"),
        "exp": int(time.time()) + expires_in,
    }
    claims.update(extra)
    return jwt.encode(claims, settings.JWT_SECRET.get_secret_value(), algorithm=settings.JWT_ALGORITHM)


@pytest.fixture
def make_token():
    return sign_token


@pytest.fixture
def auth(make_token):
    """``auth("ADMIN")`` -> headers carrying a valid bearer token for that role."""

    def _auth(role: str = "ADMIN", user_id: int = 1) -> dict[str, str]:
        return {"Authorization": f"Bearer {make_token(user_id, role)}"}

    return _auth


@pytest.fixture
def seeded(use_test_engine):
    """Insert a deterministic dataset and return the generated ids."""
    from gdp.domain.roles import Role
    from gdp.models import (
        User, UserStatus, Project, ProjectStatus, ProjectPriority,
        Tache, TaskStatus, TaskPriority, Conge, CongeType, CongeStatus, Notification,
    )

    year = date.today().year
    with Session(use_test_engine) as s:
        admin = User(username="admin", first_name="Amina", last_name="Admin", email="a@gdp.local",
                     matricule="A001", role=Role.ADMIN, status=UserStatus.ACTIF)
        dev = User(username="dev", first_name="Driss", last_name="Dev", email="d@gdp.local",
                   matricule="D001", role=Role.DEVELOPPER, status=UserStatus.ACTIF)
        infra = User(username="infra", first_name="Ines", last_name="Infra", email="i@gdp.local",
                     matricule="I001", role=Role.INFRA)

        done = Project(name="Done", status=ProjectStatus.COMPLETED, priorite=ProjectPriority.HIGH, users=[dev])
        doing = Project(name="Doing", status=ProjectStatus.IN_PROGRESS, priorite=ProjectPriority.HIGH, users=[dev])
        todo = Project(name="Todo", status=ProjectStatus.TO_DO, priorite=ProjectPriority.LOW, users=[infra])
        s.add_all([admin, dev, infra, done, doing, todo])
        s.commit()

        s.add_all([
            Tache(title="t1", status=TaskStatus.DONE, priority=TaskPriority.HIGH, project_id=doing.id, user_id=dev.id),
            Tache(title="t2", status=TaskStatus.IN_PROGRESS, priority=TaskPriority.HIGH, project_id=doing.id, user_id=dev.id),
            Tache(title="t3", status=TaskStatus.TO_DO, priority=TaskPriority.LOW, project_id=todo.id, user_id=infra.id),
            Tache(title="t4", status=TaskStatus.DONE, priority=TaskPriority.LOW, project_id=done.id, user_id=dev.id),
        ])
        s.add_all([
            Conge(user_id=dev.id, matricule="D001", service="IT", responsable="Amina Admin",
                  type=CongeType.CONGE, start_date=date(year, 3, 3), end_date=date(year, 3, 7),
                  date_reprise=date(year, 3, 10), first_name="Driss", last_name="Dev",
                  status=CongeStatus.APPROVED),
            Conge(user_id=dev.id, matricule="D001", service="IT", responsable="Amina Admin",
                  type=CongeType.MALADIE, start_date=date(year, 5, 12), end_date=date(year, 5, 13),
                  date_reprise=date(year, 5, 14), first_name="Driss", last_name="Dev"),
            Conge(user_id=infra.id, matricule="I001", service="Infra", responsable="Amina Admin",
                  type=CongeType.CONGE, start_date=date(year, 3, 31), end_date=date(year, 4, 2),
                  date_reprise=date(year, 4, 3), first_name="Ines", last_name="Infra"),
            Conge(user_id=infra.id, matricule="I001", service="Infra", responsable="Amina Admin",
                  type=CongeType.AUTRES, start_date=date(year - 1, 3, 15), end_date=date(year - 1, 3, 16),
                  date_reprise=date(year - 1, 3, 17), first_name="Ines", last_name="Infra"),
        ])
        s.add(Notification(user_id=admin.id, message="Nouvelle demande"))
        s.commit()

        ids = {
            "admin": admin.id, "dev": dev.id, "infra": infra.id,
            "done": done.id, "doing": doing.id, "todo": todo.id,
        }
    return ids
