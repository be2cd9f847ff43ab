"""Unit tests for the UnitOfWork context manager."""
import pytest
from sqlmodel import Session, select
from gdp.domain.roles import Role
from gdp.models.core import User
from gdp.infra.db.uow import UnitOfWork


def _user(name: str) -> User:
    return User(username=name, first_name=name, last_name="Test", email=f"{name}@gdp.local", role=Role.INFRA)


def test_commit_persists_record(use_test_engine):
    with UnitOfWork() as uow:
        user = _user("committed")
        uow.session.add(user)
        uow.commit()
        user_id = user.id

    # Verify in a separate session
    with Session(use_test_engine) as s:
        fetched = s.get(User, user_id)
        assert fetched is not None
        assert fetched.username == "committed"


def test_rollback_on_exception_reverts_record(use_test_engine):
    with Session(use_test_engine) as s:
        count_before = len(s.exec(select(User)).all())

    with pytest.raises(ValueError):
        with UnitOfWork() as uow:
            uow.session.add(_user("rolled-back"))
            uow.session.flush()  # write to DB within transaction
            raise ValueError("forced error")

    with Session(use_test_engine) as s:
        count_after = len(s.exec(select(User)).all())

    assert count_after == count_before


def test_session_outside_context_raises(use_test_engine):
    uow = UnitOfWork()
    with pytest.raises(RuntimeError):
        uow.session


def test_repositories_share_the_session(use_test_engine):
    from gdp.models.core import Project

    with UnitOfWork() as uow:
        user = uow.users.add(_user("member"))
        project = uow.projects.add(Project(name="Shared", users=[user]))
        # visible before commit through another repository on the same session
        assert [p.name for p in uow.projects.list_all()] == ["Shared"]
        assert uow.users.get_by_id(user.id).projects[0].id == project.id
