"""Repository for User records. No business logic; caller owns the transaction."""
from __future__ import annotations
from typing import Iterable
from sqlmodel import Session, select
from gdp.models.core import User


class UserRepository:
    def __init__(self, session: Session) -> None:
        self._s = session

    def get_by_id(self, user_id: int) -> User | None:
        return self._s.get(User, user_id)

    def list_all(self) -> list[User]:
        return list(self._s.exec(select(User).order_by(User.id)).all())

    def add(self, user: User) -> User:
        self._s.add(user)
        self._s.flush()
        return user

    def list_by_ids(self, user_ids: Iterable[int]) -> list[User]:
        ids = set(user_ids)
        if not ids:
            return []
        return list(self._s.exec(select(User).where(User.id.in_(ids)).order_by(User.id)).all())
