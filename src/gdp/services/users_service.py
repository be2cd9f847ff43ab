"""Users use-case service."""
from __future__ import annotations
from gdp.domain.exceptions import NotFoundError
from gdp.infra.db.uow import UnitOfWork
from gdp.api.schemas.users import UserRead


class UsersService:
    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def get_user(self, user_id: int) -> UserRead:
        user = self._uow.users.get_by_id(user_id)
        if user is None:
            raise NotFoundError(f"User {user_id} not found")
        return UserRead.model_validate(user)
