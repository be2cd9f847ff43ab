"""User endpoints."""
from fastapi import APIRouter, Depends
from gdp.api.deps import get_uow, get_session
from gdp.api.schemas.users import UserRead
from gdp.domain.session import Session
from gdp.infra.db.uow import UnitOfWork
from gdp.services.users_service import UsersService

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/{user_id}", response_model=UserRead)
def get_user(
    user_id: int,
    uow: UnitOfWork = Depends(get_uow),
    _: Session = Depends(get_session),
) -> UserRead:
    return UsersService(uow).get_user(user_id)
