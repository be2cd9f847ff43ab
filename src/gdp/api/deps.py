"""FastAPI dependencies: unit of work and bearer-token session."""
from __future__ import annotations
from typing import Callable, Generator
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from gdp.domain.exceptions import AuthorizationDeniedError
from gdp.domain.roles import Capability
from gdp.domain.session import Session, verify_token
from gdp.infra.db.uow import UnitOfWork

_bearer = HTTPBearer(auto_error=False)


def get_uow() -> Generator[UnitOfWork, None, None]:
    """Yield one UnitOfWork per request; commit/rollback in __exit__."""
    with UnitOfWork() as uow:
        yield uow


def get_session(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
) -> Session:
    """Resolve the caller from the ``Authorization: Bearer`` header; 401 otherwise."""
    token = credentials.credentials if credentials else None
    return verify_token(token)


def require(capability: Capability) -> Callable[..., Session]:
    """Dependency factory: the caller's role must hold ``capability``; 403 otherwise."""

    def _check(session: Session = Depends(get_session)) -> Session:
        if not session.can(capability):
            raise AuthorizationDeniedError(
                f"Role {session.role.value} lacks {capability.value}"
            )
        return session

    return _check
