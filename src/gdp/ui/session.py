"""Session resolution and the per-session owned state.

``SessionResolver`` turns the persisted ``token`` key into a ``Session``.
``SessionContext`` bundles what one signed-in user owns (session, favorites
store) and is torn down as a unit on sign-out.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, MutableMapping

from gdp.domain.session import Session, read_token
from gdp.ui.favorites import FavoritesStore
from gdp.ui.storage import KeyValueStorage, browser_storage, user_storage

logger = logging.getLogger(__name__)

TOKEN_KEY = "token"


class SessionResolver:
    def __init__(self, storage: KeyValueStorage | None = None) -> None:
        self._storage = storage if storage is not None else browser_storage()

    def persist_token(self, token: str) -> None:
        """Store a token received out of band (sign-in, ``?token=`` link)."""
        self._storage.set(TOKEN_KEY, token)

    def accept_query_token(self, params: MutableMapping[str, str]) -> bool:
        """Persist a ``?token=`` link parameter and drop it from the URL."""
        token = params.get(TOKEN_KEY)
        if not token:
            return False
        self.persist_token(token)
        del params[TOKEN_KEY]
        return True

    def sign_in(self, token: str) -> Session | None:
        """Persist ``token`` only if it resolves to a session."""
        self.persist_token(token)
        session = self.resolve()
        if session is None:
            logger.info("Rejected sign-in token")
            self.sign_out()
        return session

    def token(self) -> str | None:
        return self._storage.get(TOKEN_KEY)

    def resolve(self) -> Session | None:
        return read_token(self.token())

    def is_authenticated(self) -> bool:
        return self.resolve() is not None

    def sign_out(self) -> None:
        self._storage.remove(TOKEN_KEY)


@dataclass
class SessionContext:
    session: Session
    favorites: FavoritesStore = field(repr=False)
    closed: bool = False

    @classmethod
    def open(
        cls,
        session: Session,
        storage_for: Callable[[int], KeyValueStorage] = user_storage,
    ) -> "SessionContext":
        favorites = FavoritesStore(storage_for)
        favorites.load(session.user_id)
        return cls(session=session, favorites=favorites)

    @property
    def token(self) -> str:
        return self.session.token

    def close(self) -> None:
        if self.closed:
            return
        self.favorites.close()
        self.closed = True
        logger.info("Session closed for user %s", self.session.user_id)


def reconcile_context(
    current: SessionContext | None,
    session: Session | None,
    open_context: Callable[[Session], SessionContext] = SessionContext.open,
) -> SessionContext | None:
    """Context to keep for ``session``.

    The current one is reused while the same session stays signed in; it is
    closed when the session ends or changes, and a fresh one is opened for a
    new session.
    """
    if current is not None and session is not None and current.session == session and not current.closed:
        return current
    if current is not None:
        current.close()
    if session is None:
        return None
    return open_context(session)
