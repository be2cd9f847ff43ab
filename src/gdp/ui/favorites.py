"""Favorite projects of the signed-in user, persisted in client storage.

The set lives under the ``favorites`` key as a JSON array of integers.
A missing or malformed value reads as the empty set; the next toggle
overwrites it with a well-formed array.
"""
from __future__ import annotations

import json
import logging
from typing import Callable

from gdp.domain.exceptions import MalformedStateError
from gdp.ui.storage import KeyValueStorage, user_storage

logger = logging.getLogger(__name__)

FAVORITES_KEY = "favorites"


def parse_favorites(raw: str) -> set[int]:
    """Decode the stored array; raises ``MalformedStateError`` on anything else."""
    try:
        data = json.loads(raw)
    except ValueError as exc:
        raise MalformedStateError(f"favorites is not valid JSON: {exc}")
    if not isinstance(data, list):
        raise MalformedStateError("favorites is not a JSON array")
    # bool is an int subclass; true/false are not project ids
    if not all(isinstance(v, int) and not isinstance(v, bool) for v in data):
        raise MalformedStateError("favorites contains non-integer members")
    return set(data)


def dump_favorites(favorites: set[int] | frozenset[int]) -> str:
    return json.dumps(sorted(favorites))


class FavoritesStore:
    """Owned by one session; ``close()`` on sign-out."""

    def __init__(self, storage_for: Callable[[int], KeyValueStorage] = user_storage) -> None:
        self._storage_for = storage_for
        self._storage: KeyValueStorage | None = None
        self._user_id: int | None = None
        self._favorites: set[int] = set()
        self._closed = False
        self.notifying = False
        self.message: str | None = None

    # ------------------------------------------------------------------

    def load(self, user_id: int) -> set[int]:
        """Read the user's favorites; never raises on bad stored content."""
        self._ensure_open()
        self._user_id = user_id
        self._storage = self._storage_for(user_id)
        raw = self._storage.get(FAVORITES_KEY)
        if raw is None:
            self._favorites = set()
        else:
            try:
                self._favorites = parse_favorites(raw)
            except MalformedStateError as exc:
                logger.warning("Resetting favorites of user %s: %s", user_id, exc.message)
                self._favorites = set()
        return set(self._favorites)

    def toggle(self, project_id: int, *, name: str | None = None) -> bool:
        """Flip membership, persist, and return whether the project is now a favorite."""
        storage = self._bound_storage()
        added = project_id not in self._favorites
        updated = set(self._favorites)
        if added:
            updated.add(project_id)
        else:
            updated.discard(project_id)
        storage.set(FAVORITES_KEY, dump_favorites(updated))
        self._favorites = updated

        self.notifying = added
        label = f'"{name}"' if name else f"Le projet #{project_id}"
        self.message = (
            f"{label} a été ajouté à vos favoris." if added
            else f"{label} a été retiré de vos favoris."
        )
        return added

    def acknowledge(self) -> None:
        self.notifying = False
        self.message = None

    def is_favorite(self, project_id: int) -> bool:
        return project_id in self._favorites

    @property
    def favorites(self) -> frozenset[int]:
        return frozenset(self._favorites)

    @property
    def user_id(self) -> int | None:
        return self._user_id

    def close(self) -> None:
        self._closed = True
        self._storage = None
        self._favorites = set()
        self.acknowledge()

    # ------------------------------------------------------------------

    def _ensure_open(self) -> None:
        if self._closed:
            raise RuntimeError("FavoritesStore is closed; the session has ended.")

    def _bound_storage(self) -> KeyValueStorage:
        self._ensure_open()
        if self._storage is None:
            raise RuntimeError("FavoritesStore.load(user_id) must be called first.")
        return self._storage
