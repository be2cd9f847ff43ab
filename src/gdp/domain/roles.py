"""Closed role set and the capability table every access check goes through."""
from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    ADMIN = "ADMIN"
    INFRA = "INFRA"
    DEVELOPPER = "DEVELOPPER"


class Capability(str, Enum):
    VIEW_ADMIN_DASHBOARD = "VIEW_ADMIN_DASHBOARD"
    VIEW_STATS = "VIEW_STATS"
    VIEW_ADMIN_NOTIFICATIONS = "VIEW_ADMIN_NOTIFICATIONS"
    VIEW_SPRINTS = "VIEW_SPRINTS"
    LOOKUP_CONGES = "LOOKUP_CONGES"
    MANAGE_CONGES = "MANAGE_CONGES"
    VIEW_PERIODIC_TASKS = "VIEW_PERIODIC_TASKS"
    EDIT_PERIODIC_TASKS = "EDIT_PERIODIC_TASKS"
    MANAGE_PERIODIC_TASKS = "MANAGE_PERIODIC_TASKS"


_ALL = frozenset(Role)

CAPABILITIES: dict[Capability, frozenset[Role]] = {
    Capability.VIEW_ADMIN_DASHBOARD: frozenset({Role.ADMIN}),
    Capability.VIEW_STATS: _ALL,
    Capability.VIEW_ADMIN_NOTIFICATIONS: frozenset({Role.ADMIN}),
    Capability.VIEW_SPRINTS: _ALL,
    Capability.LOOKUP_CONGES: _ALL,
    Capability.MANAGE_CONGES: frozenset({Role.ADMIN, Role.INFRA}),
    Capability.VIEW_PERIODIC_TASKS: _ALL,
    Capability.EDIT_PERIODIC_TASKS: frozenset({Role.ADMIN, Role.DEVELOPPER}),
    Capability.MANAGE_PERIODIC_TASKS: frozenset({Role.ADMIN}),
}


def parse_role(value: object) -> Role | None:
    """Map a raw claim to a ``Role``; anything outside the closed set is ``None``."""
    if isinstance(value, Role):
        return value
    if not isinstance(value, str):
        return None
    try:
        return Role(value)
    except ValueError:
        return None


def has_capability(role: Role | None, capability: Capability) -> bool:
    if role is None:
        return False
    return role in CAPABILITIES[capability]
