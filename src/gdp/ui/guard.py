"""Route guards for Streamlit pages.

A guard decides once per page run. Until it has decided, only a neutral
loading placeholder is shown; a redirect is terminal for that run.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Generic, TypeVar

from gdp.domain.roles import Capability
from gdp.domain.session import Session

logger = logging.getLogger(__name__)

T = TypeVar("T")

SIGNIN = "/signin"
FORBIDDEN = "/403"
DASHBOARD = "/Dashboard"
MES_SPRINTS = "/mes-sprints"


class GuardDecision(str, Enum):
    ALLOW = "ALLOW"
    REDIRECT_SIGNIN = "REDIRECT_SIGNIN"
    REDIRECT_FORBIDDEN = "REDIRECT_FORBIDDEN"


def decide(session: Session | None, capability: Capability | None) -> GuardDecision:
    if session is None:
        return GuardDecision.REDIRECT_SIGNIN
    if capability is not None and not session.can(capability):
        return GuardDecision.REDIRECT_FORBIDDEN
    return GuardDecision.ALLOW


class RouteGuard(Generic[T]):
    """Gate ``render`` behind a capability.

    ``forbidden_target`` is the page-level policy for authenticated users
    lacking the capability (``/403`` by default).
    """

    def __init__(
        self,
        capability: Capability | None,
        *,
        forbidden_target: str = FORBIDDEN,
        signin_target: str = SIGNIN,
    ) -> None:
        self.capability = capability
        self.forbidden_target = forbidden_target
        self.signin_target = signin_target

    def target_for(self, decision: GuardDecision) -> str | None:
        if decision is GuardDecision.REDIRECT_SIGNIN:
            return self.signin_target
        if decision is GuardDecision.REDIRECT_FORBIDDEN:
            return self.forbidden_target
        return None

    def run(
        self,
        resolve: Callable[[], Session | None],
        render: Callable[[Session], T],
        redirect: Callable[[str], None],
        *,
        on_loading: Callable[[], None] | None = None,
        on_resolved: Callable[[], None] | None = None,
    ) -> T | None:
        if on_loading is not None:
            on_loading()
        session = resolve()
        decision = decide(session, self.capability)
        if on_resolved is not None:
            on_resolved()

        target = self.target_for(decision)
        if target is not None:
            logger.info(
                "Guard %s for %s: redirecting to %s",
                decision.value,
                self.capability.value if self.capability else "authenticated",
                target,
            )
            redirect(target)
            return None
        return render(session)


class PublicRouteGuard:
    """Inverse guard for pages like sign-in: a signed-in user is sent to ``target``."""

    def __init__(self, target: str = DASHBOARD) -> None:
        self.target = target

    def run(
        self,
        resolve: Callable[[], Session | None],
        render: Callable[[], T],
        redirect: Callable[[str], None],
    ) -> T | None:
        if resolve() is not None:
            redirect(self.target)
            return None
        return render()
