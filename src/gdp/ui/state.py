"""Session-state helpers for the Streamlit UI.

No ORM, no DB: only reads/writes ``st.session_state`` and client storage.
"""
from typing import Optional

import streamlit as st

from gdp.domain.roles import Capability
from gdp.domain.session import Session
from gdp.ui.api_client import APIError, get_client
from gdp.ui.guard import FORBIDDEN, SIGNIN, PublicRouteGuard, RouteGuard
from gdp.ui.session import SessionContext, SessionResolver, reconcile_context

# Route -> page script, relative to the main script (ui/app.py)
PAGES = {
    "/Dashboard": "pages/1_dashboard.py",
    "/mes-sprints": "pages/2_mes_sprints.py",
    "/favoris": "pages/3_favoris.py",
    "/conges": "pages/4_conges.py",
    "/notifications": "pages/5_notifications.py",
    "/taches-periodiques": "pages/6_taches_periodiques.py",
    "/signin": "pages/8_signin.py",
    "/403": "pages/9_forbidden.py",
}


def init_session() -> None:
    """Initialize session state variables."""
    if "gdp_context" not in st.session_state:
        st.session_state["gdp_context"] = None
    if "gdp_resolver" not in st.session_state:
        st.session_state["gdp_resolver"] = SessionResolver()


def get_resolver() -> SessionResolver:
    init_session()
    return st.session_state["gdp_resolver"]


def get_context() -> Optional[SessionContext]:
    """Current signed-in context, or None."""
    init_session()
    return st.session_state.get("gdp_context")


def resolve_session() -> Optional[Session]:
    """Resolve the stored token, (re)opening the owned context when the user changes."""
    resolver = get_resolver()
    resolver.accept_query_token(st.query_params)

    session = resolver.resolve()
    st.session_state["gdp_context"] = reconcile_context(get_context(), session)
    if session is None:
        return None
    get_client().set_token(session.token)
    return session


def go(route: str) -> None:
    """Navigate to a route and end this page run."""
    st.switch_page(PAGES.get(route, PAGES[FORBIDDEN]))
    st.stop()


def sign_in(token: str) -> Optional[Session]:
    if get_resolver().sign_in(token) is None:
        return None
    return resolve_session()


def sign_out() -> None:
    context = get_context()
    if context is not None:
        context.close()
    st.session_state["gdp_context"] = None
    get_resolver().sign_out()
    get_client().set_token(None)


def guard_page(capability: Optional[Capability], *, forbidden_target: str = FORBIDDEN) -> SessionContext:
    """Run the route guard at the top of a page; returns the context only when allowed."""
    placeholder = st.empty()
    guard = RouteGuard(capability, forbidden_target=forbidden_target)
    allowed = guard.run(
        resolve_session,
        lambda _session: get_context(),
        go,
        on_loading=lambda: placeholder.info("Chargement..."),
        on_resolved=placeholder.empty,
    )
    if allowed is None:
        st.stop()
    return allowed


def public_page(target: str = "/Dashboard") -> None:
    PublicRouteGuard(target).run(resolve_session, lambda: None, go)


def handle_api_error(exc: APIError, what: str) -> None:
    """Page-level terminal message; an expired session goes back to sign-in."""
    if exc.unauthorized:
        sign_out()
        go(SIGNIN)
    st.error(f"{what}: {exc.detail}")
    st.stop()
