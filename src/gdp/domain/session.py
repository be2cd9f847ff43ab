"""Session value object and bearer-token decoding.

The role on a ``Session`` is only ever taken from token claims. The backend
verifies the signature (``verify_token``); the UI reads the claims of the
token it holds without verifying (``read_token``), as the browser client
always did, and relies on the backend to reject forged tokens.
"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Mapping

from jose import JWTError, jwt

from gdp.config import settings
from gdp.domain.exceptions import AuthenticationMissingError
from gdp.domain.roles import Capability, Role, has_capability, parse_role

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Session:
    token: str
    user_id: int
    role: Role
    first_name: str | None = None
    last_name: str | None = None
    matricule: str | None = None
    email: str | None = None
    photo: str | None = None

    def can(self, capability: Capability) -> bool:
        return has_capability(self.role, capability)

    @property
    def display_name(self) -> str:
        parts = [p for p in (self.first_name, self.last_name) if p]
        return " ".join(parts) or f"User #{self.user_id}"


def session_from_claims(token: str, claims: Mapping[str, Any]) -> Session:
    """Build a ``Session`` from decoded claims or raise ``AuthenticationMissingError``."""
    role = parse_role(claims.get("role"))
    if role is None:
        raise AuthenticationMissingError(f"Unknown role in token: {claims.get('role')!r}")

    raw_id = claims.get("userId", claims.get("sub"))
    try:
        user_id = int(raw_id)
    except (TypeError, ValueError):
        raise AuthenticationMissingError("Token has no usable user id")

    return Session(
        token=token,
        user_id=user_id,
        role=role,
        first_name=claims.get("firstName"),
        last_name=claims.get("lastName"),
        matricule=claims.get("matricule"),
        email=claims.get("email"),
        photo=claims.get("photo"),
    )


def verify_token(token: str | None) -> Session:
    """Verify signature and expiry; used by the API."""
    if not token:
        raise AuthenticationMissingError("No token provided")
    try:
        claims = jwt.decode(
            token,
            settings.JWT_SECRET.get_secret_value(),
            algorithms=[settings.JWT_ALGORITHM],
        )
    except JWTError as exc:
        logger.warning("Token verification failed: %s", exc)
        raise AuthenticationMissingError("Invalid or expired token")
    return session_from_claims(token, claims)


def read_token(token: str | None, *, now: float | None = None) -> Session | None:
    """Decode claims without verifying the signature; ``None`` when unusable."""
    if not token:
        return None
    try:
        claims = jwt.get_unverified_claims(token)
    except JWTError as exc:
        logger.warning("Could not decode stored token: %s", exc)
        return None

    exp = claims.get("exp")
    if exp is not None:
        current = time.time() if now is None else now
        try:
            if float(exp) <= current:
                logger.info("Stored token has expired")
                return None
        except (TypeError, ValueError):
            return None

    try:
        return session_from_claims(token, claims)
    except AuthenticationMissingError as exc:
        logger.warning("Stored token rejected: %s", exc.message)
        return None
