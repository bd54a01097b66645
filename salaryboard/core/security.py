"""Bearer-token verification for viewers casting votes.

Tokens are issued by an external auth service; this module only verifies them
and exposes the resulting viewer to the routers.
"""
from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

import jwt
from fastapi import Request
from jwt import ExpiredSignatureError, InvalidTokenError

from salaryboard.core.config import AuthSettings, get_settings
from salaryboard.core.logger import get_logger

LOGGER = get_logger(__name__)


class AuthenticationError(Exception):
    """Raised when authentication or token validation fails."""


@dataclass(frozen=True, slots=True)
class AuthenticatedUser:
    """Representation of the authenticated viewer."""

    username: str
    user_id: int | None = None


class SecurityProvider:
    """Verify JWT access tokens issued by the auth service."""

    def __init__(self, settings: AuthSettings) -> None:
        self._settings = settings

    @property
    def is_enabled(self) -> bool:
        return self._settings.enabled

    def default_viewer(self) -> AuthenticatedUser:
        """Viewer used for every request when authentication is disabled."""

        return AuthenticatedUser(username="demo")

    def decode_token(self, token: str) -> AuthenticatedUser:
        """Decode a JWT and return the corresponding ``AuthenticatedUser``."""

        try:
            payload = jwt.decode(
                token,
                self._settings.secret_key,
                algorithms=[self._settings.algorithm],
            )
        except ExpiredSignatureError as exc:
            raise AuthenticationError("Token expired") from exc
        except InvalidTokenError as exc:
            raise AuthenticationError("Invalid token") from exc

        username = payload.get("sub")
        if not isinstance(username, str) or not username:
            raise AuthenticationError("Token payload missing required claims")

        user_id = payload.get("user_id")
        resolved_user_id: int | None = None
        if user_id is not None:
            try:
                resolved_user_id = int(user_id)
            except (TypeError, ValueError) as exc:
                raise AuthenticationError("Token user_id claim invalid") from exc

        return AuthenticatedUser(username=username, user_id=resolved_user_id)


@lru_cache(maxsize=1)
def get_security_provider() -> SecurityProvider:
    """Return a cached security provider instance."""

    return SecurityProvider(get_settings().auth)


def _bearer_token(request: Request) -> str | None:
    header = request.headers.get("Authorization", "")
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def get_optional_viewer(request: Request) -> AuthenticatedUser | None:
    """Return the viewer behind the request, or ``None`` for anonymous requests.

    Invalid tokens are treated as anonymous: voting is then a no-op rather than
    an error.
    """

    security = get_security_provider()
    if not security.is_enabled:
        return security.default_viewer()

    token = _bearer_token(request)
    if token is None:
        return None
    try:
        return security.decode_token(token)
    except AuthenticationError as exc:
        LOGGER.info("Failed to decode access token", extra={"reason": str(exc)})
        return None


__all__ = [
    "AuthenticatedUser",
    "AuthenticationError",
    "SecurityProvider",
    "get_optional_viewer",
    "get_security_provider",
]
