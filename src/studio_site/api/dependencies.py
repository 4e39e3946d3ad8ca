"""Shared FastAPI dependencies: container access and bearer-token auth."""

from fastapi import Depends, Header, Request

from studio_site.containers import AppContainer
from studio_site.domain.auth import AdminIdentity
from studio_site.domain.errors import UnauthorizedError

_BEARER_PREFIX = "Bearer "


def get_container(request: Request) -> AppContainer:
    """Return the container attached to the running app."""
    return request.app.state.container


def bearer_token(authorization: str | None = Header(default=None)) -> str:
    """Extract the token from an ``Authorization: Bearer`` header."""
    if not authorization or not authorization.startswith(_BEARER_PREFIX):
        raise UnauthorizedError("No token provided")
    token = authorization[len(_BEARER_PREFIX) :].strip()
    if not token:
        raise UnauthorizedError("No token provided")
    return token


async def require_admin(
    token: str = Depends(bearer_token),
    container: AppContainer = Depends(get_container),
) -> AdminIdentity:
    """Ensure requests carry a valid, unexpired admin session token."""
    return container.auth_service.validate_session(token)
