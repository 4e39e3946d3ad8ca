"""Admin authentication endpoints."""

from fastapi import APIRouter, Depends

from studio_site.api.dependencies import bearer_token, get_container
from studio_site.api.schemas import ChangePasswordRequest, LoginRequest
from studio_site.api.serializers import serialize_admin, serialize_issued_session
from studio_site.containers import AppContainer

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login")
async def login(
    body: LoginRequest, container: AppContainer = Depends(get_container)
) -> dict[str, object]:
    """Exchange credentials for a session token."""
    issued = container.auth_service.login(body.email, body.password)
    return serialize_issued_session(issued)


@router.get("/me")
async def me(
    token: str = Depends(bearer_token),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return the admin behind the bearer token."""
    return {"admin": serialize_admin(container.auth_service.me(token))}


@router.post("/logout")
async def logout(
    token: str = Depends(bearer_token),
    container: AppContainer = Depends(get_container),
) -> dict[str, str]:
    """Revoke the bearer token's session."""
    container.auth_service.logout(token)
    return {"message": "Logged out successfully"}


@router.post("/change-password")
async def change_password(
    body: ChangePasswordRequest,
    token: str = Depends(bearer_token),
    container: AppContainer = Depends(get_container),
) -> dict[str, str]:
    """Change the password; every session must log in again."""
    container.auth_service.change_password(
        token, body.current_password, body.new_password
    )
    return {"message": "Password changed successfully. Please log in again."}


@router.post("/register-first-admin", status_code=201)
async def register_first_admin(
    body: LoginRequest, container: AppContainer = Depends(get_container)
) -> dict[str, object]:
    """Create the first admin account while none exists."""
    issued = container.auth_service.register_first_admin(body.email, body.password)
    return serialize_issued_session(issued)
