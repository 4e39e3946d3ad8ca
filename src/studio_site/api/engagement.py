"""Visitor signup and analytics endpoints."""

from fastapi import APIRouter, Depends, Query

from studio_site.api.dependencies import get_container, require_admin
from studio_site.api.schemas import SignupRequest, TrackEventRequest
from studio_site.api.serializers import serialize_analytics_summary, serialize_signup
from studio_site.containers import AppContainer
from studio_site.domain.bookings import from_epoch_ms
from studio_site.domain.errors import ValidationError

signups_router = APIRouter(prefix="/api/signups", tags=["signups"])
analytics_router = APIRouter(prefix="/api/analytics", tags=["analytics"])


@signups_router.post("", status_code=201)
async def create_signup(
    body: SignupRequest, container: AppContainer = Depends(get_container)
) -> dict[str, object]:
    """Record interest in a package."""
    signup = container.signup_service.create(body.model_dump())
    return {"id": str(signup.id), "message": "Signup received"}


@signups_router.get("", dependencies=[Depends(require_admin)])
async def list_signups(
    container: AppContainer = Depends(get_container),
) -> list[dict[str, object]]:
    """Return signups, newest first."""
    signups = container.signup_service.list_signups()
    return [serialize_signup(signup) for signup in signups]


@analytics_router.post("/track", status_code=201)
async def track_event(
    body: TrackEventRequest, container: AppContainer = Depends(get_container)
) -> dict[str, str]:
    """Store a page event."""
    container.analytics_service.track(
        body.type, body.path, user_agent=body.user_agent, referrer=body.referrer
    )
    return {"status": "ok"}


@analytics_router.get("/summary", dependencies=[Depends(require_admin)])
async def analytics_summary(
    since_ms: int = Query(default=0, ge=0, alias="sinceMs"),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return event counts per path since ``sinceMs``."""
    try:
        since = from_epoch_ms(since_ms)
    except (OverflowError, OSError, ValueError) as exc:
        raise ValidationError("sinceMs is out of range") from exc
    summary = container.analytics_service.summary(since)
    return serialize_analytics_summary(summary)
