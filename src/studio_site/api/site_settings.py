"""Site-wide settings endpoints."""

from fastapi import APIRouter, Depends

from studio_site.api.dependencies import get_container, require_admin
from studio_site.api.schemas import HeroUpdate
from studio_site.api.serializers import serialize_hero
from studio_site.containers import AppContainer

router = APIRouter(prefix="/api/site-settings", tags=["site-settings"])


@router.get("/hero")
async def get_hero(
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return the hero video sources."""
    return serialize_hero(container.site_settings_service.get_hero())


@router.post("/hero", dependencies=[Depends(require_admin)])
async def set_hero(
    body: HeroUpdate, container: AppContainer = Depends(get_container)
) -> dict[str, object]:
    """Replace the hero video sources."""
    hero = container.site_settings_service.set_hero(
        mp4_url=body.mp4_url, webm_url=body.webm_url, poster_url=body.poster_url
    )
    return serialize_hero(hero)
