"""Portfolio album and photo endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends

from studio_site.api.dependencies import get_container, require_admin
from studio_site.api.schemas import AlbumCreate, AlbumUpdate, PhotoCreate, PhotoUpdate
from studio_site.api.serializers import serialize_album, serialize_photo
from studio_site.containers import AppContainer

router = APIRouter(prefix="/api/portfolio", tags=["portfolio"])


@router.get("/public")
async def public_albums(
    category: str | None = None, container: AppContainer = Depends(get_container)
) -> list[dict[str, object]]:
    """Return published albums, optionally filtered by category."""
    albums = container.portfolio_service.list_public_albums(category)
    return [serialize_album(album) for album in albums]


@router.get("/admin", dependencies=[Depends(require_admin)])
async def all_albums(
    container: AppContainer = Depends(get_container),
) -> list[dict[str, object]]:
    """Return every album, published or not."""
    albums = container.portfolio_service.list_albums()
    return [serialize_album(album) for album in albums]


@router.post("/albums", status_code=201, dependencies=[Depends(require_admin)])
async def create_album(
    body: AlbumCreate, container: AppContainer = Depends(get_container)
) -> dict[str, object]:
    album = container.portfolio_service.create_album(body.model_dump())
    return serialize_album(album)


@router.put("/albums/{album_id}", dependencies=[Depends(require_admin)])
async def update_album(
    album_id: UUID,
    body: AlbumUpdate,
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    album = container.portfolio_service.update_album(
        album_id, body.model_dump(exclude_unset=True)
    )
    return serialize_album(album)


@router.delete("/albums/{album_id}", dependencies=[Depends(require_admin)])
async def delete_album(
    album_id: UUID, container: AppContainer = Depends(get_container)
) -> dict[str, str]:
    """Delete an album and its photos."""
    container.portfolio_service.delete_album(album_id)
    return {"message": "Album deleted successfully"}


@router.get("/albums/{album_id}/photos")
async def album_photos(
    album_id: UUID, container: AppContainer = Depends(get_container)
) -> list[dict[str, object]]:
    """Return the photos of an album."""
    photos = container.portfolio_service.list_album_photos(album_id)
    return [serialize_photo(photo) for photo in photos]


@router.post(
    "/albums/{album_id}/photos",
    status_code=201,
    dependencies=[Depends(require_admin)],
)
async def add_photo(
    album_id: UUID,
    body: PhotoCreate,
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    photo = container.portfolio_service.add_photo(album_id, body.model_dump())
    return serialize_photo(photo)


@router.put("/photos/{photo_id}", dependencies=[Depends(require_admin)])
async def update_photo(
    photo_id: UUID,
    body: PhotoUpdate,
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    photo = container.portfolio_service.update_photo(
        photo_id, body.model_dump(exclude_unset=True)
    )
    return serialize_photo(photo)


@router.delete("/photos/{photo_id}", dependencies=[Depends(require_admin)])
async def delete_photo(
    photo_id: UUID, container: AppContainer = Depends(get_container)
) -> dict[str, str]:
    container.portfolio_service.delete_photo(photo_id)
    return {"message": "Photo deleted successfully"}
