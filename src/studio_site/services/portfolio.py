"""Services for portfolio albums and photos."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from studio_site.domain.errors import NotFoundError
from studio_site.domain.portfolio import PortfolioAlbum, PortfolioPhoto
from studio_site.services.validation import reject_blank, require_fields

logger = logging.getLogger(__name__)

ALL_CATEGORIES = "All"
_ALBUM_REQUIRED = ("title", "description", "category")
_ALBUM_NOT_NULL = _ALBUM_REQUIRED + ("order_index", "is_published")
_PHOTO_NOT_NULL = ("image_url", "order_index")


class PortfolioRepository(Protocol):
    """Persistence interface for portfolio albums and photos."""

    def list_albums(
        self, published_only: bool, category: str | None = None
    ) -> list[PortfolioAlbum]:
        """Return albums ordered for display."""

    def get_album(self, album_id: UUID) -> PortfolioAlbum | None:
        """Return an album by id, if present."""

    def create_album(self, payload: dict[str, object]) -> PortfolioAlbum:
        """Create an album and return it."""

    def update_album(
        self, album_id: UUID, payload: dict[str, object]
    ) -> PortfolioAlbum | None:
        """Update an album and return it."""

    def delete_album(self, album_id: UUID) -> bool:
        """Delete an album and its photos; return whether it existed."""

    def list_photos(self, album_id: UUID) -> list[PortfolioPhoto]:
        """Return the photos of an album ordered for display."""

    def create_photo(
        self, album_id: UUID, payload: dict[str, object]
    ) -> PortfolioPhoto:
        """Add a photo to an album and return it."""

    def update_photo(
        self, photo_id: UUID, payload: dict[str, object]
    ) -> PortfolioPhoto | None:
        """Update a photo and return it."""

    def delete_photo(self, photo_id: UUID) -> bool:
        """Delete a photo; return whether it existed."""


@dataclass
class PortfolioService:
    """Application service for the portfolio."""

    repository: PortfolioRepository

    def list_public_albums(self, category: str | None = None) -> list[PortfolioAlbum]:
        """Return published albums, optionally filtered by category."""
        if category is None or category.strip() in {"", ALL_CATEGORIES}:
            return self.repository.list_albums(published_only=True)
        return self.repository.list_albums(
            published_only=True, category=category.strip()
        )

    def list_albums(self) -> list[PortfolioAlbum]:
        """Return every album for the admin dashboard."""
        return self.repository.list_albums(published_only=False)

    def create_album(self, payload: dict[str, object]) -> PortfolioAlbum:
        """Create an album."""
        require_fields(payload, *_ALBUM_REQUIRED)
        album = self.repository.create_album(payload)
        logger.info("Portfolio album created", extra={"album_id": str(album.id)})
        return album

    def update_album(
        self, album_id: UUID, payload: dict[str, object]
    ) -> PortfolioAlbum:
        """Apply a partial update to an album."""
        reject_blank(payload, *_ALBUM_NOT_NULL)
        updated = self.repository.update_album(album_id, payload)
        if updated is None:
            raise NotFoundError("Album not found")
        return updated

    def delete_album(self, album_id: UUID) -> None:
        """Delete an album together with its photos."""
        if not self.repository.delete_album(album_id):
            raise NotFoundError("Album not found")
        logger.info("Portfolio album deleted", extra={"album_id": str(album_id)})

    def list_album_photos(self, album_id: UUID) -> list[PortfolioPhoto]:
        """Return the photos of an album."""
        return self.repository.list_photos(album_id)

    def add_photo(self, album_id: UUID, payload: dict[str, object]) -> PortfolioPhoto:
        """Add a photo to an existing album."""
        require_fields(payload, "image_url")
        if self.repository.get_album(album_id) is None:
            raise NotFoundError("Album not found")
        return self.repository.create_photo(album_id, payload)

    def update_photo(
        self, photo_id: UUID, payload: dict[str, object]
    ) -> PortfolioPhoto:
        """Apply a partial update to a photo."""
        reject_blank(payload, *_PHOTO_NOT_NULL)
        updated = self.repository.update_photo(photo_id, payload)
        if updated is None:
            raise NotFoundError("Photo not found")
        return updated

    def delete_photo(self, photo_id: UUID) -> None:
        """Delete a photo."""
        if not self.repository.delete_photo(photo_id):
            raise NotFoundError("Photo not found")
