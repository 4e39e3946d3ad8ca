"""Services for gallery items, packages and client logos."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from studio_site.domain.content import ClientLogo, GalleryItem, StudioPackage
from studio_site.domain.errors import NotFoundError, ValidationError
from studio_site.services.validation import reject_blank, require_fields

PUBLIC_GALLERY_LIMIT = 20

_GALLERY_REQUIRED = ("title", "description", "badge", "icon_name")
_PACKAGE_REQUIRED = ("title", "price", "description")
_LOGO_REQUIRED = ("name", "logo_url")

_GALLERY_NOT_NULL = _GALLERY_REQUIRED + ("order_index", "is_published")
_PACKAGE_NOT_NULL = _PACKAGE_REQUIRED + (
    "features",
    "add_ons",
    "is_popular",
    "order_index",
    "is_published",
)
_LOGO_NOT_NULL = _LOGO_REQUIRED + ("order_index",)


class GalleryRepository(Protocol):
    """Persistence interface for gallery items."""

    def list_items(self, published_only: bool, limit: int | None) -> list[GalleryItem]:
        """Return gallery items ordered for display."""

    def create_item(self, payload: dict[str, object]) -> GalleryItem:
        """Create a gallery item and return it."""

    def update_item(
        self, item_id: UUID, payload: dict[str, object]
    ) -> GalleryItem | None:
        """Update a gallery item and return it."""

    def delete_item(self, item_id: UUID) -> bool:
        """Delete a gallery item; return whether it existed."""


class PackageRepository(Protocol):
    """Persistence interface for service packages."""

    def list_packages(self, published_only: bool) -> list[StudioPackage]:
        """Return packages ordered for display."""

    def create_package(self, payload: dict[str, object]) -> StudioPackage:
        """Create a package and return it."""

    def update_package(
        self, package_id: UUID, payload: dict[str, object]
    ) -> StudioPackage | None:
        """Update a package and return it."""

    def delete_package(self, package_id: UUID) -> bool:
        """Delete a package; return whether it existed."""


class ClientLogoRepository(Protocol):
    """Persistence interface for client logos."""

    def list_logos(self) -> list[ClientLogo]:
        """Return logos ordered for display."""

    def create_logo(self, payload: dict[str, object]) -> ClientLogo:
        """Create a logo and return it."""

    def update_logo(
        self, logo_id: UUID, payload: dict[str, object]
    ) -> ClientLogo | None:
        """Update a logo and return it."""

    def delete_logo(self, logo_id: UUID) -> bool:
        """Delete a logo; return whether it existed."""


@dataclass
class GalleryService:
    """Application service for gallery items."""

    repository: GalleryRepository

    def list_public(self) -> list[GalleryItem]:
        """Return the published items shown on the home page."""
        return self.repository.list_items(
            published_only=True, limit=PUBLIC_GALLERY_LIMIT
        )

    def list_all(self) -> list[GalleryItem]:
        """Return every item for the admin dashboard."""
        return self.repository.list_items(published_only=False, limit=None)

    def create(self, payload: dict[str, object]) -> GalleryItem:
        """Create a gallery item."""
        require_fields(payload, *_GALLERY_REQUIRED)
        return self.repository.create_item(payload)

    def update(self, item_id: UUID, payload: dict[str, object]) -> GalleryItem:
        """Apply a partial update to a gallery item."""
        reject_blank(payload, *_GALLERY_NOT_NULL)
        updated = self.repository.update_item(item_id, payload)
        if updated is None:
            raise NotFoundError("Gallery item not found")
        return updated

    def delete(self, item_id: UUID) -> None:
        """Delete a gallery item."""
        if not self.repository.delete_item(item_id):
            raise NotFoundError("Gallery item not found")


@dataclass
class PackageService:
    """Application service for service packages."""

    repository: PackageRepository

    def list_public(self) -> list[StudioPackage]:
        """Return published packages."""
        return self.repository.list_packages(published_only=True)

    def list_all(self) -> list[StudioPackage]:
        """Return every package for the admin dashboard."""
        return self.repository.list_packages(published_only=False)

    def create(self, payload: dict[str, object]) -> StudioPackage:
        """Create a package."""
        require_fields(payload, *_PACKAGE_REQUIRED)
        _check_add_ons(payload)
        return self.repository.create_package(payload)

    def update(self, package_id: UUID, payload: dict[str, object]) -> StudioPackage:
        """Apply a partial update to a package."""
        reject_blank(payload, *_PACKAGE_NOT_NULL)
        _check_add_ons(payload)
        updated = self.repository.update_package(package_id, payload)
        if updated is None:
            raise NotFoundError("Package not found")
        return updated

    def delete(self, package_id: UUID) -> None:
        """Delete a package."""
        if not self.repository.delete_package(package_id):
            raise NotFoundError("Package not found")


@dataclass
class ClientLogoService:
    """Application service for client logos."""

    repository: ClientLogoRepository

    def list_logos(self) -> list[ClientLogo]:
        """Return all logos."""
        return self.repository.list_logos()

    def create(self, payload: dict[str, object]) -> ClientLogo:
        """Create a logo."""
        require_fields(payload, *_LOGO_REQUIRED)
        return self.repository.create_logo(payload)

    def update(self, logo_id: UUID, payload: dict[str, object]) -> ClientLogo:
        """Apply a partial update to a logo."""
        reject_blank(payload, *_LOGO_NOT_NULL)
        updated = self.repository.update_logo(logo_id, payload)
        if updated is None:
            raise NotFoundError("Client logo not found")
        return updated

    def delete(self, logo_id: UUID) -> None:
        """Delete a logo."""
        if not self.repository.delete_logo(logo_id):
            raise NotFoundError("Client logo not found")


def _check_add_ons(payload: dict[str, object]) -> None:
    add_ons = payload.get("add_ons")
    if add_ons is None:
        return
    if not isinstance(add_ons, list):
        raise ValidationError("Add-ons must be a list")
    for add_on in add_ons:
        if (
            not isinstance(add_on, dict)
            or not add_on.get("name")
            or "price" not in add_on
        ):
            raise ValidationError("Every add-on needs a name and a price")
