"""Supabase implementation for portfolio albums and photos."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from studio_site.adapters.supabase_rows import now_iso, require_datetime
from studio_site.domain.portfolio import PortfolioAlbum, PortfolioPhoto
from studio_site.services.portfolio import PortfolioRepository


@dataclass
class SupabasePortfolioRepository(PortfolioRepository):
    """Supabase-backed repository for the portfolio."""

    client: Client

    def list_albums(
        self, published_only: bool, category: str | None = None
    ) -> list[PortfolioAlbum]:
        """Return albums ordered by position, newest first within a position."""
        query = self.client.table("portfolio_albums").select("*")
        if published_only:
            query = query.eq("is_published", True)
        if category:
            query = query.eq("category", category)
        response = query.order("order_index").order("created_at", desc=True).execute()
        return [_parse_album(row) for row in response.data or []]

    def get_album(self, album_id: UUID) -> PortfolioAlbum | None:
        """Return an album by id, if present."""
        response = (
            self.client.table("portfolio_albums")
            .select("*")
            .eq("id", str(album_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_album(response.data[0])

    def create_album(self, payload: dict[str, object]) -> PortfolioAlbum:
        """Create an album and return it."""
        response = self.client.table("portfolio_albums").insert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to create album")
        return _parse_album(response.data[0])

    def update_album(
        self, album_id: UUID, payload: dict[str, object]
    ) -> PortfolioAlbum | None:
        """Update an album and return it."""
        response = (
            self.client.table("portfolio_albums")
            .update({**payload, "updated_at": now_iso()})
            .eq("id", str(album_id))
            .execute()
        )
        if not response.data:
            return None
        return _parse_album(response.data[0])

    def delete_album(self, album_id: UUID) -> bool:
        """Delete an album; photos go with it through the foreign key."""
        response = (
            self.client.table("portfolio_albums")
            .delete()
            .eq("id", str(album_id))
            .execute()
        )
        return bool(response.data)

    def list_photos(self, album_id: UUID) -> list[PortfolioPhoto]:
        """Return the photos of an album."""
        response = (
            self.client.table("portfolio_photos")
            .select("*")
            .eq("album_id", str(album_id))
            .order("order_index")
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_photo(row) for row in response.data or []]

    def create_photo(
        self, album_id: UUID, payload: dict[str, object]
    ) -> PortfolioPhoto:
        """Add a photo row to an album."""
        response = (
            self.client.table("portfolio_photos")
            .insert({**payload, "album_id": str(album_id)})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to add photo")
        return _parse_photo(response.data[0])

    def update_photo(
        self, photo_id: UUID, payload: dict[str, object]
    ) -> PortfolioPhoto | None:
        """Update a photo and return it."""
        response = (
            self.client.table("portfolio_photos")
            .update({**payload, "updated_at": now_iso()})
            .eq("id", str(photo_id))
            .execute()
        )
        if not response.data:
            return None
        return _parse_photo(response.data[0])

    def delete_photo(self, photo_id: UUID) -> bool:
        """Delete a photo."""
        response = (
            self.client.table("portfolio_photos")
            .delete()
            .eq("id", str(photo_id))
            .execute()
        )
        return bool(response.data)


def _parse_album(row: dict[str, object]) -> PortfolioAlbum:
    return PortfolioAlbum(
        id=UUID(str(row["id"])),
        title=str(row["title"]),
        description=str(row["description"]),
        category=str(row["category"]),
        cover_image_url=row.get("cover_image_url"),
        order_index=int(row.get("order_index") or 0),
        is_published=bool(row.get("is_published")),
        created_at=require_datetime(row["created_at"]),
        updated_at=require_datetime(row.get("updated_at") or row["created_at"]),
    )


def _parse_photo(row: dict[str, object]) -> PortfolioPhoto:
    return PortfolioPhoto(
        id=UUID(str(row["id"])),
        album_id=UUID(str(row["album_id"])),
        image_url=str(row["image_url"]),
        caption=row.get("caption"),
        order_index=int(row.get("order_index") or 0),
        created_at=require_datetime(row["created_at"]),
        updated_at=require_datetime(row.get("updated_at") or row["created_at"]),
    )
