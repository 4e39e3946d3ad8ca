"""Supabase-backed gallery repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from studio_site.adapters.supabase_rows import now_iso, require_datetime
from studio_site.domain.content import GalleryItem
from studio_site.services.content import GalleryRepository


@dataclass
class SupabaseGalleryRepository(GalleryRepository):
    """Supabase implementation for gallery items."""

    client: Client

    def list_items(self, published_only: bool, limit: int | None) -> list[GalleryItem]:
        """Return gallery items ordered for display."""
        query = self.client.table("gallery_items").select("*")
        if published_only:
            query = query.eq("is_published", True)
        query = query.order("order_index").order("created_at", desc=True)
        if limit is not None:
            query = query.limit(limit)
        response = query.execute()
        return [_parse_item(row) for row in response.data or []]

    def create_item(self, payload: dict[str, object]) -> GalleryItem:
        """Create a gallery item and return it."""
        response = self.client.table("gallery_items").insert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to create gallery item")
        return _parse_item(response.data[0])

    def update_item(
        self, item_id: UUID, payload: dict[str, object]
    ) -> GalleryItem | None:
        """Update a gallery item and return it."""
        response = (
            self.client.table("gallery_items")
            .update({**payload, "updated_at": now_iso()})
            .eq("id", str(item_id))
            .execute()
        )
        if not response.data:
            return None
        return _parse_item(response.data[0])

    def delete_item(self, item_id: UUID) -> bool:
        """Delete a gallery item."""
        response = (
            self.client.table("gallery_items").delete().eq("id", str(item_id)).execute()
        )
        return bool(response.data)


def _parse_item(row: dict[str, object]) -> GalleryItem:
    return GalleryItem(
        id=UUID(str(row["id"])),
        title=str(row["title"]),
        description=str(row["description"]),
        badge=str(row["badge"]),
        icon_name=str(row["icon_name"]),
        image_url=row.get("image_url"),
        order_index=int(row.get("order_index") or 0),
        is_published=bool(row.get("is_published")),
        created_at=require_datetime(row["created_at"]),
        updated_at=require_datetime(row.get("updated_at") or row["created_at"]),
    )
