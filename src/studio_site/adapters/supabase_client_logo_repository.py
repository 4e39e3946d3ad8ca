"""Supabase-backed client logo repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from studio_site.adapters.supabase_rows import now_iso, parse_datetime, require_datetime
from studio_site.domain.content import ClientLogo
from studio_site.services.content import ClientLogoRepository


@dataclass
class SupabaseClientLogoRepository(ClientLogoRepository):
    """Supabase implementation for client logos."""

    client: Client

    def list_logos(self) -> list[ClientLogo]:
        """Return logos ordered for display."""
        response = (
            self.client.table("client_logos")
            .select("*")
            .order("order_index")
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_logo(row) for row in response.data or []]

    def create_logo(self, payload: dict[str, object]) -> ClientLogo:
        """Create a logo and return it."""
        response = self.client.table("client_logos").insert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to create client logo")
        return _parse_logo(response.data[0])

    def update_logo(
        self, logo_id: UUID, payload: dict[str, object]
    ) -> ClientLogo | None:
        """Update a logo and return it."""
        response = (
            self.client.table("client_logos")
            .update({**payload, "updated_at": now_iso()})
            .eq("id", str(logo_id))
            .execute()
        )
        if not response.data:
            return None
        return _parse_logo(response.data[0])

    def delete_logo(self, logo_id: UUID) -> bool:
        """Delete a logo."""
        response = (
            self.client.table("client_logos").delete().eq("id", str(logo_id)).execute()
        )
        return bool(response.data)


def _parse_logo(row: dict[str, object]) -> ClientLogo:
    return ClientLogo(
        id=UUID(str(row["id"])),
        name=str(row["name"]),
        logo_url=str(row["logo_url"]),
        order_index=int(row.get("order_index") or 0),
        created_at=require_datetime(row["created_at"]),
        updated_at=parse_datetime(row.get("updated_at")),
    )
