"""Supabase-backed package repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from studio_site.adapters.supabase_rows import now_iso, parse_datetime
from studio_site.domain.content import PackageAddOn, StudioPackage
from studio_site.services.content import PackageRepository


@dataclass
class SupabasePackageRepository(PackageRepository):
    """Supabase implementation for service packages.

    ``features`` and ``add_ons`` are jsonb columns.
    """

    client: Client

    def list_packages(self, published_only: bool) -> list[StudioPackage]:
        """Return packages ordered for display."""
        query = self.client.table("packages").select("*")
        if published_only:
            query = query.eq("is_published", True)
        response = query.order("order_index").order("created_at", desc=True).execute()
        return [_parse_package(row) for row in response.data or []]

    def create_package(self, payload: dict[str, object]) -> StudioPackage:
        """Create a package and return it."""
        row = {"features": [], "add_ons": [], **payload}
        response = self.client.table("packages").insert(row).execute()
        if not response.data:
            raise RuntimeError("Failed to create package")
        return _parse_package(response.data[0])

    def update_package(
        self, package_id: UUID, payload: dict[str, object]
    ) -> StudioPackage | None:
        """Update a package and return it."""
        response = (
            self.client.table("packages")
            .update({**payload, "updated_at": now_iso()})
            .eq("id", str(package_id))
            .execute()
        )
        if not response.data:
            return None
        return _parse_package(response.data[0])

    def delete_package(self, package_id: UUID) -> bool:
        """Delete a package."""
        response = (
            self.client.table("packages").delete().eq("id", str(package_id)).execute()
        )
        return bool(response.data)


def _parse_package(row: dict[str, object]) -> StudioPackage:
    features = row.get("features") or []
    add_ons = row.get("add_ons") or []
    return StudioPackage(
        id=UUID(str(row["id"])),
        title=str(row["title"]),
        price=str(row["price"]),
        description=str(row["description"]),
        features=[str(feature) for feature in features],
        add_ons=[
            PackageAddOn(name=str(add_on["name"]), price=str(add_on["price"]))
            for add_on in add_ons
        ],
        is_popular=bool(row.get("is_popular")),
        badge=row.get("badge"),
        order_index=int(row.get("order_index") or 0),
        is_published=bool(row.get("is_published")),
        created_at=parse_datetime(row.get("created_at")),
        updated_at=parse_datetime(row.get("updated_at")),
    )
