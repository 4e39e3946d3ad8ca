"""Supabase-backed admin account repository."""

from dataclasses import dataclass
from uuid import UUID

from postgrest.exceptions import APIError
from supabase import Client

from studio_site.adapters.supabase_rows import (
    is_unique_violation,
    now_iso,
    parse_datetime,
)
from studio_site.domain.auth import AdminRecord
from studio_site.services.auth import AdminRepository

_COLUMNS = "id, email, password_hash, created_at"


@dataclass
class SupabaseAdminRepository(AdminRepository):
    """Supabase implementation for admin accounts."""

    client: Client

    def get_by_email(self, email: str) -> AdminRecord | None:
        """Return the admin with this email, if present."""
        response = (
            self.client.table("admins")
            .select(_COLUMNS)
            .eq("email", email)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_admin(response.data[0])

    def get_by_id(self, admin_id: UUID) -> AdminRecord | None:
        """Return the admin by id, if present."""
        response = (
            self.client.table("admins")
            .select(_COLUMNS)
            .eq("id", str(admin_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_admin(response.data[0])

    def has_any_admin(self) -> bool:
        """Return whether at least one admin exists."""
        response = self.client.table("admins").select("id").limit(1).execute()
        return bool(response.data)

    def create_admin(self, email: str, password_hash: str) -> AdminRecord:
        """Create an admin row and return it."""
        response = (
            self.client.table("admins")
            .insert({"email": email, "password_hash": password_hash})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create admin")
        return _parse_admin(response.data[0])

    def claim_first_registration(self) -> bool:
        """Insert the single ``admin_registration`` row; False if it exists."""
        try:
            self.client.table("admin_registration").insert({"id": True}).execute()
        except APIError as exc:
            if is_unique_violation(exc):
                return False
            raise
        return True

    def update_password(self, admin_id: UUID, password_hash: str) -> None:
        """Replace the stored password hash."""
        self.client.table("admins").update(
            {"password_hash": password_hash, "updated_at": now_iso()}
        ).eq("id", str(admin_id)).execute()


def _parse_admin(row: dict[str, object]) -> AdminRecord:
    return AdminRecord(
        id=UUID(str(row["id"])),
        email=str(row["email"]),
        password_hash=str(row["password_hash"]),
        created_at=parse_datetime(row.get("created_at")),
    )
