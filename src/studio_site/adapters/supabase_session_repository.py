"""Supabase-backed admin session repository."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from studio_site.adapters.supabase_rows import require_datetime
from studio_site.domain.auth import AdminSession
from studio_site.services.auth import SessionRepository


@dataclass
class SupabaseSessionRepository(SessionRepository):
    """Supabase implementation for admin sessions."""

    client: Client

    def create_session(
        self,
        admin_id: UUID,
        token: str,
        created_at: datetime,
        expires_at: datetime,
    ) -> AdminSession:
        """Create a session row and return it."""
        response = (
            self.client.table("admin_sessions")
            .insert(
                {
                    "admin_id": str(admin_id),
                    "token": token,
                    "created_at": created_at.isoformat(),
                    "expires_at": expires_at.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create session")
        return _parse_session(response.data[0])

    def get_by_token(self, token: str) -> AdminSession | None:
        """Return the session for a token, if present."""
        response = (
            self.client.table("admin_sessions")
            .select("id, admin_id, token, created_at, expires_at")
            .eq("token", token)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_session(response.data[0])

    def delete_by_token(self, token: str) -> None:
        """Delete the session for a token."""
        self.client.table("admin_sessions").delete().eq("token", token).execute()

    def delete_for_admin(self, admin_id: UUID) -> None:
        """Delete all sessions of an admin."""
        self.client.table("admin_sessions").delete().eq(
            "admin_id", str(admin_id)
        ).execute()

    def delete_expired(self, now: datetime) -> None:
        """Delete sessions that expired at or before now."""
        self.client.table("admin_sessions").delete().lte(
            "expires_at", now.isoformat()
        ).execute()


def _parse_session(row: dict[str, object]) -> AdminSession:
    return AdminSession(
        id=UUID(str(row["id"])),
        admin_id=UUID(str(row["admin_id"])),
        token=str(row["token"]),
        created_at=require_datetime(row["created_at"]),
        expires_at=require_datetime(row["expires_at"]),
    )
