"""Supabase-backed repository for blocked calendar days."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from studio_site.adapters.supabase_rows import require_datetime, select_all
from studio_site.domain.bookings import BlockedDay
from studio_site.services.availability import BlockedDayRepository


@dataclass
class SupabaseBlockedDayRepository(BlockedDayRepository):
    """Supabase implementation over the ``unavailable_dates`` table."""

    client: Client

    def get_blocked_day(self, day_key: int) -> BlockedDay | None:
        """Return the blocked day for a key, if present."""
        response = (
            self.client.table("unavailable_dates")
            .select("id, day_key, reason, created_at")
            .eq("day_key", day_key)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_blocked_day(response.data[0])

    def ensure_blocked_day(
        self, day_key: int, reason: str | None, created_at: datetime
    ) -> BlockedDay:
        """Insert the day unless the unique index already holds it."""
        response = (
            self.client.table("unavailable_dates")
            .upsert(
                {
                    "day_key": day_key,
                    "reason": reason,
                    "created_at": created_at.isoformat(),
                },
                on_conflict="day_key",
                ignore_duplicates=True,
            )
            .execute()
        )
        if response.data:
            return _parse_blocked_day(response.data[0])
        existing = self.get_blocked_day(day_key)
        if existing is None:
            raise RuntimeError("Failed to block day")
        return existing

    def delete_blocked_day(self, day_key: int) -> None:
        """Delete the blocked day for a key."""
        self.client.table("unavailable_dates").delete().eq("day_key", day_key).execute()

    def list_blocked_days(self) -> list[BlockedDay]:
        """Return blocked days ordered by day."""
        rows = select_all(
            lambda: self.client.table("unavailable_dates")
            .select("id, day_key, reason, created_at")
            .order("day_key")
        )
        return [_parse_blocked_day(row) for row in rows]


def _parse_blocked_day(row: dict[str, object]) -> BlockedDay:
    return BlockedDay(
        id=UUID(str(row["id"])),
        day_key=int(row["day_key"]),
        reason=row.get("reason"),
        created_at=require_datetime(row["created_at"]),
    )
