"""Supabase repositories for signups and analytics events."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from studio_site.adapters.supabase_rows import require_datetime, select_all
from studio_site.domain.engagement import AnalyticsEvent, Signup
from studio_site.services.engagement import AnalyticsRepository, SignupRepository


@dataclass
class SupabaseSignupRepository(SignupRepository):
    """Supabase-backed signup repository."""

    client: Client

    def create_signup(self, payload: dict[str, object]) -> Signup:
        """Create a signup row and return it."""
        response = self.client.table("signups").insert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to create signup")
        return _parse_signup(response.data[0])

    def list_signups(self) -> list[Signup]:
        """Return signups, newest first."""
        rows = select_all(
            lambda: self.client.table("signups")
            .select("*")
            .order("created_at", desc=True)
        )
        return [_parse_signup(row) for row in rows]


@dataclass
class SupabaseAnalyticsRepository(AnalyticsRepository):
    """Supabase-backed analytics event repository."""

    client: Client

    def create_event(self, event: AnalyticsEvent) -> None:
        """Insert an analytics event row."""
        self.client.table("analytics_events").insert(
            {
                "type": event.type,
                "path": event.path,
                "user_agent": event.user_agent,
                "referrer": event.referrer,
                "created_at": event.created_at.isoformat(),
            }
        ).execute()

    def list_events_since(self, since: datetime) -> list[AnalyticsEvent]:
        """Return events created at or after a point in time."""
        rows = select_all(
            lambda: self.client.table("analytics_events")
            .select("type, path, user_agent, referrer, created_at")
            .gte("created_at", since.isoformat())
            .order("created_at")
        )
        return [
            AnalyticsEvent(
                type=str(row["type"]),
                path=str(row["path"]),
                user_agent=row.get("user_agent"),
                referrer=row.get("referrer"),
                created_at=require_datetime(row["created_at"]),
            )
            for row in rows
        ]


def _parse_signup(row: dict[str, object]) -> Signup:
    return Signup(
        id=UUID(str(row["id"])),
        name=str(row["name"]),
        email=str(row["email"]),
        phone=str(row["phone"]),
        package_name=str(row["package_name"]),
        user_agent=row.get("user_agent"),
        created_at=require_datetime(row["created_at"]),
    )
