"""Services for visitor signups and page analytics."""

import logging
from collections import Counter
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from studio_site.domain.engagement import AnalyticsEvent, AnalyticsSummary, Signup
from studio_site.services.clock import Clock, utc_now
from studio_site.services.validation import clean_text, require_fields

logger = logging.getLogger(__name__)


class SignupRepository(Protocol):
    """Persistence interface for package signups."""

    def create_signup(self, payload: dict[str, object]) -> Signup:
        """Create a signup and return it."""

    def list_signups(self) -> list[Signup]:
        """Return signups, newest first."""


class AnalyticsRepository(Protocol):
    """Persistence interface for analytics events."""

    def create_event(self, event: AnalyticsEvent) -> None:
        """Store an analytics event."""

    def list_events_since(self, since: datetime) -> list[AnalyticsEvent]:
        """Return events created at or after a point in time."""


@dataclass
class SignupService:
    """Records package interest from visitors."""

    repository: SignupRepository

    def create(self, payload: dict[str, object]) -> Signup:
        """Record a signup."""
        require_fields(payload, "name", "email", "phone", "package_name")
        signup = self.repository.create_signup(payload)
        logger.info("Signup recorded", extra={"signup_id": str(signup.id)})
        return signup

    def list_signups(self) -> list[Signup]:
        """Return all signups."""
        return self.repository.list_signups()


@dataclass
class AnalyticsService:
    """Tracks page events and summarises them."""

    repository: AnalyticsRepository
    clock: Clock = utc_now

    def track(
        self,
        event_type: str,
        path: str,
        user_agent: str | None = None,
        referrer: str | None = None,
    ) -> None:
        """Store a page event."""
        require_fields({"type": event_type, "path": path}, "type", "path")
        self.repository.create_event(
            AnalyticsEvent(
                type=clean_text(event_type),
                path=clean_text(path),
                user_agent=clean_text(user_agent) or None,
                referrer=clean_text(referrer) or None,
                created_at=self.clock(),
            )
        )

    def summary(self, since: datetime) -> AnalyticsSummary:
        """Count events per path since a point in time."""
        events = self.repository.list_events_since(since)
        by_path = Counter(event.path for event in events)
        return AnalyticsSummary(total=len(events), by_path=dict(by_path))
