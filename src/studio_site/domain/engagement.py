"""Domain models for visitor signups and page analytics."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class Signup:
    """A package interest signup left by a visitor."""

    id: UUID
    name: str
    email: str
    phone: str
    package_name: str
    user_agent: str | None
    created_at: datetime


@dataclass(frozen=True)
class AnalyticsEvent:
    """A tracked page event."""

    type: str
    path: str
    user_agent: str | None
    referrer: str | None
    created_at: datetime


@dataclass(frozen=True)
class AnalyticsSummary:
    """Event counts since a point in time."""

    total: int
    by_path: dict[str, int]
