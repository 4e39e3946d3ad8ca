"""Domain models for bookings and blocked calendar days."""

from dataclasses import dataclass
from datetime import UTC, datetime
from enum import Enum
from uuid import UUID
from zoneinfo import ZoneInfo


class BookingStatus(str, Enum):
    """Lifecycle states of a booking request."""

    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


@dataclass(frozen=True)
class BookingRecord:
    """Represents a booking request stored in the database."""

    id: UUID
    name: str
    email: str
    phone: str
    day_key: int
    package_name: str | None
    user_agent: str | None
    status: BookingStatus
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class NewBooking:
    """Validated booking data ready to be inserted."""

    name: str
    email: str
    phone: str
    day_key: int
    package_name: str | None
    user_agent: str | None
    created_at: datetime


@dataclass(frozen=True)
class BlockedDay:
    """An admin-declared day on which no bookings are accepted."""

    id: UUID
    day_key: int
    reason: str | None
    created_at: datetime


def day_key(timestamp_ms: int, timezone: ZoneInfo) -> int:
    """Truncate an epoch-ms timestamp to the start of its local calendar day.

    The result is again epoch milliseconds, so two timestamps on the same
    local day always map to the same key.
    """
    moment = datetime.fromtimestamp(timestamp_ms / 1000, tz=timezone)
    start = moment.replace(hour=0, minute=0, second=0, microsecond=0)
    return to_epoch_ms(start)


def to_epoch_ms(value: datetime) -> int:
    """Convert an aware datetime into epoch milliseconds."""
    return int(round(value.timestamp() * 1000))


def from_epoch_ms(value: int) -> datetime:
    """Convert epoch milliseconds into a UTC datetime."""
    return datetime.fromtimestamp(value / 1000, tz=UTC)
