"""Availability ledger: blocked days and days already taken by bookings."""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Protocol
from zoneinfo import ZoneInfo

from studio_site.domain.bookings import BlockedDay, day_key
from studio_site.domain.errors import ValidationError
from studio_site.services.clock import Clock, utc_now

logger = logging.getLogger(__name__)


class BlockedDayRepository(Protocol):
    """Persistence interface for blocked calendar days."""

    def get_blocked_day(self, day_key: int) -> BlockedDay | None:
        """Return the blocked day for a key, if present."""

    def ensure_blocked_day(
        self, day_key: int, reason: str | None, created_at: datetime
    ) -> BlockedDay:
        """Insert a blocked day unless one exists; return the stored row."""

    def delete_blocked_day(self, day_key: int) -> None:
        """Delete the blocked day for a key, if present."""

    def list_blocked_days(self) -> list[BlockedDay]:
        """Return blocked days ordered by day."""


class BookedDayReader(Protocol):
    """Read access to the days occupied by bookings."""

    def has_booking_for_day(self, day_key: int) -> bool:
        """Return whether any booking holds this day."""

    def list_booked_day_keys(self) -> list[int]:
        """Return the day keys of all bookings."""


@dataclass
class AvailabilityService:
    """Answers whether a day can still be booked."""

    blocked_days: BlockedDayRepository
    booked_days: BookedDayReader
    timezone: ZoneInfo = field(default_factory=lambda: ZoneInfo("UTC"))
    clock: Clock = utc_now

    def normalize(self, timestamp_ms: object) -> int:
        """Truncate an epoch-ms timestamp to its local day key."""
        if isinstance(timestamp_ms, bool) or not isinstance(timestamp_ms, int):
            raise ValidationError("Date must be an epoch millisecond number")
        try:
            return day_key(timestamp_ms, self.timezone)
        except (OverflowError, OSError, ValueError) as exc:
            raise ValidationError("Date is out of range") from exc

    def is_day_available(self, timestamp_ms: int) -> bool:
        """Return False when the day is blocked or already booked."""
        key = self.normalize(timestamp_ms)
        if self.blocked_days.get_blocked_day(key) is not None:
            return False
        return not self.booked_days.has_booking_for_day(key)

    def block_day(self, timestamp_ms: int, reason: str | None = None) -> BlockedDay:
        """Block a day; blocking an already blocked day returns the existing row."""
        key = self.normalize(timestamp_ms)
        existing = self.blocked_days.get_blocked_day(key)
        if existing is not None:
            return existing
        cleaned_reason = reason.strip() if reason and reason.strip() else None
        blocked = self.blocked_days.ensure_blocked_day(
            key, cleaned_reason, created_at=self.clock()
        )
        logger.info("Blocked day", extra={"day_key": key})
        return blocked

    def unblock_day(self, timestamp_ms: int) -> None:
        """Remove a blocked day; unknown days are ignored."""
        key = self.normalize(timestamp_ms)
        self.blocked_days.delete_blocked_day(key)
        logger.info("Unblocked day", extra={"day_key": key})

    def list_blocked_days(self) -> list[BlockedDay]:
        """Return blocked days with their reasons."""
        return self.blocked_days.list_blocked_days()

    def list_unavailable_days(self) -> list[int]:
        """Return the sorted union of blocked and booked day keys."""
        keys = {blocked.day_key for blocked in self.blocked_days.list_blocked_days()}
        keys.update(self.booked_days.list_booked_day_keys())
        return sorted(keys)
