"""Authenticated booking management for admins."""

import logging
from dataclasses import dataclass
from uuid import UUID

from studio_site.domain.bookings import BlockedDay, BookingRecord, BookingStatus
from studio_site.domain.errors import InvalidStatusError, NotFoundError
from studio_site.services.auth import AuthService
from studio_site.services.availability import AvailabilityService
from studio_site.services.bookings import BookingRepository
from studio_site.services.clock import Clock, utc_now

logger = logging.getLogger(__name__)


def parse_status(value: object) -> BookingStatus:
    """Return the BookingStatus for a raw value or raise InvalidStatusError."""
    try:
        return BookingStatus(value)
    except ValueError as exc:
        allowed = ", ".join(status.value for status in BookingStatus)
        raise InvalidStatusError(
            f"Invalid status. Expected one of: {allowed}"
        ) from exc


def check_transition(current: BookingStatus, new: BookingStatus) -> None:
    """Hook for lifecycle rules; every transition is currently allowed."""


@dataclass
class BookingAdminService:
    """Booking and calendar operations gated by an admin session token."""

    auth_service: AuthService
    repository: BookingRepository
    availability: AvailabilityService
    clock: Clock = utc_now

    def list_bookings(self, token: str | None) -> list[BookingRecord]:
        """Return all bookings, newest first."""
        self.auth_service.validate_session(token)
        return self.repository.list_bookings()

    def update_booking_status(
        self, token: str | None, booking_id: UUID, new_status: object
    ) -> BookingRecord:
        """Move a booking to another status."""
        identity = self.auth_service.validate_session(token)
        status = parse_status(new_status)
        current = self.repository.get_booking(booking_id)
        if current is None:
            raise NotFoundError("Booking not found")
        check_transition(current.status, status)
        updated = self.repository.update_status(booking_id, status, self.clock())
        if updated is None:
            raise NotFoundError("Booking not found")
        logger.info(
            "Booking status changed",
            extra={
                "booking_id": str(booking_id),
                "from_status": current.status.value,
                "to_status": status.value,
                "admin_id": str(identity.id),
            },
        )
        return updated

    def list_blocked_days(self, token: str | None) -> list[BlockedDay]:
        """Return blocked days with reasons."""
        self.auth_service.validate_session(token)
        return self.availability.list_blocked_days()

    def block_day(
        self, token: str | None, timestamp_ms: int, reason: str | None = None
    ) -> BlockedDay:
        """Block a calendar day."""
        self.auth_service.validate_session(token)
        return self.availability.block_day(timestamp_ms, reason)

    def unblock_day(self, token: str | None, timestamp_ms: int) -> None:
        """Unblock a calendar day."""
        self.auth_service.validate_session(token)
        self.availability.unblock_day(timestamp_ms)
