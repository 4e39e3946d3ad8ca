"""Booking intake for public booking requests."""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol
from uuid import UUID

from studio_site.domain.bookings import BookingRecord, BookingStatus, NewBooking
from studio_site.domain.errors import DateUnavailableError, ValidationError
from studio_site.services.availability import AvailabilityService, BookedDayReader
from studio_site.services.clock import Clock, utc_now
from studio_site.services.validation import clean_text

logger = logging.getLogger(__name__)


class BookingRepository(BookedDayReader, Protocol):
    """Persistence interface for bookings."""

    def create_booking(self, booking: NewBooking) -> BookingRecord:
        """Insert a pending booking.

        Raises DateUnavailableError when another booking already holds the day.
        """

    def get_booking(self, booking_id: UUID) -> BookingRecord | None:
        """Return a booking by id, if present."""

    def list_bookings(self) -> list[BookingRecord]:
        """Return all bookings, newest first."""

    def update_status(
        self, booking_id: UUID, status: BookingStatus, updated_at: datetime
    ) -> BookingRecord | None:
        """Set a booking's status and return the updated row."""


@dataclass
class BookingService:
    """Validates and records new booking requests."""

    repository: BookingRepository
    availability: AvailabilityService
    clock: Clock = utc_now

    def submit_booking(  # noqa: PLR0913
        self,
        name: str,
        email: str,
        phone: str,
        desired_timestamp_ms: int,
        package_name: str | None = None,
        user_agent: str | None = None,
    ) -> BookingRecord:
        """Record a pending booking for the desired day."""
        fields = {
            "name": clean_text(name),
            "email": clean_text(email),
            "phone": clean_text(phone),
        }
        missing = [key for key, value in fields.items() if not value]
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")
        key = self.availability.normalize(desired_timestamp_ms)
        if not self.availability.is_day_available(key):
            logger.info("Rejected booking for unavailable day", extra={"day_key": key})
            raise DateUnavailableError(
                "Selected date is unavailable. Please pick another date."
            )
        booking = self.repository.create_booking(
            NewBooking(
                name=fields["name"],
                email=fields["email"],
                phone=fields["phone"],
                day_key=key,
                package_name=clean_text(package_name) or None,
                user_agent=clean_text(user_agent) or None,
                created_at=self.clock(),
            )
        )
        logger.info(
            "Booking created",
            extra={"booking_id": str(booking.id), "day_key": key},
        )
        return booking
