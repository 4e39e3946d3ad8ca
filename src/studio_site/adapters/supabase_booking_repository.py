"""Supabase-backed booking repository."""

import logging
from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from postgrest.exceptions import APIError
from supabase import Client

from studio_site.adapters.supabase_rows import (
    is_unique_violation,
    require_datetime,
    select_all,
)
from studio_site.domain.bookings import BookingRecord, BookingStatus, NewBooking
from studio_site.domain.errors import DateUnavailableError
from studio_site.services.bookings import BookingRepository

logger = logging.getLogger(__name__)


@dataclass
class SupabaseBookingRepository(BookingRepository):
    """Supabase implementation for bookings.

    The ``bookings.day_key`` unique index decides races between concurrent
    submissions for the same day; the losing insert becomes a
    DateUnavailableError.
    """

    client: Client

    def create_booking(self, booking: NewBooking) -> BookingRecord:
        """Insert a pending booking row and return it."""
        created_at = booking.created_at.isoformat()
        try:
            response = (
                self.client.table("bookings")
                .insert(
                    {
                        "name": booking.name,
                        "email": booking.email,
                        "phone": booking.phone,
                        "day_key": booking.day_key,
                        "package_name": booking.package_name,
                        "user_agent": booking.user_agent,
                        "status": BookingStatus.PENDING.value,
                        "created_at": created_at,
                        "updated_at": created_at,
                    }
                )
                .execute()
            )
        except APIError as exc:
            if is_unique_violation(exc):
                logger.info(
                    "Booking insert lost day race", extra={"day_key": booking.day_key}
                )
                raise DateUnavailableError("This date is already booked.") from exc
            raise
        if not response.data:
            raise RuntimeError("Failed to create booking")
        return _parse_booking(response.data[0])

    def get_booking(self, booking_id: UUID) -> BookingRecord | None:
        """Return a booking by id, if present."""
        response = (
            self.client.table("bookings")
            .select("*")
            .eq("id", str(booking_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_booking(response.data[0])

    def list_bookings(self) -> list[BookingRecord]:
        """Return all bookings, newest first."""
        rows = select_all(
            lambda: self.client.table("bookings")
            .select("*")
            .order("created_at", desc=True)
        )
        return [_parse_booking(row) for row in rows]

    def update_status(
        self, booking_id: UUID, status: BookingStatus, updated_at: datetime
    ) -> BookingRecord | None:
        """Set a booking's status and return the updated row."""
        response = (
            self.client.table("bookings")
            .update({"status": status.value, "updated_at": updated_at.isoformat()})
            .eq("id", str(booking_id))
            .execute()
        )
        if not response.data:
            return None
        return _parse_booking(response.data[0])

    def has_booking_for_day(self, day_key: int) -> bool:
        """Return whether any booking holds this day."""
        response = (
            self.client.table("bookings")
            .select("id")
            .eq("day_key", day_key)
            .limit(1)
            .execute()
        )
        return bool(response.data)

    def list_booked_day_keys(self) -> list[int]:
        """Return the day keys of all bookings."""
        rows = select_all(
            lambda: self.client.table("bookings").select("day_key").order("day_key")
        )
        return [int(row["day_key"]) for row in rows]


def _parse_booking(row: dict[str, object]) -> BookingRecord:
    return BookingRecord(
        id=UUID(str(row["id"])),
        name=str(row["name"]),
        email=str(row["email"]),
        phone=str(row["phone"]),
        day_key=int(row["day_key"]),
        package_name=row.get("package_name"),
        user_agent=row.get("user_agent"),
        status=BookingStatus(row["status"]),
        created_at=require_datetime(row["created_at"]),
        updated_at=require_datetime(row.get("updated_at") or row["created_at"]),
    )
