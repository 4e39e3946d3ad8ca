"""Booking form and booking desk endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends

from studio_site.api.dependencies import bearer_token, get_container
from studio_site.api.schemas import (
    BlockDayRequest,
    BookingRequest,
    StatusUpdateRequest,
)
from studio_site.api.serializers import serialize_blocked_day, serialize_booking
from studio_site.containers import AppContainer

router = APIRouter(prefix="/api/bookings", tags=["bookings"])


@router.post("", status_code=201)
async def submit_booking(
    body: BookingRequest, container: AppContainer = Depends(get_container)
) -> dict[str, object]:
    """Submit a booking request for a day."""
    booking = container.booking_service.submit_booking(
        name=body.name,
        email=body.email,
        phone=body.phone,
        desired_timestamp_ms=body.desired_date,
        package_name=body.package_name,
        user_agent=body.user_agent,
    )
    return {
        "id": str(booking.id),
        "message": "Booking request submitted successfully",
    }


@router.get("/admin")
async def list_bookings(
    token: str = Depends(bearer_token),
    container: AppContainer = Depends(get_container),
) -> list[dict[str, object]]:
    """Return all bookings, newest first."""
    bookings = container.booking_admin_service.list_bookings(token)
    return [serialize_booking(booking) for booking in bookings]


@router.patch("/{booking_id}/status")
async def update_booking_status(
    booking_id: UUID,
    body: StatusUpdateRequest,
    token: str = Depends(bearer_token),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Change a booking's status."""
    booking = container.booking_admin_service.update_booking_status(
        token, booking_id, body.status
    )
    return serialize_booking(booking)


@router.get("/unavailable-dates")
async def unavailable_dates(
    container: AppContainer = Depends(get_container),
) -> list[int]:
    """Return day keys that cannot be booked, without booking details."""
    return container.availability_service.list_unavailable_days()


@router.get("/unavailable-dates/admin")
async def blocked_dates(
    token: str = Depends(bearer_token),
    container: AppContainer = Depends(get_container),
) -> list[dict[str, object]]:
    """Return blocked days with their reasons."""
    blocked = container.booking_admin_service.list_blocked_days(token)
    return [serialize_blocked_day(day) for day in blocked]


@router.post("/unavailable-dates", status_code=201)
async def block_date(
    body: BlockDayRequest,
    token: str = Depends(bearer_token),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Block a day."""
    blocked = container.booking_admin_service.block_day(
        token, body.date_ms, body.reason
    )
    return serialize_blocked_day(blocked)


@router.delete("/unavailable-dates/{date_ms}")
async def unblock_date(
    date_ms: int,
    token: str = Depends(bearer_token),
    container: AppContainer = Depends(get_container),
) -> dict[str, str]:
    """Unblock a day."""
    container.booking_admin_service.unblock_day(token, date_ms)
    return {"message": "Unavailable date removed successfully"}
