"""Domain objects to camelCase JSON payloads; timestamps as epoch ms."""

from datetime import datetime

from studio_site.domain.auth import AdminIdentity, IssuedSession
from studio_site.domain.bookings import BlockedDay, BookingRecord, to_epoch_ms
from studio_site.domain.content import (
    ClientLogo,
    GalleryItem,
    HeroSettings,
    StudioPackage,
)
from studio_site.domain.engagement import AnalyticsSummary, Signup
from studio_site.domain.portfolio import PortfolioAlbum, PortfolioPhoto


def _ms(value: datetime | None) -> int | None:
    return to_epoch_ms(value) if value else None


def serialize_admin(admin: AdminIdentity) -> dict[str, object]:
    return {"id": str(admin.id), "email": admin.email}


def serialize_issued_session(issued: IssuedSession) -> dict[str, object]:
    return {
        "token": issued.token,
        "expiresAt": _ms(issued.expires_at),
        "admin": serialize_admin(issued.admin),
    }


def serialize_booking(booking: BookingRecord) -> dict[str, object]:
    return {
        "id": str(booking.id),
        "name": booking.name,
        "email": booking.email,
        "phone": booking.phone,
        "desiredDate": booking.day_key,
        "packageName": booking.package_name,
        "userAgent": booking.user_agent,
        "status": booking.status.value,
        "createdAt": _ms(booking.created_at),
        "updatedAt": _ms(booking.updated_at),
    }


def serialize_blocked_day(blocked: BlockedDay) -> dict[str, object]:
    return {
        "id": str(blocked.id),
        "dateMs": blocked.day_key,
        "reason": blocked.reason,
        "createdAt": _ms(blocked.created_at),
    }


def serialize_album(album: PortfolioAlbum) -> dict[str, object]:
    return {
        "id": str(album.id),
        "title": album.title,
        "description": album.description,
        "category": album.category,
        "coverImageUrl": album.cover_image_url,
        "orderIndex": album.order_index,
        "isPublished": album.is_published,
        "createdAt": _ms(album.created_at),
        "updatedAt": _ms(album.updated_at),
    }


def serialize_photo(photo: PortfolioPhoto) -> dict[str, object]:
    return {
        "id": str(photo.id),
        "albumId": str(photo.album_id),
        "imageUrl": photo.image_url,
        "caption": photo.caption,
        "orderIndex": photo.order_index,
        "createdAt": _ms(photo.created_at),
        "updatedAt": _ms(photo.updated_at),
    }


def serialize_gallery_item(item: GalleryItem) -> dict[str, object]:
    return {
        "id": str(item.id),
        "title": item.title,
        "description": item.description,
        "badge": item.badge,
        "iconName": item.icon_name,
        "imageUrl": item.image_url,
        "orderIndex": item.order_index,
        "isPublished": item.is_published,
        "createdAt": _ms(item.created_at),
        "updatedAt": _ms(item.updated_at),
    }


def serialize_package(package: StudioPackage) -> dict[str, object]:
    return {
        "id": str(package.id),
        "title": package.title,
        "price": package.price,
        "description": package.description,
        "features": list(package.features),
        "addOns": [
            {"name": add_on.name, "price": add_on.price} for add_on in package.add_ons
        ],
        "isPopular": package.is_popular,
        "badge": package.badge,
        "orderIndex": package.order_index,
        "isPublished": package.is_published,
        "createdAt": _ms(package.created_at),
        "updatedAt": _ms(package.updated_at),
    }


def serialize_logo(logo: ClientLogo) -> dict[str, object]:
    return {
        "id": str(logo.id),
        "name": logo.name,
        "logoUrl": logo.logo_url,
        "orderIndex": logo.order_index,
        "createdAt": _ms(logo.created_at),
    }


def serialize_hero(hero: HeroSettings) -> dict[str, object]:
    return {
        "mp4Url": hero.mp4_url,
        "webmUrl": hero.webm_url,
        "posterUrl": hero.poster_url,
    }


def serialize_signup(signup: Signup) -> dict[str, object]:
    return {
        "id": str(signup.id),
        "name": signup.name,
        "email": signup.email,
        "phone": signup.phone,
        "packageName": signup.package_name,
        "userAgent": signup.user_agent,
        "createdAt": _ms(signup.created_at),
    }


def serialize_analytics_summary(summary: AnalyticsSummary) -> dict[str, object]:
    return {"total": summary.total, "byPath": summary.by_path}
