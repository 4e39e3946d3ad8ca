"""Pydantic request bodies; the wire format is camelCase."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Accepts camelCase keys as well as the snake_case field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class LoginRequest(CamelModel):
    """Admin credentials."""

    email: str
    password: str


class ChangePasswordRequest(CamelModel):
    """Password change payload."""

    current_password: str
    new_password: str


class BookingRequest(CamelModel):
    """Public booking form submission."""

    name: str
    email: str
    phone: str
    desired_date: int
    package_name: str | None = None
    user_agent: str | None = None


class StatusUpdateRequest(CamelModel):
    """New status for a booking."""

    status: str


class BlockDayRequest(CamelModel):
    """Day to block, as epoch milliseconds."""

    date_ms: int
    reason: str | None = None


class AlbumCreate(CamelModel):
    """New portfolio album."""

    title: str
    description: str
    category: str
    cover_image_url: str | None = None
    order_index: int = 0
    is_published: bool = False


class AlbumUpdate(CamelModel):
    """Partial album update."""

    title: str | None = None
    description: str | None = None
    category: str | None = None
    cover_image_url: str | None = None
    order_index: int | None = None
    is_published: bool | None = None


class PhotoCreate(CamelModel):
    """New album photo."""

    image_url: str
    caption: str | None = None
    order_index: int = 0


class PhotoUpdate(CamelModel):
    """Partial photo update."""

    image_url: str | None = None
    caption: str | None = None
    order_index: int | None = None


class GalleryItemCreate(CamelModel):
    """New gallery item."""

    title: str
    description: str
    badge: str
    icon_name: str
    image_url: str | None = None
    order_index: int = 0
    is_published: bool = False


class GalleryItemUpdate(CamelModel):
    """Partial gallery item update."""

    title: str | None = None
    description: str | None = None
    badge: str | None = None
    icon_name: str | None = None
    image_url: str | None = None
    order_index: int | None = None
    is_published: bool | None = None


class AddOn(CamelModel):
    """Package add-on."""

    name: str
    price: str


class PackageCreate(CamelModel):
    """New service package."""

    title: str
    price: str
    description: str
    features: list[str] = Field(default_factory=list)
    add_ons: list[AddOn] = Field(default_factory=list)
    is_popular: bool = False
    badge: str | None = None
    order_index: int = 0
    is_published: bool = False


class PackageUpdate(CamelModel):
    """Partial package update."""

    title: str | None = None
    price: str | None = None
    description: str | None = None
    features: list[str] | None = None
    add_ons: list[AddOn] | None = None
    is_popular: bool | None = None
    badge: str | None = None
    order_index: int | None = None
    is_published: bool | None = None


class ClientLogoCreate(CamelModel):
    """New client logo."""

    name: str
    logo_url: str
    order_index: int = 0


class ClientLogoUpdate(CamelModel):
    """Partial client logo update."""

    name: str | None = None
    logo_url: str | None = None
    order_index: int | None = None


class HeroUpdate(CamelModel):
    """Hero video sources."""

    mp4_url: str | None = None
    webm_url: str | None = None
    poster_url: str | None = None


class SignupRequest(CamelModel):
    """Package interest signup."""

    name: str
    email: str
    phone: str
    package_name: str
    user_agent: str | None = None


class TrackEventRequest(CamelModel):
    """Analytics page event."""

    type: str
    path: str
    user_agent: str | None = None
    referrer: str | None = None
