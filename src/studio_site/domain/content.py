"""Domain models for the editable marketing content."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class GalleryItem:
    """A highlight card on the home page gallery."""

    id: UUID
    title: str
    description: str
    badge: str
    icon_name: str
    image_url: str | None
    order_index: int
    is_published: bool
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class PackageAddOn:
    """An optional extra sold with a package."""

    name: str
    price: str


@dataclass(frozen=True)
class StudioPackage:
    """A priced service package."""

    id: UUID
    title: str
    price: str
    description: str
    features: list[str] = field(default_factory=list)
    add_ons: list[PackageAddOn] = field(default_factory=list)
    is_popular: bool = False
    badge: str | None = None
    order_index: int = 0
    is_published: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class ClientLogo:
    """A client logo shown in the trusted-by strip."""

    id: UUID
    name: str
    logo_url: str
    order_index: int
    created_at: datetime
    updated_at: datetime | None = None


@dataclass(frozen=True)
class HeroSettings:
    """Hero video sources for the landing page."""

    mp4_url: str | None = None
    webm_url: str | None = None
    poster_url: str | None = None
