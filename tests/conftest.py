"""Shared test fixtures."""

from dataclasses import dataclass, field, replace
from datetime import UTC, datetime, timedelta
from uuid import UUID, uuid4

import pytest

from studio_site.config import Settings
from studio_site.containers import AppContainer
from studio_site.domain.auth import AdminRecord, AdminSession
from studio_site.domain.bookings import (
    BlockedDay,
    BookingRecord,
    BookingStatus,
    NewBooking,
)
from studio_site.domain.content import (
    ClientLogo,
    GalleryItem,
    HeroSettings,
    PackageAddOn,
    StudioPackage,
)
from studio_site.domain.engagement import AnalyticsEvent, Signup
from studio_site.domain.errors import DateUnavailableError
from studio_site.domain.portfolio import PortfolioAlbum, PortfolioPhoto
from studio_site.services.auth import AdminRepository, AuthService, SessionRepository
from studio_site.services.availability import AvailabilityService, BlockedDayRepository
from studio_site.services.booking_admin import BookingAdminService
from studio_site.services.bookings import BookingRepository, BookingService
from studio_site.services.content import (
    ClientLogoRepository,
    ClientLogoService,
    GalleryRepository,
    GalleryService,
    PackageRepository,
    PackageService,
)
from studio_site.services.engagement import (
    AnalyticsRepository,
    AnalyticsService,
    SignupRepository,
    SignupService,
)
from studio_site.services.portfolio import PortfolioRepository, PortfolioService
from studio_site.services.site_settings import (
    SiteSettingsRepository,
    SiteSettingsService,
)

TEST_PASSWORD = "studio-secret"


@dataclass
class FakeClock:
    """Settable clock for deterministic timestamps."""

    now: datetime = field(
        default_factory=lambda: datetime(2025, 5, 1, 9, 0, tzinfo=UTC)
    )

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now = self.now + delta


def _stamp() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class InMemoryAdminRepository(AdminRepository):
    """In-memory admin repository for tests."""

    admins: dict[UUID, AdminRecord] = field(default_factory=dict)
    registration_claimed: bool = False

    def get_by_email(self, email: str) -> AdminRecord | None:
        return next(
            (admin for admin in self.admins.values() if admin.email == email), None
        )

    def get_by_id(self, admin_id: UUID) -> AdminRecord | None:
        return self.admins.get(admin_id)

    def has_any_admin(self) -> bool:
        return bool(self.admins)

    def create_admin(self, email: str, password_hash: str) -> AdminRecord:
        admin = AdminRecord(
            id=uuid4(), email=email, password_hash=password_hash, created_at=_stamp()
        )
        self.admins[admin.id] = admin
        return admin

    def claim_first_registration(self) -> bool:
        if self.registration_claimed:
            return False
        self.registration_claimed = True
        return True

    def update_password(self, admin_id: UUID, password_hash: str) -> None:
        self.admins[admin_id] = replace(
            self.admins[admin_id], password_hash=password_hash
        )


@dataclass
class InMemorySessionRepository(SessionRepository):
    """In-memory admin session store keyed by token."""

    sessions: dict[str, AdminSession] = field(default_factory=dict)

    def create_session(
        self,
        admin_id: UUID,
        token: str,
        created_at: datetime,
        expires_at: datetime,
    ) -> AdminSession:
        session = AdminSession(
            id=uuid4(),
            admin_id=admin_id,
            token=token,
            created_at=created_at,
            expires_at=expires_at,
        )
        self.sessions[token] = session
        return session

    def get_by_token(self, token: str) -> AdminSession | None:
        return self.sessions.get(token)

    def delete_by_token(self, token: str) -> None:
        self.sessions.pop(token, None)

    def delete_for_admin(self, admin_id: UUID) -> None:
        self.sessions = {
            token: session
            for token, session in self.sessions.items()
            if session.admin_id != admin_id
        }

    def delete_expired(self, now: datetime) -> None:
        self.sessions = {
            token: session
            for token, session in self.sessions.items()
            if session.expires_at > now
        }


@dataclass
class InMemoryBlockedDayRepository(BlockedDayRepository):
    """In-memory blocked days keyed by day key."""

    days: dict[int, BlockedDay] = field(default_factory=dict)

    def get_blocked_day(self, day_key: int) -> BlockedDay | None:
        return self.days.get(day_key)

    def ensure_blocked_day(
        self, day_key: int, reason: str | None, created_at: datetime
    ) -> BlockedDay:
        if day_key not in self.days:
            self.days[day_key] = BlockedDay(
                id=uuid4(), day_key=day_key, reason=reason, created_at=created_at
            )
        return self.days[day_key]

    def delete_blocked_day(self, day_key: int) -> None:
        self.days.pop(day_key, None)

    def list_blocked_days(self) -> list[BlockedDay]:
        return [self.days[key] for key in sorted(self.days)]


@dataclass
class InMemoryBookingRepository(BookingRepository):
    """In-memory bookings enforcing one booking per day key."""

    bookings: dict[UUID, BookingRecord] = field(default_factory=dict)

    def create_booking(self, booking: NewBooking) -> BookingRecord:
        if self.has_booking_for_day(booking.day_key):
            raise DateUnavailableError("This date is already booked.")
        record = BookingRecord(
            id=uuid4(),
            name=booking.name,
            email=booking.email,
            phone=booking.phone,
            day_key=booking.day_key,
            package_name=booking.package_name,
            user_agent=booking.user_agent,
            status=BookingStatus.PENDING,
            created_at=booking.created_at,
            updated_at=booking.created_at,
        )
        self.bookings[record.id] = record
        return record

    def get_booking(self, booking_id: UUID) -> BookingRecord | None:
        return self.bookings.get(booking_id)

    def list_bookings(self) -> list[BookingRecord]:
        return sorted(
            self.bookings.values(), key=lambda booking: booking.created_at, reverse=True
        )

    def update_status(
        self, booking_id: UUID, status: BookingStatus, updated_at: datetime
    ) -> BookingRecord | None:
        current = self.bookings.get(booking_id)
        if current is None:
            return None
        updated = replace(current, status=status, updated_at=updated_at)
        self.bookings[booking_id] = updated
        return updated

    def has_booking_for_day(self, day_key: int) -> bool:
        return any(booking.day_key == day_key for booking in self.bookings.values())

    def list_booked_day_keys(self) -> list[int]:
        return sorted(booking.day_key for booking in self.bookings.values())


def _display_order(rows: list) -> list:
    by_newest = sorted(rows, key=lambda row: row.created_at, reverse=True)
    return sorted(by_newest, key=lambda row: row.order_index)


@dataclass
class InMemoryPortfolioRepository(PortfolioRepository):
    """In-memory albums and photos; deleting an album drops its photos."""

    albums: dict[UUID, PortfolioAlbum] = field(default_factory=dict)
    photos: dict[UUID, PortfolioPhoto] = field(default_factory=dict)

    def list_albums(
        self, published_only: bool, category: str | None = None
    ) -> list[PortfolioAlbum]:
        albums = [
            album
            for album in self.albums.values()
            if (album.is_published or not published_only)
            and (category is None or album.category == category)
        ]
        return _display_order(albums)

    def get_album(self, album_id: UUID) -> PortfolioAlbum | None:
        return self.albums.get(album_id)

    def create_album(self, payload: dict[str, object]) -> PortfolioAlbum:
        now = _stamp()
        album = PortfolioAlbum(
            id=uuid4(),
            title=payload["title"],
            description=payload["description"],
            category=payload["category"],
            cover_image_url=payload.get("cover_image_url"),
            order_index=payload.get("order_index", 0),
            is_published=payload.get("is_published", False),
            created_at=now,
            updated_at=now,
        )
        self.albums[album.id] = album
        return album

    def update_album(
        self, album_id: UUID, payload: dict[str, object]
    ) -> PortfolioAlbum | None:
        if album_id not in self.albums:
            return None
        self.albums[album_id] = replace(
            self.albums[album_id], **payload, updated_at=_stamp()
        )
        return self.albums[album_id]

    def delete_album(self, album_id: UUID) -> bool:
        if self.albums.pop(album_id, None) is None:
            return False
        self.photos = {
            photo_id: photo
            for photo_id, photo in self.photos.items()
            if photo.album_id != album_id
        }
        return True

    def list_photos(self, album_id: UUID) -> list[PortfolioPhoto]:
        photos = [photo for photo in self.photos.values() if photo.album_id == album_id]
        return _display_order(photos)

    def create_photo(
        self, album_id: UUID, payload: dict[str, object]
    ) -> PortfolioPhoto:
        now = _stamp()
        photo = PortfolioPhoto(
            id=uuid4(),
            album_id=album_id,
            image_url=payload["image_url"],
            caption=payload.get("caption"),
            order_index=payload.get("order_index", 0),
            created_at=now,
            updated_at=now,
        )
        self.photos[photo.id] = photo
        return photo

    def update_photo(
        self, photo_id: UUID, payload: dict[str, object]
    ) -> PortfolioPhoto | None:
        if photo_id not in self.photos:
            return None
        self.photos[photo_id] = replace(
            self.photos[photo_id], **payload, updated_at=_stamp()
        )
        return self.photos[photo_id]

    def delete_photo(self, photo_id: UUID) -> bool:
        return self.photos.pop(photo_id, None) is not None


@dataclass
class InMemoryGalleryRepository(GalleryRepository):
    """In-memory gallery items."""

    items: dict[UUID, GalleryItem] = field(default_factory=dict)

    def list_items(self, published_only: bool, limit: int | None) -> list[GalleryItem]:
        items = _display_order(
            [
                item
                for item in self.items.values()
                if item.is_published or not published_only
            ]
        )
        return items[:limit] if limit is not None else items

    def create_item(self, payload: dict[str, object]) -> GalleryItem:
        now = _stamp()
        item = GalleryItem(
            id=uuid4(),
            title=payload["title"],
            description=payload["description"],
            badge=payload["badge"],
            icon_name=payload["icon_name"],
            image_url=payload.get("image_url"),
            order_index=payload.get("order_index", 0),
            is_published=payload.get("is_published", False),
            created_at=now,
            updated_at=now,
        )
        self.items[item.id] = item
        return item

    def update_item(
        self, item_id: UUID, payload: dict[str, object]
    ) -> GalleryItem | None:
        if item_id not in self.items:
            return None
        self.items[item_id] = replace(
            self.items[item_id], **payload, updated_at=_stamp()
        )
        return self.items[item_id]

    def delete_item(self, item_id: UUID) -> bool:
        return self.items.pop(item_id, None) is not None


def _add_ons(raw: object) -> list[PackageAddOn]:
    return [
        PackageAddOn(name=entry["name"], price=entry["price"]) for entry in raw or []
    ]


@dataclass
class InMemoryPackageRepository(PackageRepository):
    """In-memory service packages."""

    packages: dict[UUID, StudioPackage] = field(default_factory=dict)

    def list_packages(self, published_only: bool) -> list[StudioPackage]:
        return _display_order(
            [
                package
                for package in self.packages.values()
                if package.is_published or not published_only
            ]
        )

    def create_package(self, payload: dict[str, object]) -> StudioPackage:
        now = _stamp()
        package = StudioPackage(
            id=uuid4(),
            title=payload["title"],
            price=payload["price"],
            description=payload["description"],
            features=list(payload.get("features") or []),
            add_ons=_add_ons(payload.get("add_ons")),
            is_popular=payload.get("is_popular", False),
            badge=payload.get("badge"),
            order_index=payload.get("order_index", 0),
            is_published=payload.get("is_published", False),
            created_at=now,
            updated_at=now,
        )
        self.packages[package.id] = package
        return package

    def update_package(
        self, package_id: UUID, payload: dict[str, object]
    ) -> StudioPackage | None:
        if package_id not in self.packages:
            return None
        changes = dict(payload)
        if "add_ons" in changes:
            changes["add_ons"] = _add_ons(changes["add_ons"])
        self.packages[package_id] = replace(
            self.packages[package_id], **changes, updated_at=_stamp()
        )
        return self.packages[package_id]

    def delete_package(self, package_id: UUID) -> bool:
        return self.packages.pop(package_id, None) is not None


@dataclass
class InMemoryClientLogoRepository(ClientLogoRepository):
    """In-memory client logos."""

    logos: dict[UUID, ClientLogo] = field(default_factory=dict)

    def list_logos(self) -> list[ClientLogo]:
        return _display_order(list(self.logos.values()))

    def create_logo(self, payload: dict[str, object]) -> ClientLogo:
        logo = ClientLogo(
            id=uuid4(),
            name=payload["name"],
            logo_url=payload["logo_url"],
            order_index=payload.get("order_index", 0),
            created_at=_stamp(),
        )
        self.logos[logo.id] = logo
        return logo

    def update_logo(
        self, logo_id: UUID, payload: dict[str, object]
    ) -> ClientLogo | None:
        if logo_id not in self.logos:
            return None
        self.logos[logo_id] = replace(
            self.logos[logo_id], **payload, updated_at=_stamp()
        )
        return self.logos[logo_id]

    def delete_logo(self, logo_id: UUID) -> bool:
        return self.logos.pop(logo_id, None) is not None


@dataclass
class InMemorySiteSettingsRepository(SiteSettingsRepository):
    """Holds the hero settings in memory."""

    hero: HeroSettings | None = None

    def get_hero(self) -> HeroSettings | None:
        return self.hero

    def save_hero(self, hero: HeroSettings) -> None:
        self.hero = hero


@dataclass
class InMemorySignupRepository(SignupRepository):
    """In-memory signups."""

    signups: list[Signup] = field(default_factory=list)

    def create_signup(self, payload: dict[str, object]) -> Signup:
        signup = Signup(
            id=uuid4(),
            name=payload["name"],
            email=payload["email"],
            phone=payload["phone"],
            package_name=payload["package_name"],
            user_agent=payload.get("user_agent"),
            created_at=_stamp(),
        )
        self.signups.append(signup)
        return signup

    def list_signups(self) -> list[Signup]:
        return sorted(self.signups, key=lambda signup: signup.created_at, reverse=True)


@dataclass
class InMemoryAnalyticsRepository(AnalyticsRepository):
    """In-memory analytics events."""

    events: list[AnalyticsEvent] = field(default_factory=list)

    def create_event(self, event: AnalyticsEvent) -> None:
        self.events.append(event)

    def list_events_since(self, since: datetime) -> list[AnalyticsEvent]:
        return [event for event in self.events if event.created_at >= since]


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
        bcrypt_rounds=4,
        environment="test",
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def admin_repository() -> InMemoryAdminRepository:
    return InMemoryAdminRepository()


@pytest.fixture
def session_repository() -> InMemorySessionRepository:
    return InMemorySessionRepository()


@pytest.fixture
def booking_repository() -> InMemoryBookingRepository:
    return InMemoryBookingRepository()


@pytest.fixture
def blocked_day_repository() -> InMemoryBlockedDayRepository:
    return InMemoryBlockedDayRepository()


@pytest.fixture
def auth_service(
    settings: Settings,
    clock: FakeClock,
    admin_repository: InMemoryAdminRepository,
    session_repository: InMemorySessionRepository,
) -> AuthService:
    return AuthService(
        admin_repository=admin_repository,
        session_repository=session_repository,
        session_ttl=settings.session_ttl,
        bcrypt_rounds=settings.bcrypt_rounds,
        clock=clock,
    )


@pytest.fixture
def availability_service(
    settings: Settings,
    clock: FakeClock,
    blocked_day_repository: InMemoryBlockedDayRepository,
    booking_repository: InMemoryBookingRepository,
) -> AvailabilityService:
    return AvailabilityService(
        blocked_days=blocked_day_repository,
        booked_days=booking_repository,
        timezone=settings.timezone,
        clock=clock,
    )


@pytest.fixture
def booking_service(
    clock: FakeClock,
    booking_repository: InMemoryBookingRepository,
    availability_service: AvailabilityService,
) -> BookingService:
    return BookingService(
        repository=booking_repository,
        availability=availability_service,
        clock=clock,
    )


@pytest.fixture
def booking_admin_service(
    clock: FakeClock,
    auth_service: AuthService,
    booking_repository: InMemoryBookingRepository,
    availability_service: AvailabilityService,
) -> BookingAdminService:
    return BookingAdminService(
        auth_service=auth_service,
        repository=booking_repository,
        availability=availability_service,
        clock=clock,
    )


@pytest.fixture
def admin_token(auth_service: AuthService) -> str:
    """Seed an admin account and return a fresh session token."""
    auth_service.seed_admin("admin@studio.test", TEST_PASSWORD)
    return auth_service.login("admin@studio.test", TEST_PASSWORD).token


@pytest.fixture
def container(
    settings: Settings,
    clock: FakeClock,
    auth_service: AuthService,
    availability_service: AvailabilityService,
    booking_service: BookingService,
    booking_admin_service: BookingAdminService,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        auth_service=auth_service,
        availability_service=availability_service,
        booking_service=booking_service,
        booking_admin_service=booking_admin_service,
        portfolio_service=PortfolioService(InMemoryPortfolioRepository()),
        gallery_service=GalleryService(InMemoryGalleryRepository()),
        package_service=PackageService(InMemoryPackageRepository()),
        client_logo_service=ClientLogoService(InMemoryClientLogoRepository()),
        site_settings_service=SiteSettingsService(InMemorySiteSettingsRepository()),
        signup_service=SignupService(InMemorySignupRepository()),
        analytics_service=AnalyticsService(InMemoryAnalyticsRepository(), clock=clock),
    )
