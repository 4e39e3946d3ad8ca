"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from studio_site.adapters.supabase_admin_repository import SupabaseAdminRepository
from studio_site.adapters.supabase_blocked_day_repository import (
    SupabaseBlockedDayRepository,
)
from studio_site.adapters.supabase_booking_repository import SupabaseBookingRepository
from studio_site.adapters.supabase_client_logo_repository import (
    SupabaseClientLogoRepository,
)
from studio_site.adapters.supabase_engagement_repository import (
    SupabaseAnalyticsRepository,
    SupabaseSignupRepository,
)
from studio_site.adapters.supabase_gallery_repository import SupabaseGalleryRepository
from studio_site.adapters.supabase_package_repository import SupabasePackageRepository
from studio_site.adapters.supabase_portfolio_repository import (
    SupabasePortfolioRepository,
)
from studio_site.adapters.supabase_session_repository import (
    SupabaseSessionRepository,
)
from studio_site.adapters.supabase_site_settings_repository import (
    SupabaseSiteSettingsRepository,
)
from studio_site.config import Settings
from studio_site.services.auth import AuthService
from studio_site.services.availability import AvailabilityService
from studio_site.services.booking_admin import BookingAdminService
from studio_site.services.bookings import BookingService
from studio_site.services.content import (
    ClientLogoService,
    GalleryService,
    PackageService,
)
from studio_site.services.engagement import AnalyticsService, SignupService
from studio_site.services.portfolio import PortfolioService
from studio_site.services.site_settings import SiteSettingsService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    auth_service: AuthService
    availability_service: AvailabilityService
    booking_service: BookingService
    booking_admin_service: BookingAdminService
    portfolio_service: PortfolioService
    gallery_service: GalleryService
    package_service: PackageService
    client_logo_service: ClientLogoService
    site_settings_service: SiteSettingsService
    signup_service: SignupService
    analytics_service: AnalyticsService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    booking_repository = SupabaseBookingRepository(supabase_client)
    auth_service = AuthService(
        admin_repository=SupabaseAdminRepository(supabase_client),
        session_repository=SupabaseSessionRepository(supabase_client),
        session_ttl=resolved_settings.session_ttl,
        bcrypt_rounds=resolved_settings.bcrypt_rounds,
    )
    availability_service = AvailabilityService(
        blocked_days=SupabaseBlockedDayRepository(supabase_client),
        booked_days=booking_repository,
        timezone=resolved_settings.timezone,
    )
    booking_service = BookingService(
        repository=booking_repository,
        availability=availability_service,
    )
    booking_admin_service = BookingAdminService(
        auth_service=auth_service,
        repository=booking_repository,
        availability=availability_service,
    )

    return AppContainer(
        settings=resolved_settings,
        auth_service=auth_service,
        availability_service=availability_service,
        booking_service=booking_service,
        booking_admin_service=booking_admin_service,
        portfolio_service=PortfolioService(
            SupabasePortfolioRepository(supabase_client)
        ),
        gallery_service=GalleryService(SupabaseGalleryRepository(supabase_client)),
        package_service=PackageService(SupabasePackageRepository(supabase_client)),
        client_logo_service=ClientLogoService(
            SupabaseClientLogoRepository(supabase_client)
        ),
        site_settings_service=SiteSettingsService(
            SupabaseSiteSettingsRepository(supabase_client)
        ),
        signup_service=SignupService(SupabaseSignupRepository(supabase_client)),
        analytics_service=AnalyticsService(
            SupabaseAnalyticsRepository(supabase_client)
        ),
    )
