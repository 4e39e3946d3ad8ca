"""Application configuration."""

import os
from datetime import timedelta
from zoneinfo import ZoneInfo

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    studio_timezone: str = "UTC"
    session_ttl_days: int = 7
    bcrypt_rounds: int = 12
    admin_email: str | None = None
    admin_password: str | None = None
    cors_allowed_origins: str | None = None
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def timezone(self) -> ZoneInfo:
        """Timezone that defines the studio's calendar days."""
        return ZoneInfo(self.studio_timezone)

    @property
    def session_ttl(self) -> timedelta:
        """Lifetime of an admin session."""
        return timedelta(days=self.session_ttl_days)

    @property
    def is_production(self) -> bool:
        """Whether detailed error messages must be hidden."""
        return self.environment == "production"


def parse_cors_origins(raw: str | None) -> list[str]:
    """Parse allowed CORS origins from env."""
    if raw is None:
        return []
    cleaned = raw.strip()
    if not cleaned:
        return []
    if cleaned == "*":
        return ["*"]
    origins: list[str] = []
    for chunk in cleaned.split(","):
        value = chunk.strip().rstrip("/")
        if value:
            origins.append(value)
    return origins
