"""Supabase repository for keyed site settings."""

from dataclasses import dataclass

from supabase import Client

from studio_site.adapters.supabase_rows import now_iso
from studio_site.domain.content import HeroSettings
from studio_site.services.site_settings import SiteSettingsRepository

_HERO_KEY = "hero"


@dataclass
class SupabaseSiteSettingsRepository(SiteSettingsRepository):
    """Supabase-backed site settings, one row per key."""

    client: Client

    def get_hero(self) -> HeroSettings | None:
        """Return the hero row, if present."""
        response = (
            self.client.table("site_settings")
            .select("mp4_url, webm_url, poster_url")
            .eq("key", _HERO_KEY)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        return HeroSettings(
            mp4_url=row.get("mp4_url"),
            webm_url=row.get("webm_url"),
            poster_url=row.get("poster_url"),
        )

    def save_hero(self, hero: HeroSettings) -> None:
        """Insert or replace the hero row."""
        self.client.table("site_settings").upsert(
            {
                "key": _HERO_KEY,
                "mp4_url": hero.mp4_url,
                "webm_url": hero.webm_url,
                "poster_url": hero.poster_url,
                "updated_at": now_iso(),
            },
            on_conflict="key",
        ).execute()
