"""Service for site-wide settings such as the hero video."""

from dataclasses import dataclass
from typing import Protocol

from studio_site.domain.content import HeroSettings


class SiteSettingsRepository(Protocol):
    """Persistence interface for keyed site settings."""

    def get_hero(self) -> HeroSettings | None:
        """Return the stored hero settings, if any."""

    def save_hero(self, hero: HeroSettings) -> None:
        """Insert or replace the hero settings."""


@dataclass
class SiteSettingsService:
    """Reads and replaces the landing page hero settings."""

    repository: SiteSettingsRepository

    def get_hero(self) -> HeroSettings:
        """Return hero settings, empty when never configured."""
        return self.repository.get_hero() or HeroSettings()

    def set_hero(
        self,
        mp4_url: str | None = None,
        webm_url: str | None = None,
        poster_url: str | None = None,
    ) -> HeroSettings:
        """Replace the hero settings."""
        hero = HeroSettings(
            mp4_url=mp4_url or None,
            webm_url=webm_url or None,
            poster_url=poster_url or None,
        )
        self.repository.save_hero(hero)
        return hero
