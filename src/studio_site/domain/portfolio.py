"""Domain models for portfolio albums and their photos."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class PortfolioAlbum:
    """A portfolio album shown on the portfolio page."""

    id: UUID
    title: str
    description: str
    category: str
    cover_image_url: str | None
    order_index: int
    is_published: bool
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class PortfolioPhoto:
    """A single photo inside a portfolio album."""

    id: UUID
    album_id: UUID
    image_url: str
    caption: str | None
    order_index: int
    created_at: datetime
    updated_at: datetime
