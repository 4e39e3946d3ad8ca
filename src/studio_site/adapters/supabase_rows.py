"""Helpers for turning PostgREST rows and errors into domain values."""

from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

from postgrest.exceptions import APIError

UNIQUE_VIOLATION = "23505"
# PostgREST caps a single response at this many rows by default.
PAGE_SIZE = 1000


def parse_datetime(value: object) -> datetime | None:
    """Parse an ISO timestamp column, assuming UTC when no offset is given."""
    if not isinstance(value, str) or not value:
        return None
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def require_datetime(value: object) -> datetime:
    """Parse a timestamp column that must be present."""
    parsed = parse_datetime(value)
    if parsed is None:
        raise RuntimeError(f"Expected a timestamp, got {value!r}")
    return parsed


def is_unique_violation(error: APIError) -> bool:
    """Return whether a PostgREST error is a unique constraint violation."""
    return str(error.code) == UNIQUE_VIOLATION


def now_iso() -> str:
    """Current UTC time as an ISO string for updated_at columns."""
    return datetime.now(tz=UTC).isoformat()


def select_all(
    build_query: Callable[[], Any], page_size: int = PAGE_SIZE
) -> list[dict[str, object]]:
    """Fetch every row of a select by requesting consecutive ranges.

    ``build_query`` must return a fresh filtered and ordered query each time.
    Paging stops at the first page shorter than ``page_size``.
    """
    rows: list[dict[str, object]] = []
    start = 0
    while True:
        response = build_query().range(start, start + page_size - 1).execute()
        page = response.data or []
        rows.extend(page)
        if len(page) < page_size:
            return rows
        start += page_size
