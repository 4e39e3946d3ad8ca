"""Tests for configuration helpers."""

from datetime import timedelta

import pytest

from studio_site.config import Settings, parse_cors_origins


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (None, []),
        ("  ", []),
        ("*", ["*"]),
        (
            "https://studio.test/, https://admin.studio.test",
            ["https://studio.test", "https://admin.studio.test"],
        ),
    ],
)
def test_parse_cors_origins(raw, expected) -> None:
    assert parse_cors_origins(raw) == expected


def test_settings_derived_values() -> None:
    settings = Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
        studio_timezone="Europe/Berlin",
        session_ttl_days=3,
        environment="production",
    )

    assert settings.session_ttl == timedelta(days=3)
    assert settings.timezone.key == "Europe/Berlin"
    assert settings.is_production is True
