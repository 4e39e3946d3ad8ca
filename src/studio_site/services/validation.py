"""Input checks shared by the application services."""

from studio_site.domain.errors import ValidationError


def clean_text(value: object) -> str:
    """Return a stripped string, or an empty string for non-strings."""
    if not isinstance(value, str):
        return ""
    return value.strip()


def require_fields(payload: dict[str, object], *names: str) -> None:
    """Ensure every named field is present and not blank."""
    missing = [name for name in names if _is_blank(payload.get(name))]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")


def reject_blank(payload: dict[str, object], *names: str) -> None:
    """Ensure a partial update does not blank or null out the named fields."""
    blanked = [name for name in names if name in payload and _is_blank(payload[name])]
    if blanked:
        raise ValidationError(f"Fields cannot be empty: {', '.join(blanked)}")


def _is_blank(value: object) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False
