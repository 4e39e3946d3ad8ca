"""Tests for admin authentication and sessions."""

from datetime import timedelta

import pytest

from studio_site.domain.errors import (
    RegistrationClosedError,
    UnauthorizedError,
    ValidationError,
)
from studio_site.services.auth import hash_password, verify_password
from tests.conftest import TEST_PASSWORD


def test_login_issues_session_with_ttl(auth_service, clock) -> None:
    auth_service.seed_admin("Admin@Studio.test", TEST_PASSWORD)

    issued = auth_service.login("admin@studio.test ", TEST_PASSWORD)

    assert issued.admin.email == "admin@studio.test"
    assert issued.expires_at == clock.now + timedelta(days=7)
    assert len(issued.token) >= 32
    assert auth_service.validate_session(issued.token).id == issued.admin.id


def test_wrong_password_creates_no_session(
    auth_service, session_repository
) -> None:
    auth_service.seed_admin("admin@studio.test", TEST_PASSWORD)

    with pytest.raises(UnauthorizedError):
        auth_service.login("admin@studio.test", "wrong-password")

    assert session_repository.sessions == {}


def test_unknown_email_is_unauthorized(auth_service) -> None:
    with pytest.raises(UnauthorizedError):
        auth_service.login("nobody@studio.test", TEST_PASSWORD)


def test_login_requires_credentials(auth_service) -> None:
    with pytest.raises(ValidationError):
        auth_service.login("  ", "")


def test_session_expires_at_exact_expiry(auth_service, admin_token, clock) -> None:
    clock.advance(timedelta(days=7) - timedelta(milliseconds=1))
    assert auth_service.validate_session(admin_token).email == "admin@studio.test"

    clock.advance(timedelta(milliseconds=1))
    with pytest.raises(UnauthorizedError):
        auth_service.validate_session(admin_token)

    clock.advance(timedelta(days=30))
    with pytest.raises(UnauthorizedError):
        auth_service.validate_session(admin_token)


def test_missing_and_unknown_tokens_are_rejected(auth_service) -> None:
    with pytest.raises(UnauthorizedError, match="No token provided"):
        auth_service.validate_session(None)
    with pytest.raises(UnauthorizedError, match="Invalid or expired token"):
        auth_service.validate_session("not-a-token")


def test_login_purges_expired_sessions(
    auth_service, admin_token, clock, session_repository
) -> None:
    clock.advance(timedelta(days=8))

    fresh = auth_service.login("admin@studio.test", TEST_PASSWORD)

    assert list(session_repository.sessions) == [fresh.token]


def test_revoke_session(auth_service, admin_token) -> None:
    auth_service.revoke_session(admin_token)

    with pytest.raises(UnauthorizedError):
        auth_service.validate_session(admin_token)


def test_change_password_revokes_every_session(auth_service, admin_token) -> None:
    other = auth_service.login("admin@studio.test", TEST_PASSWORD).token

    auth_service.change_password(admin_token, TEST_PASSWORD, "brand-new-secret")

    for token in (admin_token, other):
        with pytest.raises(UnauthorizedError):
            auth_service.validate_session(token)
    assert auth_service.login("admin@studio.test", "brand-new-secret").token


def test_change_password_checks_current_password(auth_service, admin_token) -> None:
    with pytest.raises(UnauthorizedError, match="Current password is incorrect"):
        auth_service.change_password(admin_token, "wrong-password", "brand-new")

    assert auth_service.validate_session(admin_token)


def test_change_password_enforces_minimum_length(auth_service, admin_token) -> None:
    with pytest.raises(ValidationError):
        auth_service.change_password(admin_token, TEST_PASSWORD, "short")


def test_first_admin_registration_closes_after_first_account(auth_service) -> None:
    issued = auth_service.register_first_admin("owner@studio.test", TEST_PASSWORD)
    assert auth_service.validate_session(issued.token).email == "owner@studio.test"

    with pytest.raises(RegistrationClosedError):
        auth_service.register_first_admin("second@studio.test", TEST_PASSWORD)


def test_first_admin_registration_loses_to_a_concurrent_claim(
    auth_service, admin_repository
) -> None:
    # Another request has claimed registration but not yet inserted its admin.
    admin_repository.registration_claimed = True

    with pytest.raises(RegistrationClosedError):
        auth_service.register_first_admin("late@studio.test", TEST_PASSWORD)
    assert admin_repository.admins == {}


def test_invalid_first_admin_does_not_use_up_the_claim(
    auth_service, admin_repository
) -> None:
    with pytest.raises(ValidationError):
        auth_service.register_first_admin("owner@studio.test", "short")

    assert admin_repository.registration_claimed is False


def test_seed_admin_is_idempotent(auth_service, admin_repository) -> None:
    first = auth_service.seed_admin("admin@studio.test", TEST_PASSWORD)
    second = auth_service.seed_admin("admin@studio.test", "another-password")

    assert first.id == second.id
    assert len(admin_repository.admins) == 1


def test_password_hashing_roundtrip() -> None:
    hashed = hash_password(TEST_PASSWORD, rounds=4)

    assert hashed != TEST_PASSWORD
    assert verify_password(TEST_PASSWORD, hashed)
    assert not verify_password("nope", hashed)
    assert not verify_password(TEST_PASSWORD, "not-a-bcrypt-hash")


def test_logout_requires_live_session(auth_service, admin_token) -> None:
    assert auth_service.me(admin_token).email == "admin@studio.test"

    auth_service.logout(admin_token)

    with pytest.raises(UnauthorizedError):
        auth_service.logout(admin_token)
