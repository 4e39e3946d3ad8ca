"""Admin authentication and the session store."""

import logging
import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Protocol
from uuid import UUID

import bcrypt

from studio_site.domain.auth import (
    AdminIdentity,
    AdminRecord,
    AdminSession,
    IssuedSession,
)
from studio_site.domain.errors import (
    NotFoundError,
    RegistrationClosedError,
    UnauthorizedError,
    ValidationError,
)
from studio_site.services.clock import Clock, utc_now

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6
_BCRYPT_MAX_BYTES = 72


class AdminRepository(Protocol):
    """Persistence interface for admin accounts."""

    def get_by_email(self, email: str) -> AdminRecord | None:
        """Return the admin with this email, if present."""

    def get_by_id(self, admin_id: UUID) -> AdminRecord | None:
        """Return the admin by id, if present."""

    def has_any_admin(self) -> bool:
        """Return whether at least one admin exists."""

    def create_admin(self, email: str, password_hash: str) -> AdminRecord:
        """Create an admin account and return it."""

    def claim_first_registration(self) -> bool:
        """Take the one-time first-admin claim; False if already taken."""

    def update_password(self, admin_id: UUID, password_hash: str) -> None:
        """Replace the stored password hash."""


class SessionRepository(Protocol):
    """Persistence interface for admin sessions."""

    def create_session(
        self,
        admin_id: UUID,
        token: str,
        created_at: datetime,
        expires_at: datetime,
    ) -> AdminSession:
        """Create a session row and return it."""

    def get_by_token(self, token: str) -> AdminSession | None:
        """Return the session for a token, if present."""

    def delete_by_token(self, token: str) -> None:
        """Delete the session for a token, if present."""

    def delete_for_admin(self, admin_id: UUID) -> None:
        """Delete every session owned by an admin."""

    def delete_expired(self, now: datetime) -> None:
        """Delete sessions whose expiry has passed."""


def hash_password(password: str, rounds: int = 12) -> str:
    """Hash a password with bcrypt."""
    encoded = password.encode("utf-8")
    if len(encoded) > _BCRYPT_MAX_BYTES:
        raise ValidationError("Password must be at most 72 bytes")
    return bcrypt.hashpw(encoded, bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a password against a bcrypt hash."""
    encoded = password.encode("utf-8")
    if len(encoded) > _BCRYPT_MAX_BYTES:
        return False
    try:
        return bcrypt.checkpw(encoded, password_hash.encode("utf-8"))
    except ValueError:
        return False


def normalize_email(email: str) -> str:
    """Normalize an email address for lookups."""
    return email.strip().lower()


@dataclass
class AuthService:
    """Logs admins in and validates their session tokens."""

    admin_repository: AdminRepository
    session_repository: SessionRepository
    session_ttl: timedelta = timedelta(days=7)
    bcrypt_rounds: int = 12
    clock: Clock = utc_now

    def login(self, email: str, password: str) -> IssuedSession:
        """Verify credentials and open a new session."""
        if not email or not email.strip() or not password:
            raise ValidationError("Email and password are required")
        admin = self.admin_repository.get_by_email(normalize_email(email))
        if admin is None or not verify_password(password, admin.password_hash):
            logger.info("Rejected admin login", extra={"email": normalize_email(email)})
            raise UnauthorizedError("Invalid credentials")
        self.session_repository.delete_expired(self.clock())
        issued = self.create_session(admin)
        logger.info("Admin logged in", extra={"admin_id": str(admin.id)})
        return issued

    def create_session(self, admin: AdminRecord) -> IssuedSession:
        """Issue a random opaque token for an admin."""
        now = self.clock()
        session = self.session_repository.create_session(
            admin_id=admin.id,
            token=secrets.token_urlsafe(32),
            created_at=now,
            expires_at=now + self.session_ttl,
        )
        return IssuedSession(
            token=session.token,
            expires_at=session.expires_at,
            admin=AdminIdentity(id=admin.id, email=admin.email, token=session.token),
        )

    def validate_session(self, token: str | None) -> AdminIdentity:
        """Return the admin behind a token or raise UnauthorizedError.

        Expiry is checked inline on every call and never extended.
        """
        if not token:
            raise UnauthorizedError("No token provided")
        session = self.session_repository.get_by_token(token)
        if session is None or session.expires_at <= self.clock():
            raise UnauthorizedError("Invalid or expired token")
        admin = self.admin_repository.get_by_id(session.admin_id)
        if admin is None:
            raise UnauthorizedError("Invalid or expired token")
        return AdminIdentity(id=admin.id, email=admin.email, token=token)

    def me(self, token: str | None) -> AdminIdentity:
        """Return the admin behind a token."""
        return self.validate_session(token)

    def logout(self, token: str | None) -> None:
        """End the session behind a valid token."""
        identity = self.validate_session(token)
        self.revoke_session(identity.token)
        logger.info("Admin logged out", extra={"admin_id": str(identity.id)})

    def revoke_session(self, token: str) -> None:
        """Delete a session; unknown tokens are ignored."""
        self.session_repository.delete_by_token(token)

    def revoke_all_sessions(self, admin_id: UUID) -> None:
        """Delete every session of an admin."""
        self.session_repository.delete_for_admin(admin_id)

    def change_password(
        self, token: str | None, current_password: str, new_password: str
    ) -> None:
        """Change the password and force every session to log in again."""
        identity = self.validate_session(token)
        if not current_password or not new_password:
            raise ValidationError("Current and new passwords are required")
        if len(new_password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f"New password must be at least {MIN_PASSWORD_LENGTH} characters"
            )
        admin = self.admin_repository.get_by_id(identity.id)
        if admin is None:
            raise NotFoundError("Admin not found")
        if not verify_password(current_password, admin.password_hash):
            raise UnauthorizedError("Current password is incorrect")
        self.admin_repository.update_password(
            admin.id, hash_password(new_password, self.bcrypt_rounds)
        )
        self.revoke_all_sessions(admin.id)
        logger.info("Admin password changed", extra={"admin_id": str(admin.id)})

    def register_first_admin(self, email: str, password: str) -> IssuedSession:
        """Create the very first admin; closed once any admin exists."""
        if self.admin_repository.has_any_admin():
            raise RegistrationClosedError("Registration closed")
        cleaned = _check_credentials(email, password)
        if not self.admin_repository.claim_first_registration():
            raise RegistrationClosedError("Registration closed")
        admin = self.admin_repository.create_admin(
            cleaned, hash_password(password, self.bcrypt_rounds)
        )
        logger.info("First admin registered", extra={"admin_id": str(admin.id)})
        return self.create_session(admin)

    def seed_admin(self, email: str, password: str) -> AdminRecord:
        """Ensure an admin with this email exists."""
        existing = self.admin_repository.get_by_email(normalize_email(email))
        if existing:
            return existing
        admin = self._create_admin(email, password)
        logger.info("Seeded admin account", extra={"admin_id": str(admin.id)})
        return admin

    def _create_admin(self, email: str, password: str) -> AdminRecord:
        cleaned = _check_credentials(email, password)
        return self.admin_repository.create_admin(
            cleaned, hash_password(password, self.bcrypt_rounds)
        )


def _check_credentials(email: str, password: str) -> str:
    cleaned = normalize_email(email or "")
    if not cleaned or "@" not in cleaned:
        raise ValidationError("A valid email is required")
    if not password or len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
        )
    return cleaned
