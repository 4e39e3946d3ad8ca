"""Domain models for admin accounts and their sessions."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class AdminRecord:
    """Represents an admin account stored in the database."""

    id: UUID
    email: str
    password_hash: str
    created_at: datetime | None = None


@dataclass(frozen=True)
class AdminSession:
    """Represents a persisted admin session."""

    id: UUID
    admin_id: UUID
    token: str
    created_at: datetime
    expires_at: datetime


@dataclass(frozen=True)
class AdminIdentity:
    """The authenticated admin behind a valid session token."""

    id: UUID
    email: str
    token: str


@dataclass(frozen=True)
class IssuedSession:
    """A freshly created session handed back to the client."""

    token: str
    expires_at: datetime
    admin: AdminIdentity
