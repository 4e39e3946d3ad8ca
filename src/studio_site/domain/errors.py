"""Domain error taxonomy mapped onto HTTP responses by the API layer."""


class StudioError(Exception):
    """Base class for expected, client-facing failures."""

    status_code = 500
    kind = "internal_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(StudioError):
    """A required field is missing or malformed."""

    status_code = 400
    kind = "validation_error"


class InvalidStatusError(ValidationError):
    """A booking status outside the known set was requested."""

    kind = "invalid_status"


class UnauthorizedError(StudioError):
    """Missing, unknown or expired credentials."""

    status_code = 401
    kind = "unauthorized"


class RegistrationClosedError(StudioError):
    """First-admin registration attempted after an admin already exists."""

    status_code = 403
    kind = "forbidden"


class NotFoundError(StudioError):
    """A referenced record does not exist."""

    status_code = 404
    kind = "not_found"


class DateUnavailableError(StudioError):
    """The requested day is blocked or already booked."""

    status_code = 409
    kind = "date_unavailable"
