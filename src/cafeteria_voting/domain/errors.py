"""Error taxonomy shared by services and the API layer."""


class CafeteriaVotingError(Exception):
    """Base class for expected, user-facing failures."""

    default_message = "Request failed"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class BadRequestError(CafeteriaVotingError):
    default_message = "Invalid request"


class UnauthorizedError(CafeteriaVotingError):
    default_message = "Invalid credentials"


class ForbiddenError(CafeteriaVotingError):
    default_message = "Access denied"


class NotFoundError(CafeteriaVotingError):
    default_message = "Not found"


class ConflictError(CafeteriaVotingError):
    default_message = "Conflict"


class AlreadyVotedError(ConflictError):
    default_message = "Already voted in this session"


class RateLimitedError(CafeteriaVotingError):
    default_message = "Too many login attempts. Please try again in 15 minutes."


class StorageError(CafeteriaVotingError):
    """Raised when the document cannot be written to disk."""

    default_message = "Failed to persist data"
