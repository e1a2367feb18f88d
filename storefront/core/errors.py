"""Application error types mapped to HTTP status codes by the exception handlers in main."""


class AppError(Exception):
    """Base class for errors that are safe to show to the client."""

    status_code = 500
    headers: dict[str, str] | None = None

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(AppError):
    """Malformed or out-of-range input."""

    status_code = 400


class AuthenticationError(AppError):
    """Missing, invalid or expired credential."""

    status_code = 401
    headers = {"WWW-Authenticate": "Bearer"}


class AuthorizationError(AppError):
    """Valid identity without the required role or ownership."""

    status_code = 403


class NotFoundError(AppError):
    status_code = 404


class ConflictError(AppError):
    """Uniqueness violation (email or username already in use)."""

    status_code = 400


class InternalError(AppError):
    status_code = 500
