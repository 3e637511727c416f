"""
Service Errors

Services raise these instead of HTTPException so they stay independent of
the HTTP layer. main.create_app() registers a single handler that turns
any ServiceError into a JSON response:

    {"detail": "<message>"}

with the status code carried by the error class.
"""

from fastapi import status


class ServiceError(Exception):
    """Base class for expected, caller-facing failures."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    headers: dict[str, str] | None = None

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class BadRequestError(ServiceError):
    """Malformed input, e.g. an id that is not a valid ObjectId."""

    status_code = status.HTTP_400_BAD_REQUEST


class UnauthorizedError(ServiceError):
    """Bad credentials or a missing, invalid or expired bearer token."""

    status_code = status.HTTP_401_UNAUTHORIZED
    headers = {"WWW-Authenticate": "Bearer"}


class NotFoundError(ServiceError):
    """No document exists for a well-formed id."""

    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(ServiceError):
    """A unique constraint was violated (duplicate email)."""

    status_code = status.HTTP_409_CONFLICT
