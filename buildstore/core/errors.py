"""
Domain errors raised by services and rendered by the API exception handlers.
"""

from fastapi import status


class AppError(Exception):
    """Base error carrying the message and HTTP status sent to the client."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class NotFoundError(AppError):
    """A referenced row (e.g. the item's category) does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class UnauthorizedError(AppError):
    """Unknown username or wrong password."""

    status_code = status.HTTP_401_UNAUTHORIZED


class StoreError(AppError):
    """Any query or constraint failure, collapsed into a generic message."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
