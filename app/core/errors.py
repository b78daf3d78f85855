"""Domain errors raised by services and interceptors, rendered as {"error": message}."""

from fastapi import status


class ApiError(Exception):
    """Base error carrying an HTTP status and a client-safe message."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class BadRequestError(ApiError):
    """Malformed or missing input."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "bad request"


class UnauthenticatedError(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "token not found"


class InvalidTokenError(ApiError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "invalid or expired token"


class ForbiddenError(ApiError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "insufficient privilege"


class NotFoundError(ApiError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "not found"


class ConflictError(ApiError):
    """Uniqueness violation reported by the store."""

    status_code = status.HTTP_409_CONFLICT
    default_message = "already exists"
