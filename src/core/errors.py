"""
Custom exceptions and error handling for the Itinerary Builder.

Defines application-specific exceptions with error codes for consistent
error handling across Lambda functions and client communication.

Usage:
    from core.errors import NotFoundError

    raise NotFoundError("Trip not found.")
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for client-facing error messages."""

    # Identity errors
    UNAUTHORIZED = "UNAUTHORIZED"
    AUTH_FAILED = "AUTH_FAILED"
    INVALID_TOKEN = "INVALID_TOKEN"

    # Request errors
    NOT_FOUND = "NOT_FOUND"
    BAD_REQUEST = "BAD_REQUEST"

    # System errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


USER_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.UNAUTHORIZED: "You must be signed in to perform this action.",
    ErrorCode.AUTH_FAILED: "Authentication failed. Please sign in again.",
    ErrorCode.INVALID_TOKEN: "Your session has expired. Please sign in again.",
    ErrorCode.NOT_FOUND: "The requested item could not be found.",
    ErrorCode.BAD_REQUEST: "Your request contains invalid information. Please check and try again.",
    ErrorCode.INTERNAL_ERROR: "An unexpected error occurred. Please try again.",
}

STATUS_CODES: dict[ErrorCode, int] = {
    ErrorCode.UNAUTHORIZED: 401,
    ErrorCode.AUTH_FAILED: 401,
    ErrorCode.INVALID_TOKEN: 401,
    ErrorCode.NOT_FOUND: 404,
    ErrorCode.BAD_REQUEST: 400,
    ErrorCode.INTERNAL_ERROR: 500,
}


class ItineraryError(Exception):
    """Base exception for all Itinerary Builder errors."""

    default_code = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str, code: ErrorCode | None = None):
        self.message = message
        self.code = code or self.default_code
        super().__init__(message)

    @property
    def user_message(self) -> str:
        return USER_MESSAGES.get(self.code, USER_MESSAGES[ErrorCode.INTERNAL_ERROR])

    @property
    def status_code(self) -> int:
        return STATUS_CODES.get(self.code, 500)


class UnauthorizedError(ItineraryError):
    """No authenticated identity is attached to the request."""

    default_code = ErrorCode.UNAUTHORIZED


class AuthenticationError(ItineraryError):
    """Token verification or user lookup failed."""

    default_code = ErrorCode.AUTH_FAILED


class NotFoundError(ItineraryError):
    """Referenced entity is absent or not owned by the caller."""

    default_code = ErrorCode.NOT_FOUND


class BadRequestError(ItineraryError):
    """Malformed input, an empty required field or a no-op update."""

    default_code = ErrorCode.BAD_REQUEST
