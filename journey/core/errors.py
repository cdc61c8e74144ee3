"""
Domain exceptions for the Journey API.

Services raise these; the routers never build error responses themselves.
A single exception handler in ``journey.main`` maps each ``ErrorCode`` to an
HTTP status and returns ``user_message`` so internal details stay internal.

Usage:
    from journey.core.errors import NotFoundError, ErrorCode

    raise NotFoundError("trip 42 not found", code=ErrorCode.TRIP_NOT_FOUND)
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for client-facing error messages."""

    # Lookup errors
    TRIP_NOT_FOUND = "TRIP_NOT_FOUND"
    PARTICIPANT_NOT_FOUND = "PARTICIPANT_NOT_FOUND"

    # State machine errors
    PARTICIPANT_ALREADY_CONFIRMED = "PARTICIPANT_ALREADY_CONFIRMED"

    # Validation errors
    INVALID_EMAIL = "INVALID_EMAIL"
    INVALID_URL = "INVALID_URL"
    INVALID_DATE_RANGE = "INVALID_DATE_RANGE"
    ACTIVITY_OUTSIDE_TRIP = "ACTIVITY_OUTSIDE_TRIP"
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Persistence errors
    TRANSACTION_FAILED = "TRANSACTION_FAILED"

    # Mail errors
    NOTIFICATION_FAILED = "NOTIFICATION_FAILED"

    # System errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


USER_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.TRIP_NOT_FOUND: "trip not found",
    ErrorCode.PARTICIPANT_NOT_FOUND: "participant not found",
    ErrorCode.PARTICIPANT_ALREADY_CONFIRMED: "participant already confirmed",
    ErrorCode.INVALID_EMAIL: "invalid input: one or more e-mail addresses are malformed",
    ErrorCode.INVALID_URL: "invalid input: url must be an absolute http(s) address",
    ErrorCode.INVALID_DATE_RANGE: "invalid input: ends_at must not be earlier than starts_at",
    ErrorCode.ACTIVITY_OUTSIDE_TRIP: "invalid input: activity must occur within the trip dates",
    ErrorCode.VALIDATION_ERROR: "invalid input",
    ErrorCode.TRANSACTION_FAILED: "something went wrong, try again",
    ErrorCode.NOTIFICATION_FAILED: "failed to send e-mail",
    ErrorCode.INTERNAL_ERROR: "something went wrong, try again",
}


class JourneyError(Exception):
    """Base exception for all Journey errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INTERNAL_ERROR):
        self.message = message
        self.code = code
        super().__init__(message)

    @property
    def user_message(self) -> str:
        return USER_MESSAGES.get(self.code, USER_MESSAGES[ErrorCode.INTERNAL_ERROR])


class NotFoundError(JourneyError):
    """A trip or participant does not exist."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.TRIP_NOT_FOUND):
        super().__init__(message, code)


class AlreadyConfirmedError(JourneyError):
    """The participant was confirmed before. Terminal, not a system failure."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.PARTICIPANT_ALREADY_CONFIRMED):
        super().__init__(message, code)


class ValidationFailedError(JourneyError):
    """Malformed e-mail, url or date range."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.VALIDATION_ERROR):
        super().__init__(message, code)


class TransactionFailedError(JourneyError):
    """A unit of work could not be committed and was rolled back."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.TRANSACTION_FAILED):
        super().__init__(message, code)


class NotificationFailedError(JourneyError):
    """E-mail delivery failed. Logged by the dispatcher, never raised to callers."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.NOTIFICATION_FAILED):
        super().__init__(message, code)
