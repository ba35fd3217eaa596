"""Domain exceptions for the Meetup bounded context.

All domain exceptions inherit from MeetupDomainError and carry a stable
``code`` that the GraphQL layer exposes as ``extensions.code``.
"""

from typing import Optional


class MeetupDomainError(Exception):
    """Base exception for meetup domain.

    Allows the presentation layer to catch and report all meetup
    errors uniformly.
    """

    code = "DOMAIN_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MeetupValidationError(MeetupDomainError):
    """Raised when a NewMeetup input is missing or malformed.

    Examples:
    - Blank title
    - Title longer than the allowed maximum
    - Naive (timezone-less) start datetime
    """

    code = "VALIDATION_ERROR"

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field


class StorageError(MeetupDomainError):
    """Raised when the storage collaborator fails.

    Never retried by the resolvers; the original exception is kept
    on ``original_error``.
    """

    code = "STORAGE_ERROR"

    def __init__(self, message: str, original_error: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.original_error = original_error


class RequestCancelledError(MeetupDomainError):
    """Raised when the request was cancelled or its deadline expired."""

    code = "CANCELLED"


class OperationNotImplementedError(MeetupDomainError):
    """Raised by a capability that has no real implementation yet."""

    code = "NOT_IMPLEMENTED"

    def __init__(self, operation: str) -> None:
        super().__init__(f"not implemented: {operation}")
        self.operation = operation
