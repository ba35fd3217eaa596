"""Domain exceptions for the Meetup bounded context."""

from meetup_backend.domain.meetup.core.exceptions.domain_errors import (
    MeetupDomainError,
    MeetupValidationError,
    OperationNotImplementedError,
    RequestCancelledError,
    StorageError,
)

__all__ = [
    "MeetupDomainError",
    "MeetupValidationError",
    "StorageError",
    "RequestCancelledError",
    "OperationNotImplementedError",
]
