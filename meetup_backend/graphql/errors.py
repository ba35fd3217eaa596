"""Mapping of domain errors to GraphQL errors."""

from typing import Any, Dict

from graphql import GraphQLError

from meetup_backend.domain.meetup.core.exceptions.domain_errors import (
    MeetupDomainError,
    MeetupValidationError,
)


def to_graphql_error(error: MeetupDomainError) -> GraphQLError:
    """Wrap a domain error, exposing its code as ``extensions.code``.

    The message and the original exception are kept unchanged.

    Example:
        {"message": "title is required",
         "extensions": {"code": "VALIDATION_ERROR", "field": "title"}}
    """
    extensions: Dict[str, Any] = {"code": error.code}
    if isinstance(error, MeetupValidationError) and error.field:
        extensions["field"] = error.field
    return GraphQLError(error.message, original_error=error, extensions=extensions)
