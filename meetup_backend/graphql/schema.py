"""GraphQL schema for the meetup backend.

Top-level Query / Mutation types. Each field picks exactly one capability
group from the resolver root in the context and converts domain errors to
structured GraphQL errors.

Usage:
    from meetup_backend.graphql.schema import create_schema
    schema = create_schema()
"""

from typing import List
import logging

import strawberry
from strawberry.types import Info

from meetup_backend.domain.meetup.core.exceptions.domain_errors import (
    MeetupDomainError,
)
from meetup_backend.graphql.context import GraphQLContext
from meetup_backend.graphql.errors import to_graphql_error
from meetup_backend.graphql.types_meetup import MeetupType, NewMeetupInput

logger = logging.getLogger(__name__)


@strawberry.type
class Query:
    @strawberry.field(description="List all meetups in creation order")  # type: ignore[misc]
    async def meetups(self, info: Info[GraphQLContext, None]) -> List[MeetupType]:
        """
        Example:
            query {
              meetups { id title location }
            }
        """
        context = info.context
        try:
            meetups = await context.resolver.query().meetups(context.token)
        except MeetupDomainError as e:
            logger.warning("meetups.failed", extra={"code": e.code, "error": e.message})
            raise to_graphql_error(e) from e

        return [MeetupType.from_domain(m) for m in meetups]


@strawberry.type
class Mutation:
    @strawberry.mutation(description="Create a meetup")  # type: ignore[misc]
    async def create_meetup(
        self,
        info: Info[GraphQLContext, None],
        input: NewMeetupInput,
    ) -> MeetupType:
        """
        Example:
            mutation {
              createMeetup(input: {title: "Go Night", location: "Online"}) {
                id title location
              }
            }
        """
        context = info.context
        try:
            meetup = await context.resolver.mutation().create_meetup(
                context.token, input.to_domain()
            )
        except MeetupDomainError as e:
            logger.warning(
                "create_meetup.failed", extra={"code": e.code, "error": e.message}
            )
            raise to_graphql_error(e) from e

        return MeetupType.from_domain(meetup)


def create_schema() -> strawberry.Schema:
    """Create Strawberry schema with the meetup resolvers."""
    return strawberry.Schema(query=Query, mutation=Mutation)
