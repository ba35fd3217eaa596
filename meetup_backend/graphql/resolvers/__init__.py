"""Capability groups (Query / Mutation) bound to the resolver root."""

from meetup_backend.graphql.resolvers.base import (
    MutationResolver,
    QueryResolver,
    UnimplementedMutationResolver,
    UnimplementedQueryResolver,
)
from meetup_backend.graphql.resolvers.meetup.mutations import MeetupMutationResolver
from meetup_backend.graphql.resolvers.meetup.queries import MeetupQueryResolver

__all__ = [
    "QueryResolver",
    "MutationResolver",
    "UnimplementedQueryResolver",
    "UnimplementedMutationResolver",
    "MeetupQueryResolver",
    "MeetupMutationResolver",
]
