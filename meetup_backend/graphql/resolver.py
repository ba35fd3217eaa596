"""Resolver root.

Single composition point owning the long-lived collaborators. The schema
obtains its capability groups from here:

    resolver = Resolver(repository=get_meetup_repository())
    await resolver.query().meetups(token)
    await resolver.mutation().create_meetup(token, new_meetup)
"""

from meetup_backend.application.meetup.commands.create_meetup import (
    Clock,
    IdFactory,
    utc_now,
)
from meetup_backend.domain.meetup.core.value_objects.meetup_id import MeetupId
from meetup_backend.domain.shared.ports.meetup_repository import MeetupRepository
from meetup_backend.graphql.resolvers.base import MutationResolver, QueryResolver
from meetup_backend.graphql.resolvers.meetup.mutations import MeetupMutationResolver
from meetup_backend.graphql.resolvers.meetup.queries import MeetupQueryResolver


class Resolver:
    """
    Process-scoped resolver root.

    Capability groups keep a reference to this root and never replace its
    collaborators. Each accessor call returns a new group instance backed by
    the same repository.

    Attributes:
        repository: Meetup storage collaborator
        id_factory: Source of fresh meetup ids
        clock: Source of creation timestamps
    """

    def __init__(
        self,
        repository: MeetupRepository,
        id_factory: IdFactory = MeetupId.generate,
        clock: Clock = utc_now,
    ) -> None:
        self._repository = repository
        self._id_factory = id_factory
        self._clock = clock

    @property
    def repository(self) -> MeetupRepository:
        return self._repository

    @property
    def id_factory(self) -> IdFactory:
        return self._id_factory

    @property
    def clock(self) -> Clock:
        return self._clock

    def mutation(self) -> MutationResolver:
        """Return the MutationResolver bound to this root."""
        return MeetupMutationResolver(self)

    def query(self) -> QueryResolver:
        """Return the QueryResolver bound to this root."""
        return MeetupQueryResolver(self)
