"""Meetup mutation resolvers."""

from typing import Optional, TYPE_CHECKING

from meetup_backend.application.meetup.commands.create_meetup import (
    CreateMeetupCommand,
    CreateMeetupCommandHandler,
)
from meetup_backend.domain.meetup.core.entities.meetup import Meetup
from meetup_backend.domain.meetup.core.entities.new_meetup import NewMeetup
from meetup_backend.domain.shared.cancellation import CancellationToken
from meetup_backend.graphql.resolvers.base import UnimplementedMutationResolver

if TYPE_CHECKING:
    from meetup_backend.graphql.resolver import Resolver


class MeetupMutationResolver(UnimplementedMutationResolver):
    """MutationResolver backed by the root's repository, id factory and clock."""

    def __init__(self, root: "Resolver") -> None:
        self._root = root

    async def create_meetup(
        self, token: CancellationToken, new_meetup: Optional[NewMeetup]
    ) -> Meetup:
        """Create a meetup.

        Args:
            token: Request cancellation token
            new_meetup: Creation input

        Returns:
            The stored Meetup with its fresh id

        Raises:
            MeetupValidationError: If input is missing or malformed
            StorageError: If the repository fails
            RequestCancelledError: If the request was cancelled
        """
        handler = CreateMeetupCommandHandler(
            repository=self._root.repository,
            id_factory=self._root.id_factory,
            clock=self._root.clock,
        )
        return await handler.handle(CreateMeetupCommand(input=new_meetup), token)
