"""Meetup query resolvers."""

from typing import List, TYPE_CHECKING

from meetup_backend.application.meetup.queries.list_meetups import (
    ListMeetupsQuery,
    ListMeetupsQueryHandler,
)
from meetup_backend.domain.meetup.core.entities.meetup import Meetup
from meetup_backend.domain.shared.cancellation import CancellationToken
from meetup_backend.graphql.resolvers.base import UnimplementedQueryResolver

if TYPE_CHECKING:
    from meetup_backend.graphql.resolver import Resolver


class MeetupQueryResolver(UnimplementedQueryResolver):
    """QueryResolver backed by the root's repository."""

    def __init__(self, root: "Resolver") -> None:
        self._root = root

    async def meetups(self, token: CancellationToken) -> List[Meetup]:
        """List all meetups.

        Args:
            token: Request cancellation token

        Returns:
            All meetups in creation order

        Raises:
            StorageError: If the repository fails
            RequestCancelledError: If the request was cancelled
        """
        handler = ListMeetupsQueryHandler(repository=self._root.repository)
        return await handler.handle(ListMeetupsQuery(), token)
