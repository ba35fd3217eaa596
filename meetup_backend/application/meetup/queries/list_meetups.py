"""List meetups query - every stored meetup."""

from dataclasses import dataclass
from typing import List
import logging

from meetup_backend.domain.meetup.core.entities.meetup import Meetup
from meetup_backend.domain.shared.cancellation import CancellationToken
from meetup_backend.domain.shared.ports.meetup_repository import MeetupRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ListMeetupsQuery:
    """
    Query: List all meetups in creation order.

    No filters or pagination.
    """


class ListMeetupsQueryHandler:
    """Handler for ListMeetupsQuery."""

    def __init__(self, repository: MeetupRepository):
        self._repository = repository

    async def handle(
        self, query: ListMeetupsQuery, token: CancellationToken
    ) -> List[Meetup]:
        """
        Execute query.

        Args:
            query: ListMeetupsQuery
            token: Request cancellation token

        Returns:
            All meetups, oldest first (empty list for an empty store)

        Raises:
            StorageError: If the store cannot be read
            RequestCancelledError: If the request was cancelled
        """
        token.raise_if_cancelled()

        meetups = await token.guard(self._repository.list_all())

        logger.debug("meetups.listed", extra={"count": len(meetups)})
        return meetups
