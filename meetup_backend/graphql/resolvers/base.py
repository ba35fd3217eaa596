"""Capability group interfaces.

The schema layer only talks to QueryResolver / MutationResolver. A new
capability starts from the Unimplemented* classes, which fail every
operation with OperationNotImplementedError instead of crashing.
"""

from typing import List, Optional, Protocol

from meetup_backend.domain.meetup.core.entities.meetup import Meetup
from meetup_backend.domain.meetup.core.entities.new_meetup import NewMeetup
from meetup_backend.domain.meetup.core.exceptions.domain_errors import (
    OperationNotImplementedError,
)
from meetup_backend.domain.shared.cancellation import CancellationToken


class QueryResolver(Protocol):
    """Read operations."""

    async def meetups(self, token: CancellationToken) -> List[Meetup]:
        """Return all meetups."""
        ...


class MutationResolver(Protocol):
    """Write operations."""

    async def create_meetup(
        self, token: CancellationToken, new_meetup: Optional[NewMeetup]
    ) -> Meetup:
        """Create one meetup."""
        ...


class UnimplementedQueryResolver:
    """Placeholder QueryResolver: every operation is not implemented."""

    async def meetups(self, token: CancellationToken) -> List[Meetup]:
        raise OperationNotImplementedError("Meetups - meetups")


class UnimplementedMutationResolver:
    """Placeholder MutationResolver: every operation is not implemented."""

    async def create_meetup(
        self, token: CancellationToken, new_meetup: Optional[NewMeetup]
    ) -> Meetup:
        raise OperationNotImplementedError("CreateMeetup - createMeetup")
