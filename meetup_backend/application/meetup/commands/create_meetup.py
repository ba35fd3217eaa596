"""Create meetup command and handler."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Optional
import logging

from meetup_backend.domain.meetup.core.entities.meetup import Meetup
from meetup_backend.domain.meetup.core.entities.new_meetup import NewMeetup
from meetup_backend.domain.meetup.core.exceptions.domain_errors import (
    MeetupValidationError,
)
from meetup_backend.domain.meetup.core.value_objects.meetup_id import MeetupId
from meetup_backend.domain.shared.cancellation import CancellationToken
from meetup_backend.domain.shared.ports.meetup_repository import MeetupRepository

logger = logging.getLogger(__name__)

IdFactory = Callable[[], MeetupId]
Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Default clock: timezone-aware UTC now."""
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class CreateMeetupCommand:
    """
    Command: Create one meetup.

    Attributes:
        input: Caller-supplied NewMeetup (None is rejected)
    """
    input: Optional[NewMeetup]


class CreateMeetupCommandHandler:
    """Handler for CreateMeetupCommand."""

    def __init__(
        self,
        repository: MeetupRepository,
        id_factory: IdFactory = MeetupId.generate,
        clock: Clock = utc_now,
    ):
        """
        Initialize handler.

        Args:
            repository: Meetup repository port
            id_factory: Source of fresh meetup ids
            clock: Source of creation timestamps
        """
        self._repository = repository
        self._id_factory = id_factory
        self._clock = clock

    async def handle(
        self, command: CreateMeetupCommand, token: CancellationToken
    ) -> Meetup:
        """
        Execute create command.

        Flow:
        1. Check the token
        2. Validate input
        3. Build Meetup with fresh id and creation timestamp
        4. Persist through the repository (guarded by the token)

        Args:
            command: CreateMeetupCommand
            token: Request cancellation token

        Returns:
            The stored Meetup

        Raises:
            MeetupValidationError: If input is missing or malformed
            StorageError: If persistence fails
            RequestCancelledError: If the request was cancelled
        """
        token.raise_if_cancelled()

        if command.input is None:
            raise MeetupValidationError("input is required", field="input")
        command.input.validate()

        meetup = Meetup.create(
            command.input,
            meetup_id=self._id_factory(),
            created_at=self._clock(),
        )

        stored = await token.guard(self._repository.create(meetup))

        logger.info(
            "meetup.created",
            extra={"meetup_id": str(stored.id), "title": stored.title},
        )
        return stored
