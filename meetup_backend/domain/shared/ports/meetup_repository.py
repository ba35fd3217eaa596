"""Meetup repository port (interface).

Defines contract for meetup persistence operations.
The domain defines the port, infrastructure provides the implementation.
"""

from typing import List, Protocol

from meetup_backend.domain.meetup.core.entities.meetup import Meetup


class MeetupRepository(Protocol):
    """
    Interface for meetup persistence operations.

    Implementations:
    - InMemoryMeetupRepository (tests, local development)
    - MongoMeetupRepository (production)

    Implementations own their concurrency control and must raise
    StorageError (never a driver-specific exception) on failure.
    """

    async def create(self, meetup: Meetup) -> Meetup:
        """
        Persist a new meetup atomically.

        Args:
            meetup: Fully populated Meetup with a fresh id

        Returns:
            The stored Meetup

        Raises:
            StorageError: If persistence fails (nothing is stored)
        """
        ...

    async def list_all(self) -> List[Meetup]:
        """
        Return every stored meetup in creation order.

        Returns:
            List of meetups (empty list for an empty store)

        Raises:
            StorageError: If the store cannot be read
        """
        ...
