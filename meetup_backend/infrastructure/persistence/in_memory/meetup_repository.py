"""In-memory meetup repository implementation.

Provides an in-memory implementation of the MeetupRepository port for
tests and local development. Data is lost on process restart.
"""

import asyncio
from copy import deepcopy
from typing import Dict, Iterable, List, Optional
from uuid import UUID

from meetup_backend.domain.meetup.core.entities.meetup import Meetup
from meetup_backend.domain.meetup.core.exceptions.domain_errors import StorageError


class InMemoryMeetupRepository:
    """
    In-memory implementation of MeetupRepository port.

    Writes are serialised with an asyncio.Lock; stored and returned
    meetups are deep copies so callers cannot mutate the store.

    Example:
        >>> repository = InMemoryMeetupRepository()
        >>> await repository.create(meetup)
        >>> meetups = await repository.list_all()
    """

    def __init__(self, seed: Optional[Iterable[Meetup]] = None) -> None:
        """
        Args:
            seed: Meetups to preload (e.g. fixtures)
        """
        self._storage: Dict[UUID, Meetup] = {}
        self._lock = asyncio.Lock()
        for meetup in seed or ():
            self._storage[meetup.id] = deepcopy(meetup)

    async def create(self, meetup: Meetup) -> Meetup:
        """
        Store a new meetup.

        Raises:
            StorageError: If a meetup with the same id already exists
        """
        async with self._lock:
            if meetup.id in self._storage:
                raise StorageError(f"Meetup {meetup.id} already exists")
            self._storage[meetup.id] = deepcopy(meetup)
        return deepcopy(meetup)

    async def list_all(self) -> List[Meetup]:
        """
        Return deep copies of all meetups, oldest first.

        Ties on created_at keep insertion order.
        """
        snapshot = list(self._storage.values())
        snapshot.sort(key=lambda m: m.created_at)
        return [deepcopy(m) for m in snapshot]

    def count(self) -> int:
        return len(self._storage)

    def clear(self) -> None:
        """Clear all meetups (for testing)."""
        self._storage.clear()
