"""In-memory persistence adapters."""

from .meetup_repository import InMemoryMeetupRepository

__all__ = ["InMemoryMeetupRepository"]
