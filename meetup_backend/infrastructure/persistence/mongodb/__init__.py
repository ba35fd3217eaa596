"""MongoDB persistence adapters (motor)."""

from .meetup_repository import MongoMeetupRepository

__all__ = ["MongoMeetupRepository"]
