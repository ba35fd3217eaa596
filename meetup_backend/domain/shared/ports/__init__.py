"""Domain ports (interfaces for infrastructure adapters)."""

from meetup_backend.domain.shared.ports.meetup_repository import MeetupRepository

__all__ = ["MeetupRepository"]
