"""Value objects for meetup domain."""

from .meetup_id import MeetupId

__all__ = ["MeetupId"]
