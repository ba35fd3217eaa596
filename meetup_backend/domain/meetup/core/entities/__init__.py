"""Core entities for meetup domain."""

from .new_meetup import NewMeetup
from .meetup import Meetup

__all__ = ["NewMeetup", "Meetup"]
