"""GraphQL types for the meetup domain."""

from datetime import datetime
from typing import Optional

import strawberry

from meetup_backend.domain.meetup.core.entities.meetup import Meetup
from meetup_backend.domain.meetup.core.entities.new_meetup import NewMeetup

__all__ = ["MeetupType", "NewMeetupInput"]


@strawberry.type(name="Meetup", description="A meetup event")
class MeetupType:
    """Meetup GraphQL type.

    Examples:
        query {
          meetups { id title location startsAt createdAt }
        }
    """

    id: strawberry.ID
    title: str
    description: Optional[str]
    location: Optional[str]
    starts_at: Optional[datetime]
    created_at: datetime

    @classmethod
    def from_domain(cls, meetup: Meetup) -> "MeetupType":
        """Map domain Meetup entity to GraphQL Meetup type."""
        return cls(
            id=strawberry.ID(str(meetup.id)),
            title=meetup.title,
            description=meetup.description,
            location=meetup.location,
            starts_at=meetup.starts_at,
            created_at=meetup.created_at,
        )


@strawberry.input(name="NewMeetup", description="Input for createMeetup")
class NewMeetupInput:
    """Input for create meetup mutation."""

    title: str
    description: Optional[str] = None
    location: Optional[str] = None
    starts_at: Optional[datetime] = None

    def to_domain(self) -> NewMeetup:
        """Convert to domain NewMeetup (fields copied verbatim)."""
        return NewMeetup(
            title=self.title,
            description=self.description,
            location=self.location,
            starts_at=self.starts_at,
        )
