"""Meetup entity - one persisted meetup event."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID

from meetup_backend.domain.meetup.core.value_objects.meetup_id import MeetupId
from .new_meetup import NewMeetup


@dataclass
class Meetup:
    """
    Entity: a meetup event.

    Invariants:
    - id is assigned on creation and never changes
    - created_at is timezone-aware
    - starts_at, when set, is timezone-aware

    Identity: Defined by unique ID (UUID)
    Lifecycle: created only by the createMeetup mutation, read only by
    the meetups query.
    """

    id: UUID
    title: str
    description: Optional[str] = None
    location: Optional[str] = None
    starts_at: Optional[datetime] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        """Validate invariants after initialization."""
        if self.created_at.tzinfo is None:
            raise ValueError("created_at must be timezone-aware (use UTC)")

        if self.starts_at is not None and self.starts_at.tzinfo is None:
            raise ValueError("starts_at must be timezone-aware")

    @classmethod
    def create(
        cls,
        new_meetup: NewMeetup,
        meetup_id: MeetupId,
        created_at: datetime,
    ) -> "Meetup":
        """Factory method building a Meetup from validated input.

        Fields shared with NewMeetup are copied verbatim.

        Args:
            new_meetup: Validated creation input
            meetup_id: Fresh identifier
            created_at: Creation timestamp (timezone-aware)

        Returns:
            New Meetup instance (not yet persisted)
        """
        return cls(
            id=meetup_id.value,
            title=new_meetup.title,
            description=new_meetup.description,
            location=new_meetup.location,
            starts_at=new_meetup.starts_at,
            created_at=created_at,
        )
