"""MeetupId value object.

Immutable identifier for the Meetup entity.
Uses UUID for global uniqueness and database-friendly format.
"""

from dataclasses import dataclass
from uuid import UUID, uuid4


@dataclass(frozen=True)
class MeetupId:
    """Value object for Meetup ID.

    Examples:
        >>> meetup_id = MeetupId.generate()
        >>> meetup_id2 = MeetupId.from_string(str(meetup_id))
        >>> meetup_id == meetup_id2
        True
    """

    value: UUID

    @classmethod
    def generate(cls) -> "MeetupId":
        """Generate new meetup ID with UUID4."""
        return cls(uuid4())

    @classmethod
    def from_string(cls, id_str: str) -> "MeetupId":
        """Create MeetupId from string representation.

        Raises:
            ValueError: If string is not valid UUID format.
        """
        return cls(UUID(id_str))

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"MeetupId({self.value})"
