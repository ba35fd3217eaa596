"""NewMeetup - caller-supplied input for meetup creation."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from meetup_backend.domain.meetup.core.exceptions.domain_errors import (
    MeetupValidationError,
)

MAX_TITLE_LENGTH = 200
MAX_LOCATION_LENGTH = 200
MAX_DESCRIPTION_LENGTH = 2000


@dataclass(frozen=True)
class NewMeetup:
    """
    Transient input used to create exactly one Meetup.

    Not persisted itself: the creation command copies its fields verbatim
    onto the new Meetup and discards it.

    Example:
        >>> new_meetup = NewMeetup(title="Go Night", location="Online")
        >>> new_meetup.validate()
    """

    title: str
    description: Optional[str] = None
    location: Optional[str] = None
    starts_at: Optional[datetime] = None

    def validate(self) -> None:
        """
        Enforce the creation input policy.

        Raises:
            MeetupValidationError: If a required field is missing or a
                field is malformed.
        """
        if not isinstance(self.title, str) or not self.title.strip():
            raise MeetupValidationError("title is required", field="title")

        if len(self.title) > MAX_TITLE_LENGTH:
            raise MeetupValidationError(
                f"title must be at most {MAX_TITLE_LENGTH} characters",
                field="title",
            )

        if self.location is not None and len(self.location) > MAX_LOCATION_LENGTH:
            raise MeetupValidationError(
                f"location must be at most {MAX_LOCATION_LENGTH} characters",
                field="location",
            )

        if (
            self.description is not None
            and len(self.description) > MAX_DESCRIPTION_LENGTH
        ):
            raise MeetupValidationError(
                f"description must be at most {MAX_DESCRIPTION_LENGTH} characters",
                field="description",
            )

        if self.starts_at is not None and self.starts_at.tzinfo is None:
            raise MeetupValidationError(
                "starts_at must be timezone-aware", field="starts_at"
            )
