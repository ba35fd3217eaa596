"""Repository factory for the persistence layer.

Environment-based repository selection:
- REPOSITORY_BACKEND=inmemory (default): fast, transient
- REPOSITORY_BACKEND=mongodb: persistent, requires MONGODB_URI

Usage:
    from meetup_backend.infrastructure.persistence.factory import (
        create_meetup_repository,
        get_meetup_repository,
    )

    repo = create_meetup_repository()  # New instance based on env
    repo = get_meetup_repository()     # Singleton instance
"""

from typing import Optional

from meetup_backend.domain.shared.ports.meetup_repository import MeetupRepository
from meetup_backend.infrastructure.config import get_mongodb_uri, get_repository_backend
from meetup_backend.infrastructure.persistence.in_memory.meetup_repository import (
    InMemoryMeetupRepository,
)


def create_meetup_repository() -> MeetupRepository:
    """Create meetup repository based on REPOSITORY_BACKEND env var.

    Returns:
        MeetupRepository instance

    Raises:
        ValueError: If the backend is unknown, or mongodb is selected
            without MONGODB_URI

    Example:
        # In .env (production):
        REPOSITORY_BACKEND=mongodb
        MONGODB_URI=mongodb://localhost:27017
    """
    backend = get_repository_backend()

    if backend == "mongodb":
        if not get_mongodb_uri():
            raise ValueError(
                "REPOSITORY_BACKEND=mongodb but MONGODB_URI not set. "
                "Set MONGODB_URI in .env or use REPOSITORY_BACKEND=inmemory"
            )
        # Imported lazily so the in-memory backend never loads motor.
        from meetup_backend.infrastructure.persistence.mongodb.meetup_repository import (
            MongoMeetupRepository,
        )

        return MongoMeetupRepository()

    return InMemoryMeetupRepository()


_meetup_repository: Optional[MeetupRepository] = None


def get_meetup_repository() -> MeetupRepository:
    """Get singleton meetup repository instance (created on first use)."""
    global _meetup_repository
    if _meetup_repository is None:
        _meetup_repository = create_meetup_repository()
    return _meetup_repository


def reset_repository() -> None:
    """Reset singleton repository instance.

    Useful for testing to force re-creation with different env vars.
    """
    global _meetup_repository
    _meetup_repository = None
