"""Shared test fixtures.

Every test gets a clean repository singleton and an environment without
storage overrides, so module-level app wiring always falls back to the
in-memory backend.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Generator

import pytest

from meetup_backend.domain.meetup.core.entities.new_meetup import NewMeetup
from meetup_backend.domain.shared.cancellation import CancellationToken
from meetup_backend.graphql.resolver import Resolver
from meetup_backend.infrastructure.persistence.factory import reset_repository
from meetup_backend.infrastructure.persistence.in_memory.meetup_repository import (
    InMemoryMeetupRepository,
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Remove storage settings that a local .env could leak into tests."""
    for key in (
        "REPOSITORY_BACKEND",
        "MONGODB_URI",
        "MONGODB_DATABASE",
        "REQUEST_TIMEOUT_S",
        "PORT",
    ):
        monkeypatch.delenv(key, raising=False)
    reset_repository()
    yield
    reset_repository()


@pytest.fixture
def repository() -> InMemoryMeetupRepository:
    """Fixture providing clean InMemoryMeetupRepository."""
    return InMemoryMeetupRepository()


@pytest.fixture
def resolver(repository: InMemoryMeetupRepository) -> Resolver:
    return Resolver(repository=repository)


@pytest.fixture
def token() -> CancellationToken:
    """Token without deadline."""
    return CancellationToken()


@pytest.fixture
def go_night() -> NewMeetup:
    return NewMeetup(title="Go Night", location="Online")


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 11, 12, 10, 0, 0, tzinfo=timezone.utc)
