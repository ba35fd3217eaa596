"""Unit tests for the MongoDB index setup script."""

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from meetup_backend.scripts import setup_mongodb_indexes


@pytest.mark.asyncio
async def test_create_meetup_indexes() -> None:
    collection = MagicMock()
    collection.create_index = AsyncMock()
    db: Any = MagicMock()
    db.__getitem__.return_value = collection

    await setup_mongodb_indexes.create_meetup_indexes(db)

    db.__getitem__.assert_called_once_with("meetups")
    collection.create_index.assert_awaited_once_with(
        [("created_at", 1), ("_id", 1)], name="idx_created_at"
    )


@pytest.mark.asyncio
async def test_main_without_uri_fails() -> None:
    assert await setup_mongodb_indexes.main() == 1
