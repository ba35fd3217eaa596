"""Setup MongoDB indexes for the meetups collection.

Usage:
    python -m meetup_backend.scripts.setup_mongodb_indexes

Environment Variables:
    MONGODB_URI: MongoDB connection string (required)
    MONGODB_DATABASE: Database name (default: meetups)
"""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import Any, Dict

from dotenv import load_dotenv
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from meetup_backend.infrastructure.config import get_mongodb_database, get_mongodb_uri
from meetup_backend.infrastructure.persistence.mongodb.meetup_repository import (
    COLLECTION_NAME,
)

logger = logging.getLogger(__name__)


async def create_meetup_indexes(db: AsyncIOMotorDatabase[Dict[str, Any]]) -> None:
    """Create indexes for meetups collection.

    Indexes:
    - _id: unique (automatic)
    - created_at + _id: list meetups in creation order
    """
    collection = db[COLLECTION_NAME]
    logger.info(f"Creating indexes for '{COLLECTION_NAME}' collection...")

    await collection.create_index(
        [("created_at", 1), ("_id", 1)],
        name="idx_created_at",
    )
    logger.info("Created index: created_at + _id")


async def main() -> int:
    uri = get_mongodb_uri()
    if not uri:
        logger.error("MONGODB_URI not set")
        return 1

    client: AsyncIOMotorClient[Dict[str, Any]] = AsyncIOMotorClient(uri)
    try:
        await create_meetup_indexes(client[get_mongodb_database()])
    finally:
        client.close()
    return 0


if __name__ == "__main__":
    load_dotenv()
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    sys.exit(asyncio.run(main()))
