"""Base MongoDB repository with reusable patterns.

Provides common functionality for MongoDB repositories:
- Connection management
- Document mapping helpers (UUID / datetime conversion)
- Driver errors wrapped in StorageError
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Dict, Generic, List, Optional, Tuple, TypeVar
from uuid import UUID

import structlog
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import PyMongoError

from meetup_backend.domain.meetup.core.exceptions.domain_errors import StorageError
from meetup_backend.infrastructure.config import get_mongodb_database, get_mongodb_uri

TEntity = TypeVar("TEntity")

logger = structlog.get_logger(__name__)


class MongoBaseRepository(ABC, Generic[TEntity]):
    """
    Abstract base class for MongoDB repositories.

    Subclasses must implement:
    - collection_name: Name of MongoDB collection
    - to_document(): Convert domain entity to MongoDB document
    - from_document(): Convert MongoDB document to domain entity
    """

    def __init__(self, client: Optional[AsyncIOMotorClient[Dict[str, Any]]] = None):
        """
        Initialize repository with optional client.

        Args:
            client: Motor client (if None, creates new one from config)

        Raises:
            ValueError: If no client is given and MONGODB_URI is not set
        """
        if client is None:
            uri = get_mongodb_uri()
            if not uri:
                raise ValueError(
                    "MONGODB_URI not configured. "
                    "Set MONGODB_URI, MONGODB_USER, "
                    "and MONGODB_PASSWORD environment variables."
                )
            self._client: AsyncIOMotorClient[Dict[str, Any]] = AsyncIOMotorClient(uri)
        else:
            self._client = client

        self._db = self._client[get_mongodb_database()]
        self._collection = self._db[self.collection_name]

        logger.info(
            "mongo.repository_initialized",
            repository=self.__class__.__name__,
            collection=self.collection_name,
        )

    @property
    @abstractmethod
    def collection_name(self) -> str:
        """MongoDB collection name."""

    @abstractmethod
    def to_document(self, entity: TEntity) -> Dict[str, Any]:
        """Convert domain entity to MongoDB document."""

    @abstractmethod
    def from_document(self, doc: Dict[str, Any]) -> TEntity:
        """
        Convert MongoDB document to domain entity.

        Raises:
            ValueError: If document is invalid or missing required fields
        """

    @staticmethod
    def uuid_to_str(uuid_value: UUID) -> str:
        return str(uuid_value)

    @staticmethod
    def str_to_uuid(str_value: str) -> UUID:
        return UUID(str_value)

    @staticmethod
    def datetime_to_iso(dt: datetime) -> str:
        """
        Convert datetime to ISO string in UTC.

        Normalising to UTC keeps lexicographic order equal to time order.

        Raises:
            ValueError: If datetime is naive
        """
        if dt.tzinfo is None:
            raise ValueError("Datetime must be timezone-aware")
        return dt.astimezone(timezone.utc).isoformat()

    @staticmethod
    def iso_to_datetime(iso_str: str) -> datetime:
        """Convert ISO string to timezone-aware datetime (naive = UTC)."""
        dt = datetime.fromisoformat(iso_str)
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return dt

    async def _find_many(
        self,
        filter_dict: Dict[str, Any],
        sort: Optional[List[Tuple[str, int]]] = None,
    ) -> List[Dict[str, Any]]:
        """
        Find documents.

        Raises:
            StorageError: If the MongoDB operation fails
        """
        try:
            cursor = self._collection.find(filter_dict)
            if sort:
                cursor = cursor.sort(sort)
            return await cursor.to_list(length=None)
        except PyMongoError as e:
            logger.error(
                "mongo.find_failed",
                collection=self.collection_name,
                filter=filter_dict,
                error=str(e),
            )
            raise StorageError(f"Failed to read {self.collection_name}", e) from e

    async def _insert_one(self, document: Dict[str, Any]) -> None:
        """
        Insert single document (atomic per document).

        Raises:
            StorageError: If the MongoDB operation fails
        """
        try:
            await self._collection.insert_one(document)
        except PyMongoError as e:
            logger.error(
                "mongo.insert_failed",
                collection=self.collection_name,
                document_id=document.get("_id"),
                error=str(e),
            )
            raise StorageError(f"Failed to write {self.collection_name}", e) from e

    async def close(self) -> None:
        """Close MongoDB connection."""
        self._client.close()
        logger.info("mongo.connection_closed", repository=self.__class__.__name__)
