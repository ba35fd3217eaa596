"""MongoDB implementation of meetup repository.

Document Schema:
{
    "_id": "uuid-string",
    "title": "Go Night",
    "description": "optional-string",
    "location": "optional-string",
    "starts_at": "2025-11-12T18:00:00+00:00" | null,
    "created_at": "2025-11-12T10:00:00+00:00"
}

Indexes:
- _id: Unique index (automatic)
- created_at: list in creation order (see scripts/setup_mongodb_indexes.py)
"""

from typing import Any, Dict, List

from meetup_backend.domain.meetup.core.entities.meetup import Meetup
from meetup_backend.domain.meetup.core.exceptions.domain_errors import StorageError
from meetup_backend.infrastructure.persistence.mongodb.base import MongoBaseRepository

COLLECTION_NAME = "meetups"


class MongoMeetupRepository(MongoBaseRepository[Meetup]):
    """MongoDB implementation of MeetupRepository port."""

    @property
    def collection_name(self) -> str:
        return COLLECTION_NAME

    def to_document(self, entity: Meetup) -> Dict[str, Any]:
        return {
            "_id": self.uuid_to_str(entity.id),
            "title": entity.title,
            "description": entity.description,
            "location": entity.location,
            "starts_at": (
                self.datetime_to_iso(entity.starts_at) if entity.starts_at else None
            ),
            "created_at": self.datetime_to_iso(entity.created_at),
        }

    def from_document(self, doc: Dict[str, Any]) -> Meetup:
        try:
            starts_at = doc.get("starts_at")
            return Meetup(
                id=self.str_to_uuid(doc["_id"]),
                title=doc["title"],
                description=doc.get("description"),
                location=doc.get("location"),
                starts_at=self.iso_to_datetime(starts_at) if starts_at else None,
                created_at=self.iso_to_datetime(doc["created_at"]),
            )
        except KeyError as e:
            raise ValueError(f"Missing required field in MongoDB document: {e}")

    async def create(self, meetup: Meetup) -> Meetup:
        """
        Insert a new meetup document.

        Raises:
            StorageError: On driver failure (including duplicate id)
        """
        await self._insert_one(self.to_document(meetup))
        return meetup

    async def list_all(self) -> List[Meetup]:
        """
        All meetups ordered by created_at ascending.

        Raises:
            StorageError: On driver failure or an unreadable document
        """
        documents = await self._find_many({}, sort=[("created_at", 1), ("_id", 1)])
        try:
            return [self.from_document(doc) for doc in documents]
        except ValueError as e:
            raise StorageError("Corrupt meetup document", e) from e
