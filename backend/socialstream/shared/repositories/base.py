"""
Base Repository

Generic data access over one collection of the CollectionStore.

What This Provides:
===================
- all()         → Every parsed record, in stored order
- get(id)       → Single record by id
- exists(id)    → Membership check
- prepend()     → Insert at the front (most-recent-first feeds)
- append()      → Insert at the back

Generic Type Pattern:
=====================
    class PostRepository(BaseRepository[Post]):
        def __init__(self, store: CollectionStore):
            super().__init__(Post, Collection.POSTS, store)

    repo = PostRepository(store)
    post = repo.get(post_id)  # Returns Post, not a dict

Mutation Flow:
==============
Every mutation is a whole-collection read-modify-write:

    raw = store.read(collection)    # entire list of dicts
    raw.insert(0, record)           # change the in-memory copy
    store.write(collection, raw)    # serialize the entire list back

Mutations work on the raw dicts so fields the model does not know about
(for instance the password hash under a public User model) survive a write.
Records that fail validation are skipped on read and logged.
"""

from typing import Any, Generic, Optional, Type, TypeVar

from pydantic import ValidationError as PydanticValidationError

from socialstream.shared.core.exceptions import ServiceUnavailableError
from socialstream.shared.core.logging import get_logger
from socialstream.shared.db.store import Collection, CollectionStore
from socialstream.shared.models.base import RecordModel

logger = get_logger(__name__)

ModelType = TypeVar("ModelType", bound=RecordModel)


class BaseRepository(Generic[ModelType]):
    """
    Generic base repository over a list collection.

    Attributes:
        model: Record model class
        collection: Collection key in the store
        store: Collection store
    """

    def __init__(
        self,
        model: Type[ModelType],
        collection: Collection,
        store: CollectionStore,
    ) -> None:
        self.model = model
        self.collection = collection
        self.store = store

    # ═══════════════════════════════════════════════════════════════════════════
    # READ OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    def _parse(self, raw: dict[str, Any]) -> Optional[ModelType]:
        try:
            return self.model.from_record(raw)
        except PydanticValidationError as e:
            logger.warning(
                "Skipping invalid record",
                collection=self.collection.value,
                record_id=raw.get("id"),
                errors=e.error_count(),
            )
            return None

    def all(self) -> list[ModelType]:
        """All valid records in stored order."""
        records = []
        for raw in self.store.read(self.collection):
            if not isinstance(raw, dict):
                continue
            parsed = self._parse(raw)
            if parsed is not None:
                records.append(parsed)
        return records

    def get(self, record_id: str) -> Optional[ModelType]:
        """Get a single record by id, or None."""
        for raw in self.store.read(self.collection):
            if isinstance(raw, dict) and raw.get("id") == record_id:
                return self._parse(raw)
        return None

    def exists(self, record_id: str) -> bool:
        """Check if a record with this id is stored."""
        return any(
            isinstance(raw, dict) and raw.get("id") == record_id
            for raw in self.store.read(self.collection)
        )

    # ═══════════════════════════════════════════════════════════════════════════
    # WRITE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    def prepend(self, instance: ModelType) -> ModelType:
        """Insert a record at the front of the collection."""
        raw = self.store.read(self.collection)
        raw.insert(0, instance.to_record())
        self._write(raw)
        return instance

    def append(self, instance: ModelType) -> ModelType:
        """Insert a record at the end of the collection."""
        raw = self.store.read(self.collection)
        raw.append(instance.to_record())
        self._write(raw)
        return instance

    def _write(self, raw: list[dict[str, Any]]) -> None:
        """
        Write the whole collection back.

        Raises:
            ServiceUnavailableError: If the store rejects the write
        """
        if not self.store.write(self.collection, raw):
            raise ServiceUnavailableError(f"Could not save {self.collection.value}")

