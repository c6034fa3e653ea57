"""
Base Record Model

All persisted records are pydantic models serialized to JSON. Field names
are snake_case in Python and camelCase in storage, so a stored blob reads
like the client-side records it replaces (``postCount``, ``userAvatar``).

Usage:
======
    from socialstream.shared.models.base import RecordModel, new_id, utc_now

    class Post(RecordModel):
        id: str = Field(default_factory=new_id)
        user_avatar: str            # stored as "userAvatar"

    post.to_record()                # dict ready for the collection store
    Post.from_record(raw)           # accepts camelCase or snake_case keys
"""

import uuid
from datetime import datetime, timezone
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


RecordT = TypeVar("RecordT", bound="RecordModel")


def new_id() -> str:
    """Opaque, stable identifier for a new record."""
    return uuid.uuid4().hex


def utc_now() -> datetime:
    """Timezone-aware current time."""
    return datetime.now(timezone.utc)


class RecordModel(BaseModel):
    """Base class for records stored in a collection."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_record(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)

    @classmethod
    def from_record(cls: type[RecordT], data: dict[str, Any]) -> RecordT:
        """Build the model from a stored dict."""
        return cls.model_validate(data)
