"""
Room and chat records.

Rooms are static reference data. Chat messages only live in memory for the
lifetime of the process.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from socialstream.shared.models.base import RecordModel, new_id, utc_now


class Room(RecordModel):
    """Simulated live-viewing room."""

    id: str
    name: str
    viewers: int = Field(ge=0)
    current_media: Optional[str] = None
    host: str


class ChatMessage(RecordModel):
    """Single chat line in a room."""

    id: str = Field(default_factory=new_id)
    user_id: str
    username: str
    avatar: str
    text: str
    timestamp: datetime = Field(default_factory=utc_now)
