"""
Post Records

A post carries a snapshot of its author (username, avatar, tier) taken at
creation time. The snapshot is never refreshed, so old posts keep showing
the identity the author had when posting.
"""

from datetime import datetime
from typing import List

from pydantic import Field

from socialstream.shared.models.base import RecordModel, new_id, utc_now
from socialstream.shared.models.enums import MediaKind, UserTier


class Post(RecordModel):
    """Media post in the feed. Also stored verbatim as a download."""

    id: str = Field(default_factory=new_id)
    user_id: str
    username: str
    user_avatar: str
    user_tier: UserTier
    type: MediaKind
    src: str
    description: str
    tags: List[str] = Field(default_factory=list)
    likes: int = Field(default=0, ge=0)
    comments: int = Field(default=0, ge=0)
    timestamp: datetime = Field(default_factory=utc_now)
    is_external_link: bool = False
