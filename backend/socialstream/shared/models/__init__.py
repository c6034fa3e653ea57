"""
SocialStream Records

Pydantic models for everything held in the collection store.

Models Overview:
================
- RecordModel: Base class (camelCase storage keys)
- User / StoredUser: Public and credential-bearing user records
- Post: Feed item with a frozen author snapshot
- Room / ChatMessage: Static rooms and ephemeral chat lines
- UserTier / MediaKind: Enums

Usage:
======
    from socialstream.shared.models import User, Post, UserTier
"""

from socialstream.shared.models.base import RecordModel, new_id, utc_now
from socialstream.shared.models.enums import UserTier, MediaKind
from socialstream.shared.models.user import User, StoredUser
from socialstream.shared.models.post import Post
from socialstream.shared.models.room import Room, ChatMessage

__all__ = [
    "RecordModel",
    "new_id",
    "utc_now",
    "UserTier",
    "MediaKind",
    "User",
    "StoredUser",
    "Post",
    "Room",
    "ChatMessage",
]
