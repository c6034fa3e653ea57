"""
Repository Pattern Implementations

Repositories wrap the CollectionStore with typed, per-collection access.

Repository Hierarchy:
=====================
    BaseRepository[ModelType]       ← Generic list-collection operations
         │
         ├── UserRepository         ← Users, credential-aware lookups
         ├── PostRepository         ← Feed, most-recent-first
         └── DownloadRepository     ← Bookmarks, deduplicated by post id

    SessionRepository               ← Single current-session record

Usage Example:
==============
    from socialstream.shared.db import get_store
    from socialstream.shared.repositories import PostRepository

    repo = PostRepository(get_store())
    feed = repo.all()
"""

from socialstream.shared.repositories.base import BaseRepository
from socialstream.shared.repositories.user_repository import UserRepository
from socialstream.shared.repositories.post_repository import PostRepository
from socialstream.shared.repositories.download_repository import DownloadRepository
from socialstream.shared.repositories.session_repository import SessionRepository

__all__ = [
    # Base class
    "BaseRepository",
    # Collection repositories
    "UserRepository",
    "PostRepository",
    "DownloadRepository",
    "SessionRepository",
]
