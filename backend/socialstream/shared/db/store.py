"""
Collection Store

Whole-collection persistence over a key-value substrate.

Key Concepts:
=============

1. COLLECTION: a named list of records stored under one key as JSON
   - users, posts, downloads (lists)
   - current_user_<session id> (one record per logged-in client)

2. NAMESPACE: the key prefix shared by every collection of one deployment
   - "socialstream" gives socialstream_users, socialstream_posts, ...

3. READ-MODIFY-WRITE: every mutation reads the entire collection,
   changes the in-memory copy and writes the whole list back.

Write Semantics:
================
┌─────────────────────────────────────────────────────────────────────────────┐
│   writer A: read(posts) ──────── modify ──────── write(posts)              │
│   writer B:        read(posts) ──── modify ──────────────── write(posts)   │
│                                                                             │
│   Result: B's write replaces A's. Last writer wins on the whole list.      │
└─────────────────────────────────────────────────────────────────────────────┘

There is no partial update, transaction log or version check. Two processes
sharing a namespace can lose each other's updates.

Configuration:
==============
    STORE_BACKEND: "redis" or "memory"
    REDIS_URL: redis://host:6379/0
    STORE_NAMESPACE: key prefix (default "socialstream")
"""

import copy
import json
from enum import Enum
from typing import Any, Dict, List, Optional

from socialstream.config.settings import settings
from socialstream.shared.adapters.base import KeyValueAdapter
from socialstream.shared.adapters.memory_adapter import MemoryAdapter
from socialstream.shared.adapters.redis_adapter import RedisAdapter
from socialstream.shared.core.logging import get_logger
from socialstream.shared.db.seed import welcome_posts

logger = get_logger(__name__)


class Collection(str, Enum):
    """Logical keys held in the store."""

    USERS = "users"
    POSTS = "posts"
    CURRENT_USER = "current_user"
    DOWNLOADS = "downloads"


class CollectionStore:
    """
    Reads and writes named collections as JSON documents.

    Attributes:
        adapter: Key-value substrate
        namespace: Key prefix for all collections
        defaults: Value served for a collection whose key is absent
    """

    def __init__(
        self,
        adapter: KeyValueAdapter,
        namespace: str = "socialstream",
        defaults: Optional[Dict[Collection, List[Dict[str, Any]]]] = None,
    ) -> None:
        self.adapter = adapter
        self.namespace = namespace
        self.defaults = defaults or {}

    def key(self, collection: Collection, suffix: Optional[str] = None) -> str:
        """Storage key for a collection in this namespace, optionally per record."""
        if suffix:
            return f"{self.namespace}_{collection.value}_{suffix}"
        return f"{self.namespace}_{collection.value}"

    # ═══════════════════════════════════════════════════════════════════════════
    # LIST COLLECTIONS
    # ═══════════════════════════════════════════════════════════════════════════

    def read(self, collection: Collection) -> List[Dict[str, Any]]:
        """
        Read an entire collection.

        Returns a fresh copy of the registered default (or an empty list) when
        the key is absent or does not hold a JSON list.
        """
        raw = self.adapter.get(self.key(collection))
        if raw is None:
            return copy.deepcopy(self.defaults.get(collection, []))

        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Unreadable collection, serving default", collection=collection.value)
            return copy.deepcopy(self.defaults.get(collection, []))

        if not isinstance(data, list):
            logger.warning("Collection is not a list, serving default", collection=collection.value)
            return copy.deepcopy(self.defaults.get(collection, []))
        return data

    def write(self, collection: Collection, records: List[Dict[str, Any]]) -> bool:
        """
        Overwrite an entire collection.

        Returns:
            True if the substrate accepted the write
        """
        ok = self.adapter.set(self.key(collection), json.dumps(records, ensure_ascii=False))
        if not ok:
            logger.error("Collection write failed", collection=collection.value)
        else:
            logger.debug("Collection written", collection=collection.value, size=len(records))
        return ok

    # ═══════════════════════════════════════════════════════════════════════════
    # SINGLE-RECORD KEYS
    # ═══════════════════════════════════════════════════════════════════════════

    def read_record(self, collection: Collection, suffix: Optional[str] = None) -> Optional[Dict[str, Any]]:
        """Read a key holding one record. None when absent or unreadable."""
        raw = self.adapter.get(self.key(collection, suffix))
        if raw is None:
            return None
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Unreadable record", collection=collection.value)
            return None
        return data if isinstance(data, dict) else None

    def write_record(
        self,
        collection: Collection,
        record: Dict[str, Any],
        suffix: Optional[str] = None,
    ) -> bool:
        """Overwrite a key holding one record."""
        return self.adapter.set(self.key(collection, suffix), json.dumps(record, ensure_ascii=False))

    def delete(self, collection: Collection, suffix: Optional[str] = None) -> bool:
        """Remove a collection or record key."""
        return self.adapter.delete(self.key(collection, suffix))

    def ping(self) -> bool:
        """Check the substrate is reachable."""
        return self.adapter.ping()

    def close(self) -> None:
        """Release the substrate's connections."""
        self.adapter.close()


# ═══════════════════════════════════════════════════════════════════════════════
# APPLICATION STORE
# ═══════════════════════════════════════════════════════════════════════════════

_store: Optional[CollectionStore] = None


def build_adapter() -> KeyValueAdapter:
    """Create the substrate selected by STORE_BACKEND."""
    if settings.STORE_BACKEND == "memory":
        return MemoryAdapter()
    return RedisAdapter(settings.REDIS_URL)


def demo_defaults() -> Dict[Collection, List[Dict[str, Any]]]:
    """Collection defaults used when SEED_DEMO_CONTENT is on."""
    return {Collection.POSTS: [post.to_record() for post in welcome_posts()]}


def init_store(store: Optional[CollectionStore] = None) -> CollectionStore:
    """
    Initialize the application-wide store.

    Args:
        store: Prebuilt store to install (tests); built from settings otherwise
    """
    global _store
    if store is None:
        defaults = demo_defaults() if settings.SEED_DEMO_CONTENT else {}
        store = CollectionStore(build_adapter(), settings.STORE_NAMESPACE, defaults)
    _store = store
    logger.info(
        "Collection store ready",
        backend=type(store.adapter).__name__,
        namespace=store.namespace,
    )
    return store


def get_store() -> CollectionStore:
    """Return the application store, initializing it on first use."""
    if _store is None:
        return init_store()
    return _store


def close_store() -> None:
    """Close the application store."""
    global _store
    if _store is not None:
        _store.close()
        _store = None
        logger.info("Collection store closed")
