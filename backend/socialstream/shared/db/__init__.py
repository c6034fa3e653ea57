"""
Store Module

Persistence for SocialStream: named JSON collections over a key-value
substrate (Redis, or process memory for local runs).

Components:
===========
- store.py: CollectionStore, Collection keys and the application store lifecycle
- seed.py: Welcome content for an empty feed

Usage:
======
    from socialstream.shared.db import get_store, Collection

    store = get_store()
    posts = store.read(Collection.POSTS)
"""

from socialstream.shared.db.store import (
    Collection,
    CollectionStore,
    build_adapter,
    init_store,
    get_store,
    close_store,
)

__all__ = [
    "Collection",
    "CollectionStore",
    "build_adapter",
    "init_store",
    "get_store",
    "close_store",
]
