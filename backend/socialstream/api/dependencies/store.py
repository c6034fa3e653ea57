"""
Store Dependency

FastAPI dependency for the collection store of the running application.

Usage:
======
    from socialstream.api.dependencies.store import Store

    @router.get("/posts")
    async def list_posts(store: Store):
        return PostRepository(store).all()
"""

from typing import Annotated

from fastapi import Depends

from socialstream.shared.db import CollectionStore, get_store as _get_store


def get_store() -> CollectionStore:
    """
    FastAPI dependency returning the application store.

    Tests swap the store through app.dependency_overrides.
    """
    return _get_store()


# Type alias for cleaner route signatures
Store = Annotated[CollectionStore, Depends(get_store)]
