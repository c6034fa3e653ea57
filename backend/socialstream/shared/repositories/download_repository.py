"""
Download Repository

Bookmarked posts. Membership only: a post id appears at most once and
entries are kept in the order they were added.
"""

from socialstream.shared.db.store import Collection, CollectionStore
from socialstream.shared.models.post import Post
from socialstream.shared.repositories.base import BaseRepository


class DownloadRepository(BaseRepository[Post]):
    """Repository for the downloads collection."""

    def __init__(self, store: CollectionStore) -> None:
        super().__init__(Post, Collection.DOWNLOADS, store)

    def add_if_absent(self, post: Post) -> bool:
        """
        Bookmark a post unless its id is already present.

        Returns:
            True if the post was added, False if it was already bookmarked
        """
        if self.exists(post.id):
            return False
        self.append(post)
        return True
