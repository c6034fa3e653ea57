"""
Post Repository

Feed storage. The posts collection is kept most-recent-first: new posts
are prepended, so stored order is feed order.
"""

from socialstream.shared.db.store import Collection, CollectionStore
from socialstream.shared.models.post import Post
from socialstream.shared.repositories.base import BaseRepository


class PostRepository(BaseRepository[Post]):
    """Repository for the posts collection."""

    def __init__(self, store: CollectionStore) -> None:
        super().__init__(Post, Collection.POSTS, store)

    def create(self, post: Post) -> Post:
        """Add a post to the top of the feed."""
        return self.prepend(post)

    def list_by_user(self, user_id: str) -> list[Post]:
        """Posts authored by one user, feed order."""
        return [post for post in self.all() if post.user_id == user_id]
