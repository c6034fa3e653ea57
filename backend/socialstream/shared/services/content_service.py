"""
Content Service

Business logic for the feed, bookmarks, search and the leaderboard.

POST CREATION:
- The author is the explicit session user handed in by the caller
- The post copies the author's username, avatar and tier at creation time;
  that snapshot is never refreshed
- The post is prepended (feed is most-recent-first), then the stored author
  record gets the per-post reward and is saved through AuthService so the
  session stays in sync

Usage:
======
    from socialstream.shared.services.content_service import ContentService

    service = ContentService(store, auth_service)
    post = service.create_post(session_user, MediaKind.IMAGE, url, "Sunset", ["sky"])
    results = service.search("sky")
"""

import re
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from socialstream.config.settings import settings
from socialstream.shared.core.exceptions import PostNotFoundError, ValidationError
from socialstream.shared.core.logging import get_logger
from socialstream.shared.db.store import CollectionStore
from socialstream.shared.models.enums import MediaKind
from socialstream.shared.models.post import Post
from socialstream.shared.models.user import User
from socialstream.shared.repositories.download_repository import DownloadRepository
from socialstream.shared.repositories.post_repository import PostRepository
from socialstream.shared.services.auth_service import AuthService
from socialstream.shared.services.tier_service import apply_post_reward

logger = get_logger(__name__)


VIDEO_URL_PATTERN = re.compile(r"\.(mp4|mov|webm)$", re.IGNORECASE)


@dataclass
class SearchResults:
    """Users and posts matching a search query."""

    users: List[User] = field(default_factory=list)
    posts: List[Post] = field(default_factory=list)


def infer_media_kind(source: str, content_type: Optional[str] = None) -> MediaKind:
    """
    Guess whether a source is an image or a video.

    Uses the upload's content type when known, then a data-URI mime prefix,
    then the URL extension (.mp4, .mov, .webm). Anything else is an image.
    """
    if content_type:
        return MediaKind.VIDEO if content_type.lower().startswith("video") else MediaKind.IMAGE
    if source.lower().startswith("data:video"):
        return MediaKind.VIDEO
    if VIDEO_URL_PATTERN.search(source):
        return MediaKind.VIDEO
    return MediaKind.IMAGE


class ContentService:
    """
    Service for content-related business logic.

    Handles:
    - Creating posts and rewarding their authors
    - Feed and per-user listings
    - Bookmarking posts into the downloads list
    - Substring search over users and posts
    - Leaderboard by points
    """

    def __init__(self, store: CollectionStore, auth_service: Optional[AuthService] = None) -> None:
        """
        Initialize ContentService.

        Args:
            store: Collection store
            auth_service: Identity manager used to persist author updates
        """
        self.store = store
        self.auth_service = auth_service or AuthService(store)
        self.post_repo = PostRepository(store)
        self.download_repo = DownloadRepository(store)

    # ═══════════════════════════════════════════════════════════════════════════
    # POSTS
    # ═══════════════════════════════════════════════════════════════════════════

    def create_post(
        self,
        author: User,
        media_kind: MediaKind,
        source: str,
        description: str,
        tags: Sequence[str] = (),
        is_external_link: bool = False,
    ) -> Post:
        """
        Publish a post for author.

        Flow:
        1. Validate source and description
        2. Build the post with a fresh id/timestamp and the author snapshot
        3. Prepend it to the posts collection
        4. Apply the per-post reward to the stored author and save it

        Args:
            author: Session user publishing the post
            media_kind: image or video
            source: URL or data URI of the media
            description: Caption text
            tags: Ordered tag list
            is_external_link: True when source points outside the app

        Returns:
            The created post

        Raises:
            ValidationError: If source or description is blank
        """
        if not source or not source.strip():
            raise ValidationError("A file or link is required", details={"field": "source"})
        if not description or not description.strip():
            raise ValidationError("Description is required", details={"field": "description"})

        post = Post(
            user_id=author.id,
            username=author.username,
            user_avatar=author.avatar,
            user_tier=author.tier,
            type=media_kind,
            src=source.strip(),
            description=description.strip(),
            tags=[tag.strip() for tag in tags if tag and tag.strip()],
            likes=0,
            comments=0,
            is_external_link=is_external_link,
        )
        self.post_repo.create(post)

        # The session copy may lag behind the stored record
        stored_author = self.auth_service.get_user(author.id) or author
        rewarded = apply_post_reward(stored_author)
        if self.auth_service.save_user(rewarded) is None:
            logger.warning("Post author not in users collection", user_id=author.id)

        logger.info(
            "Post created",
            post_id=post.id,
            user_id=author.id,
            media_kind=media_kind.value,
            post_count=rewarded.post_count,
            tier=rewarded.tier.value,
        )
        return post

    def list_posts(self) -> List[Post]:
        """The feed, most recent first."""
        return self.post_repo.all()

    def get_post(self, post_id: str) -> Post:
        """
        Get a post by id.

        Raises:
            PostNotFoundError: If no post has this id
        """
        post = self.post_repo.get(post_id)
        if post is None:
            raise PostNotFoundError(post_id)
        return post

    def list_user_posts(self, user_id: str) -> List[Post]:
        """Posts authored by one user, most recent first."""
        return self.post_repo.list_by_user(user_id)

    # ═══════════════════════════════════════════════════════════════════════════
    # DOWNLOADS
    # ═══════════════════════════════════════════════════════════════════════════

    def bookmark(self, post: Post) -> bool:
        """
        Add a post to the downloads list.

        Idempotent: a post id already present is left alone.

        Returns:
            True if the post was newly added
        """
        added = self.download_repo.add_if_absent(post)
        if added:
            logger.info("Post bookmarked", post_id=post.id)
        return added

    def list_downloads(self) -> List[Post]:
        """Bookmarked posts in the order they were added."""
        return self.download_repo.all()

    # ═══════════════════════════════════════════════════════════════════════════
    # DISCOVERY
    # ═══════════════════════════════════════════════════════════════════════════

    def search(self, query: str) -> SearchResults:
        """
        Case-insensitive substring search over the full collections.

        Users match on username or display name; posts match on description
        or any tag. No ranking or pagination. A blank query returns empty
        results.
        """
        q = (query or "").strip().lower()
        if not q:
            return SearchResults()

        users = [
            user
            for user in self.auth_service.list_users()
            if q in user.username.lower() or (user.name and q in user.name.lower())
        ]
        posts = [
            post
            for post in self.post_repo.all()
            if q in post.description.lower() or any(q in tag.lower() for tag in post.tags)
        ]
        return SearchResults(users=users, posts=posts)

    def leaderboard(self, limit: Optional[int] = None) -> List[User]:
        """
        Most popular users.

        Args:
            limit: Number of users, defaults to settings.LEADERBOARD_SIZE

        Returns:
            Users ordered by points, highest first
        """
        size = settings.LEADERBOARD_SIZE if limit is None else limit
        users = sorted(self.auth_service.list_users(), key=lambda u: u.points, reverse=True)
        return users[:size]
