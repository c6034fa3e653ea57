"""
Demo content served while the posts collection has never been written.
"""

from datetime import timedelta
from typing import List

from socialstream.shared.models import MediaKind, Post, UserTier, utc_now


def welcome_posts() -> List[Post]:
    """The single welcome post shown on a fresh feed."""
    return [
        Post(
            id="101",
            user_id="1",
            username="admin",
            user_avatar="https://api.dicebear.com/7.x/avataaars/svg?seed=admin",
            user_tier=UserTier.VERIFIED,
            type=MediaKind.IMAGE,
            src="https://picsum.photos/id/237/800/600",
            description="Welcome! The very first post.",
            tags=["hello", "socialstream"],
            likes=120,
            comments=5,
            timestamp=utc_now() - timedelta(seconds=100),
            is_external_link=True,
        )
    ]
