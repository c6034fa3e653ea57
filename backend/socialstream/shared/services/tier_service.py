"""
Tier/Points Engine

Maps a user's lifetime post count to a tier and applies the per-post reward.

Tier Table:
===========
    post_count      tier
    ----------      ---------
    < 200           BRONZE
    200 - 499       SILVER
    500 - 699       GOLD
    700 - 999       PLATINUM
    1000 - 1499     DIAMOND
    >= 1500         VERIFIED

Tier depends on post_count only, never on points. The tier stored on a user
is a cache: it must be recomputed every time post_count changes, which
apply_post_reward() does.
"""

from typing import Optional

from socialstream.config.settings import settings
from socialstream.shared.models.enums import UserTier
from socialstream.shared.models.user import User


# Lower bound of each tier, highest first
TIER_THRESHOLDS: tuple[tuple[int, UserTier], ...] = (
    (1500, UserTier.VERIFIED),
    (1000, UserTier.DIAMOND),
    (700, UserTier.PLATINUM),
    (500, UserTier.GOLD),
    (200, UserTier.SILVER),
)


def calculate_tier(post_count: int) -> UserTier:
    """
    Tier for a cumulative post count.

    Raises:
        ValueError: If post_count is negative
    """
    if post_count < 0:
        raise ValueError(f"post_count must be non-negative, got {post_count}")
    for threshold, tier in TIER_THRESHOLDS:
        if post_count >= threshold:
            return tier
    return UserTier.BRONZE


def apply_post_reward(user: User, points: Optional[int] = None) -> User:
    """
    Account for one new post.

    Returns a copy of user with post_count + 1, points + the reward and the
    tier recomputed from the new post_count.

    Args:
        user: User before the post
        points: Reward override, defaults to settings.POINTS_PER_POST
    """
    reward = settings.POINTS_PER_POST if points is None else points
    post_count = user.post_count + 1
    return user.model_copy(
        update={
            "post_count": post_count,
            "points": user.points + reward,
            "tier": calculate_tier(post_count),
        }
    )
