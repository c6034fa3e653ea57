"""
Enums used across the application.
"""

from enum import Enum


class UserTier(str, Enum):
    """
    Rank label derived from a user's lifetime post count.

    Thresholds live in services/tier_service.py; the tier stored on a user
    is a cached copy kept in sync with post_count.
    """

    BRONZE = "BRONZE"
    SILVER = "SILVER"
    GOLD = "GOLD"
    PLATINUM = "PLATINUM"
    DIAMOND = "DIAMOND"
    VERIFIED = "VERIFIED"


class MediaKind(str, Enum):
    """Kind of media attached to a post."""

    IMAGE = "image"
    VIDEO = "video"
