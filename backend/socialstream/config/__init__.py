"""
Configuration Module

Application configuration loaded from environment variables.

Usage:
======
    from socialstream.config.settings import settings

    redis_url = settings.REDIS_URL
    is_dev = settings.is_development
"""

from socialstream.config.settings import settings, get_settings, Settings

__all__ = [
    "settings",
    "get_settings",
    "Settings",
]
