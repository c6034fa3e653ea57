"""
API Handlers

Route handlers for the SocialStream API.

Handlers follow the pattern:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

All business logic is delegated to the service layer.
"""

from socialstream.api.handlers import (
    auth_handler,
    discovery_handler,
    download_handler,
    health_handler,
    post_handler,
    room_handler,
    user_handler,
)

__all__ = [
    "auth_handler",
    "discovery_handler",
    "download_handler",
    "health_handler",
    "post_handler",
    "room_handler",
    "user_handler",
]
