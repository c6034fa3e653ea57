"""
Core Module

Provides core functionality shared across the application:
- Structured logging
- Custom exceptions

Usage:
======
    from socialstream.shared.core.logging import logger, get_logger
    from socialstream.shared.core.exceptions import SocialStreamException, NotFoundError

    logger.info("Post created", post_id=post.id)
"""

from socialstream.shared.core.logging import (
    logger,
    get_logger,
    log_context,
    clear_log_context,
)
from socialstream.shared.core.exceptions import (
    SocialStreamException,
    AuthenticationError,
    NotFoundError,
    UserNotFoundError,
    PostNotFoundError,
    RoomNotFoundError,
    ValidationError,
    ConflictError,
    DuplicateResourceError,
    ServiceUnavailableError,
    ExternalServiceError,
)

__all__ = [
    # Logging
    "logger",
    "get_logger",
    "log_context",
    "clear_log_context",
    # Exceptions
    "SocialStreamException",
    "AuthenticationError",
    "NotFoundError",
    "UserNotFoundError",
    "PostNotFoundError",
    "RoomNotFoundError",
    "ValidationError",
    "ConflictError",
    "DuplicateResourceError",
    "ServiceUnavailableError",
    "ExternalServiceError",
]
