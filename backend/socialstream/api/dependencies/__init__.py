"""
API Dependencies

FastAPI dependencies for injection into route handlers.

Dependencies:
=============
- Store: get_store(), Store
- Session: get_session_id(), SessionId
- Authentication: get_current_user(), CurrentUser
- Services: get_*_service() functions, get_tag_generator()

Usage:
======
    from socialstream.api.dependencies import CurrentUser, Store

    @router.get("/me")
    async def me(current_user: CurrentUser):
        return current_user
"""

from socialstream.api.dependencies.store import (
    get_store,
    Store,
)
from socialstream.api.dependencies.session import (
    get_session_id,
    SessionId,
)
from socialstream.api.dependencies.auth import (
    get_current_user,
    CurrentUser,
)
from socialstream.api.dependencies.services import (
    get_auth_service,
    get_content_service,
    get_room_service,
    get_tag_generator,
)

__all__ = [
    # Store
    "get_store",
    "Store",
    # Session
    "get_session_id",
    "SessionId",
    # Authentication
    "get_current_user",
    "CurrentUser",
    # Services
    "get_auth_service",
    "get_content_service",
    "get_room_service",
    "get_tag_generator",
]
