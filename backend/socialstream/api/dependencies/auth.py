"""
Authentication Dependencies

FastAPI dependencies resolving the logged-in user of the client context.

Dependency Hierarchy:
=====================
    get_session_id()     ← Bearer token or session cookie
           │
           ▼
    get_auth_service()   ← AuthService bound to that session
           │
           ▼
    get_current_user()   ← Session user, 401 when nobody is logged in

Type Aliases:
=============
    CurrentUser - Session user (credential-stripped)

Usage:
======
    from socialstream.api.dependencies.auth import CurrentUser

    @router.post("/posts")
    async def create_post(data: CreatePostRequest, current_user: CurrentUser):
        ...
"""

from typing import Annotated

from fastapi import Depends

from socialstream.api.dependencies.services import get_auth_service
from socialstream.shared.core.exceptions import AuthenticationError
from socialstream.shared.models.user import User
from socialstream.shared.services.auth_service import AuthService


def get_current_user(
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> User:
    """
    Get the user logged in to the requesting client context.

    Raises:
        AuthenticationError: If the request carries no live session
    """
    user = auth_service.current_session()
    if user is None:
        raise AuthenticationError("Login required")
    return user


# ═══════════════════════════════════════════════════════════════════════════════
# TYPE ALIASES
# ═══════════════════════════════════════════════════════════════════════════════

CurrentUser = Annotated[User, Depends(get_current_user)]
