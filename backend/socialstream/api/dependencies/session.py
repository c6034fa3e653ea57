"""
Session Id Dependency

Resolves which client context a request belongs to.

A client presents the session id issued at login either as a bearer token
or in the session cookie set by /auth/login. The bearer token wins when
both are present. Requests without either belong to no session.

Usage:
======
    from socialstream.api.dependencies.session import SessionId

    @router.get("/whoami")
    def whoami(session_id: SessionId):
        ...
"""

from typing import Annotated, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from socialstream.config.settings import settings


# Optional bearer scheme; anonymous requests are allowed through
security = HTTPBearer(auto_error=False)


def get_session_id(
    request: Request,
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)] = None,
) -> Optional[str]:
    """
    Extract the session id from the Authorization header or cookie.

    Returns:
        Session id, or None for an anonymous request
    """
    if credentials and credentials.credentials:
        return credentials.credentials
    return request.cookies.get(settings.SESSION_COOKIE_NAME)


SessionId = Annotated[Optional[str], Depends(get_session_id)]
