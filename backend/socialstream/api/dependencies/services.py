"""
Service Dependencies

FastAPI dependencies for service injection.

Store-backed services are created per request; they only hold a reference
to the store. AuthService is bound to the session id the request presents. RoomService keeps chat history in memory, so a single instance
lives on app.state for the lifetime of the application.

Usage:
======
    from socialstream.api.dependencies.services import get_auth_service

    @router.post("/login")
    async def login(
        data: LoginRequest,
        auth_service: AuthService = Depends(get_auth_service),
    ):
        return auth_service.login(data.username, data.password)
"""

from fastapi import Depends, Request

from socialstream.api.dependencies.session import SessionId
from socialstream.api.dependencies.store import get_store
from socialstream.shared.db import CollectionStore
from socialstream.shared.services.ai_service import TagGenerator
from socialstream.shared.services.auth_service import AuthService
from socialstream.shared.services.content_service import ContentService
from socialstream.shared.services.room_service import RoomService


def get_auth_service(
    session_id: SessionId,
    store: CollectionStore = Depends(get_store),
) -> AuthService:
    """
    Dependency to get AuthService instance for the requesting client.
    """
    return AuthService(store, session_id)


def get_content_service(
    auth_service: AuthService = Depends(get_auth_service),
) -> ContentService:
    """
    Dependency to get ContentService instance sharing the request's AuthService.
    """
    return ContentService(auth_service.store, auth_service)


def get_tag_generator() -> TagGenerator:
    """
    Dependency to get TagGenerator instance.
    """
    return TagGenerator()


def get_room_service(request: Request) -> RoomService:
    """
    Dependency to get the application's RoomService.
    """
    return request.app.state.room_service
