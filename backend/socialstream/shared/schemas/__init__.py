"""
API Schemas

Pydantic request/response models for the HTTP API. Stored records
(socialstream.shared.models) are returned as-is where they fit.
"""

from socialstream.shared.schemas.common import (
    BaseSchema,
    ErrorDetail,
    ErrorResponse,
    HealthResponse,
    MessageResponse,
)
from socialstream.shared.schemas.user import AuthResponse, LoginRequest, RegisterRequest
from socialstream.shared.schemas.post import (
    BookmarkRequest,
    BookmarkResponse,
    CreatePostRequest,
    SearchResponse,
    TagSuggestionRequest,
    TagSuggestionResponse,
)
from socialstream.shared.schemas.room import ChatExchangeResponse, ChatMessageRequest

__all__ = [
    "BaseSchema",
    "ErrorDetail",
    "ErrorResponse",
    "HealthResponse",
    "MessageResponse",
    "AuthResponse",
    "LoginRequest",
    "RegisterRequest",
    "BookmarkRequest",
    "BookmarkResponse",
    "CreatePostRequest",
    "SearchResponse",
    "TagSuggestionRequest",
    "TagSuggestionResponse",
    "ChatExchangeResponse",
    "ChatMessageRequest",
]
