"""
Business Logic Services

Services encapsulate business logic and coordinate between repositories,
external services, and domain rules.

Service Pattern:
================
    Handler → Service → Repository → CollectionStore
                ↘ External APIs (OpenAI)

Available Services:
===================
- AuthService: Registration, login, logout, current session
- ContentService: Posts, downloads, search, leaderboard
- RoomService: Static rooms and ephemeral chat
- TagGenerator / ChatResponder: AI tagging and chat with fallbacks
- tier_service: Tier table and per-post reward

Usage:
======
    from socialstream.shared.services import AuthService, ContentService

    service = AuthService(store)
    result = service.login("admin", "secret1")
"""

from socialstream.shared.services.auth_service import AuthResult, AuthService
from socialstream.shared.services.content_service import ContentService, SearchResults
from socialstream.shared.services.room_service import RoomService
from socialstream.shared.services.ai_service import ChatResponder, TagGenerator
from socialstream.shared.services.tier_service import apply_post_reward, calculate_tier

__all__ = [
    "AuthResult",
    "AuthService",
    "ContentService",
    "SearchResults",
    "RoomService",
    "ChatResponder",
    "TagGenerator",
    "apply_post_reward",
    "calculate_tier",
]
