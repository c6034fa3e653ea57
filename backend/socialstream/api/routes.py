"""
Route Registration

Centralizes all route registration for the FastAPI application.

Route Hierarchy:
================
    /health, /ready, /live  → Health check endpoints
    /auth                   → Register, login, logout, current user
    /posts                  → Feed, publishing, tag suggestions
    /users                  → Profiles and per-user posts
    /downloads              → Bookmarked posts
    /search, /leaderboard   → Discovery
    /rooms                  → Live rooms and chat

Usage:
======
    from socialstream.api.routes import register_routes

    app = FastAPI()
    register_routes(app)
"""

from fastapi import FastAPI

from socialstream.api.handlers import (
    auth_handler,
    discovery_handler,
    download_handler,
    health_handler,
    post_handler,
    room_handler,
    user_handler,
)


def register_routes(app: FastAPI) -> None:
    """
    Register all API routes.

    Args:
        app: FastAPI application instance
    """
    # Health check endpoints (no prefix, root level)
    app.include_router(
        health_handler.router,
        tags=["Health"],
    )

    app.include_router(
        auth_handler.router,
        prefix="/auth",
        tags=["Authentication"],
    )

    app.include_router(
        post_handler.router,
        prefix="/posts",
        tags=["Posts"],
    )

    app.include_router(
        user_handler.router,
        prefix="/users",
        tags=["Users"],
    )

    app.include_router(
        download_handler.router,
        prefix="/downloads",
        tags=["Downloads"],
    )

    app.include_router(
        discovery_handler.router,
        tags=["Discovery"],
    )

    app.include_router(
        room_handler.router,
        prefix="/rooms",
        tags=["Rooms"],
    )
