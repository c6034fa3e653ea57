"""
SocialStream API Application Entry Point

FastAPI application setup with all routers, middleware, and lifecycle management.

Application Architecture:
=========================
┌─────────────────────────────────────────────────────────────────────────────┐
│                           SOCIALSTREAM API                                  │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                             │
│   Middleware:    CORS → request logging → exception handlers                │
│                              │                                              │
│                              ▼                                              │
│   Routers:       Health │ Auth │ Posts │ Users │ Downloads │ Discovery │    │
│                  Rooms                                                      │
│                              │                                              │
│                              ▼                                              │
│   Dependencies:  CollectionStore │ AuthService │ ContentService │           │
│                  TagGenerator │ RoomService (app.state)                     │
│                                                                             │
└─────────────────────────────────────────────────────────────────────────────┘

Lifecycle:
==========
1. Application starts → lifespan startup
2. Collection store initialized (Redis or memory)
3. Application serves requests
4. Application stops → lifespan shutdown
5. Collection store closed

Usage:
======
    # Run with uvicorn
    uvicorn socialstream.api.main:app --host 0.0.0.0 --port 8000 --reload

    # Or programmatically
    from socialstream.api.main import create_application
    app = create_application()
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from socialstream.config.settings import settings
from socialstream.shared.db import init_store, close_store
from socialstream.shared.core.logging import logger
from socialstream.shared.services.room_service import RoomService
from socialstream.api.middleware import setup_exception_handlers, setup_request_logging
from socialstream.api.routes import register_routes


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Startup:
    - Build the collection store for the configured backend

    Shutdown:
    - Close the store's connections
    """
    # ═══════════════════════════════════════════════════════════════════════════
    # STARTUP
    # ═══════════════════════════════════════════════════════════════════════════
    logger.info(
        "Starting SocialStream API",
        app_name=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.APP_ENV,
        store_backend=settings.STORE_BACKEND,
    )

    init_store()

    logger.info("SocialStream API started successfully")

    yield

    # ═══════════════════════════════════════════════════════════════════════════
    # SHUTDOWN
    # ═══════════════════════════════════════════════════════════════════════════
    logger.info("Shutting down SocialStream API")

    close_store()

    logger.info("SocialStream API shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance

    This factory function:
    1. Creates the FastAPI app with settings
    2. Adds middleware (CORS, request logging)
    3. Sets up exception handlers
    4. Registers all routes
    """
    app = FastAPI(
        title=settings.APP_NAME,
        description="Media sharing with tiers, rooms and AI tagging",
        version=settings.APP_VERSION,
        # Only show docs in development
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        lifespan=lifespan,
    )

    # Room chat history lives for the lifetime of the app
    app.state.room_service = RoomService()

    # ═══════════════════════════════════════════════════════════════════════════
    # MIDDLEWARE
    # ═══════════════════════════════════════════════════════════════════════════

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_request_logging(app)

    # ═══════════════════════════════════════════════════════════════════════════
    # EXCEPTION HANDLERS
    # ═══════════════════════════════════════════════════════════════════════════

    setup_exception_handlers(app)

    # ═══════════════════════════════════════════════════════════════════════════
    # ROUTES
    # ═══════════════════════════════════════════════════════════════════════════

    register_routes(app)

    return app


# Create the application instance
app = create_application()
