"""
Error Handler Middleware

Global exception handling for the API.

Error Response Format:
======================
    {
        "error": {
            "code": "NOT_FOUND",
            "message": "Post with id 'abc-123' not found",
            "details": {}
        }
    }

Exception Handling:
===================
1. SocialStreamException subclasses → Use their status_code and to_dict()
2. Request validation errors → 400 with validation details
3. Other exceptions → 500 with generic message (details hidden)

Usage:
======
    from socialstream.api.middleware.error_handler import setup_exception_handlers

    app = FastAPI()
    setup_exception_handlers(app)
"""

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from socialstream.shared.core.exceptions import SocialStreamException
from socialstream.shared.core.logging import logger


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Set up global exception handlers.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(SocialStreamException)
    async def socialstream_exception_handler(
        request: Request,
        exc: SocialStreamException,
    ) -> JSONResponse:
        """Handle application exceptions."""
        logger.warning(
            "Application error",
            error_code=exc.error_code,
            message=exc.message,
            status_code=exc.status_code,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_dict(),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Handle request bodies or params that don't match their schema."""
        errors = jsonable_encoder(exc.errors())
        logger.warning(
            "Validation error",
            errors=errors,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=400,
            content={
                "error": {
                    "code": "VALIDATION_ERROR",
                    "message": "Request validation failed",
                    "details": {"errors": errors},
                }
            },
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Handle unexpected exceptions.

        Full error details are logged but not exposed to clients.
        """
        logger.error(
            "Unexpected error",
            error=str(exc),
            error_type=type(exc).__name__,
            path=request.url.path,
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                }
            },
        )
