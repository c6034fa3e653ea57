"""
Authentication Handler

Handles registration, login, logout and the current session.

ARCHITECTURE:
=============
    Handler → AuthService → Repositories → CollectionStore

AuthService reports user mistakes as AuthResult values. This handler turns
failed results into application exceptions, which the error handler
renders as JSON:

    USERNAME_TAKEN                       → 409 CONFLICT
    MISSING_FIELDS / PASSWORD_*          → 400 VALIDATION_ERROR
    USER_NOT_FOUND / WRONG_PASSWORD      → 401 AUTHENTICATION_ERROR

SESSIONS:
=========
A successful login returns a fresh session id in the body and in the
session cookie. Clients send it back as a bearer token or cookie; logout
deletes that session only.

Handlers are plain functions; FastAPI runs them in its threadpool.
"""

from fastapi import APIRouter, Depends, Response, status

from socialstream.api.dependencies import CurrentUser
from socialstream.api.dependencies.services import get_auth_service
from socialstream.config.settings import settings
from socialstream.shared.core.exceptions import (
    AuthenticationError,
    DuplicateResourceError,
    SocialStreamException,
    ValidationError,
)
from socialstream.shared.models.user import User
from socialstream.shared.schemas.common import ErrorResponse, MessageResponse
from socialstream.shared.schemas.user import AuthResponse, LoginRequest, RegisterRequest
from socialstream.shared.services import auth_service as auth
from socialstream.shared.services.auth_service import AuthResult, AuthService


router = APIRouter()


def _raise_for_result(result: AuthResult) -> None:
    """Raise the application exception matching a failed AuthResult."""
    if result.success:
        return

    details = {"reason": result.error_code}
    exc: SocialStreamException
    if result.error_code == auth.USERNAME_TAKEN:
        exc = DuplicateResourceError(result.message, details=details)
    elif result.error_code in (auth.USER_NOT_FOUND, auth.WRONG_PASSWORD):
        exc = AuthenticationError(result.message, details=details)
    else:
        exc = ValidationError(result.message, details=details)
    raise exc


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
def register(
    user_data: RegisterRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Register a new user.

    The account is created but not logged in.
    """
    result = auth_service.register(
        username=user_data.username,
        display_name=user_data.name,
        password=user_data.password,
        confirm_password=user_data.confirm_password,
    )
    _raise_for_result(result)
    return AuthResponse(message=result.message, user=result.user)


@router.post(
    "/login",
    response_model=AuthResponse,
    responses={401: {"model": ErrorResponse}},
)
def login(
    credentials: LoginRequest,
    response: Response,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Log in and open a new session for this client.

    The session id is returned in the body and set as an HttpOnly cookie.
    """
    result = auth_service.login(
        username=credentials.username,
        password=credentials.password,
    )
    _raise_for_result(result)
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=result.session_id,
        httponly=True,
        samesite="lax",
        secure=settings.is_production,
    )
    return AuthResponse(message=result.message, user=result.user, session_id=result.session_id)


@router.post("/logout", response_model=MessageResponse)
def logout(
    response: Response,
    auth_service: AuthService = Depends(get_auth_service),
):
    """Close this client's session. Succeeds whether or not anyone was logged in."""
    auth_service.logout()
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
    return MessageResponse(message="Logged out.")


@router.get(
    "/me",
    response_model=User,
    responses={401: {"model": ErrorResponse}},
)
def me(current_user: CurrentUser):
    """The logged-in user."""
    return current_user
