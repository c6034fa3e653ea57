"""
User Schemas

Request/response models for authentication and user endpoints.
"""

from typing import Optional

from pydantic import Field

from socialstream.shared.models.user import User
from socialstream.shared.schemas.common import BaseSchema


class RegisterRequest(BaseSchema):
    """Schema for user registration."""

    username: str = Field(min_length=1, max_length=64)
    name: str = Field(min_length=1, max_length=128, description="Display name")
    password: str = Field(min_length=1, description="Plain text password")
    confirm_password: Optional[str] = Field(
        default=None,
        description="Repeat of password; checked when present",
    )


class LoginRequest(BaseSchema):
    """Schema for user login."""

    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class AuthResponse(BaseSchema):
    """Result of a successful registration or login."""

    success: bool = True
    message: str
    user: Optional[User] = None
    session_id: Optional[str] = Field(
        default=None,
        description="Session id issued at login; send as a bearer token",
    )
