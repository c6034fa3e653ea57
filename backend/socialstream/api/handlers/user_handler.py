"""
User Handler

Public user profiles and their posts.
"""

from typing import List

from fastapi import APIRouter, Depends

from socialstream.api.dependencies.services import get_auth_service, get_content_service
from socialstream.shared.core.exceptions import UserNotFoundError
from socialstream.shared.models.post import Post
from socialstream.shared.models.user import User
from socialstream.shared.services.auth_service import AuthService
from socialstream.shared.services.content_service import ContentService


router = APIRouter()


@router.get("/{user_id}", response_model=User)
def get_user(
    user_id: str,
    auth_service: AuthService = Depends(get_auth_service),
):
    """Public profile of a user."""
    user = auth_service.get_user(user_id)
    if user is None:
        raise UserNotFoundError(user_id)
    return user


@router.get("/{user_id}/posts", response_model=List[Post])
def list_user_posts(
    user_id: str,
    auth_service: AuthService = Depends(get_auth_service),
    content_service: ContentService = Depends(get_content_service),
):
    """Posts by a user, most recent first."""
    if auth_service.get_user(user_id) is None:
        raise UserNotFoundError(user_id)
    return content_service.list_user_posts(user_id)
