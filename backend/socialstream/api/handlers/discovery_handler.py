"""
Discovery Handler

Search across users and posts, and the points leaderboard.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from socialstream.api.dependencies.services import get_content_service
from socialstream.shared.models.user import User
from socialstream.shared.schemas.post import SearchResponse
from socialstream.shared.services.content_service import ContentService


router = APIRouter()


@router.get("/search", response_model=SearchResponse)
def search(
    q: str = Query(default="", max_length=200, description="Search text"),
    content_service: ContentService = Depends(get_content_service),
):
    """
    Case-insensitive substring search.

    Users match on username or display name, posts on description or tags.
    An empty query returns no results.
    """
    results = content_service.search(q)
    return SearchResponse(query=q, users=results.users, posts=results.posts)


@router.get("/leaderboard", response_model=List[User])
def leaderboard(
    limit: Optional[int] = Query(default=None, ge=1, le=100),
    content_service: ContentService = Depends(get_content_service),
):
    """Users ordered by points, highest first."""
    return content_service.leaderboard(limit)
