"""
Download Handler

The downloads list: bookmarked posts.
"""

from typing import List

from fastapi import APIRouter, Depends

from socialstream.api.dependencies.services import get_content_service
from socialstream.shared.models.post import Post
from socialstream.shared.schemas.post import BookmarkRequest, BookmarkResponse
from socialstream.shared.services.content_service import ContentService


router = APIRouter()


@router.get("", response_model=List[Post])
def list_downloads(
    content_service: ContentService = Depends(get_content_service),
):
    """Bookmarked posts in the order they were added."""
    return content_service.list_downloads()


@router.post("", response_model=BookmarkResponse)
def add_download(
    request: BookmarkRequest,
    content_service: ContentService = Depends(get_content_service),
):
    """
    Bookmark a post by id.

    Bookmarking the same post again is a no-op reported as added=false.
    """
    post = content_service.get_post(request.post_id)
    added = content_service.bookmark(post)
    return BookmarkResponse(added=added, post=post)
