"""
Post Handler

Feed listing, post creation and AI tag suggestions.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from socialstream.api.dependencies import CurrentUser
from socialstream.api.dependencies.services import get_content_service, get_tag_generator
from socialstream.shared.models.post import Post
from socialstream.shared.schemas.post import (
    CreatePostRequest,
    TagSuggestionRequest,
    TagSuggestionResponse,
)
from socialstream.shared.services.ai_service import TagGenerator
from socialstream.shared.services.content_service import ContentService, infer_media_kind


router = APIRouter()


@router.get("", response_model=List[Post])
def list_posts(
    content_service: ContentService = Depends(get_content_service),
):
    """The feed, most recent first."""
    return content_service.list_posts()


@router.post(
    "",
    response_model=Post,
    status_code=status.HTTP_201_CREATED,
)
def create_post(
    request: CreatePostRequest,
    current_user: CurrentUser,
    content_service: ContentService = Depends(get_content_service),
):
    """
    Publish a post as the logged-in user.

    The author earns the per-post reward and may move up a tier.
    """
    media_kind = request.type or infer_media_kind(request.src, request.content_type)
    return content_service.create_post(
        author=current_user,
        media_kind=media_kind,
        source=request.src,
        description=request.description,
        tags=request.tags,
        is_external_link=request.is_external_link,
    )


@router.post("/tags", response_model=TagSuggestionResponse)
async def suggest_tags(
    request: TagSuggestionRequest,
    tag_generator: TagGenerator = Depends(get_tag_generator),
):
    """
    Suggest tags for a post being composed.

    Always answers 200; without AI access the tags are a fixed fallback set.
    """
    tags = await tag_generator.suggest(request.description or "new content", request.image)
    return TagSuggestionResponse(tags=tags)


@router.get("/{post_id}", response_model=Post)
def get_post(
    post_id: str,
    content_service: ContentService = Depends(get_content_service),
):
    """A single post."""
    return content_service.get_post(post_id)
