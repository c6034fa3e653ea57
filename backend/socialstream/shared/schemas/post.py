"""
Post Schemas

Request/response models for the feed, tagging, downloads and search.
"""

from typing import List, Optional

from pydantic import Field

from socialstream.shared.models.enums import MediaKind
from socialstream.shared.models.post import Post
from socialstream.shared.models.user import User
from socialstream.shared.schemas.common import BaseSchema


class CreatePostRequest(BaseSchema):
    """
    Request to publish a post.

    `src` is either an external URL (set is_external_link) or an uploaded
    file as a data URI. When `type` is omitted it is inferred from
    `content_type`, the data-URI mime type or the URL extension.
    """

    src: str = Field(min_length=1, description="Media URL or data URI")
    description: str = Field(min_length=1)
    tags: List[str] = Field(default_factory=list, max_length=20)
    type: Optional[MediaKind] = None
    content_type: Optional[str] = Field(default=None, description="Upload mime type")
    is_external_link: bool = False


class TagSuggestionRequest(BaseSchema):
    """Request for AI tag suggestions."""

    description: str = Field(default="", description="Post description")
    image: Optional[str] = Field(default=None, description="Image as data URI or base64")


class TagSuggestionResponse(BaseSchema):
    """Suggested tags."""

    tags: List[str]


class BookmarkRequest(BaseSchema):
    """Request to add a post to downloads."""

    post_id: str = Field(min_length=1)


class BookmarkResponse(BaseSchema):
    """Outcome of a bookmark request."""

    added: bool
    post: Post


class SearchResponse(BaseSchema):
    """Users and posts matching a query."""

    query: str
    users: List[User]
    posts: List[Post]
