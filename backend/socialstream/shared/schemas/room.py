"""
Room Schemas

Request/response models for rooms and chat.
"""

from pydantic import Field

from socialstream.shared.models.room import ChatMessage
from socialstream.shared.schemas.common import BaseSchema


class ChatMessageRequest(BaseSchema):
    """Chat message sent to a room."""

    text: str = Field(min_length=1, max_length=1000)


class ChatExchangeResponse(BaseSchema):
    """The user's message and the bot's reply."""

    message: ChatMessage
    reply: ChatMessage
