"""
Room Handler

Live-viewing rooms and their chat.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from socialstream.api.dependencies import CurrentUser
from socialstream.api.dependencies.services import get_room_service
from socialstream.shared.models.room import ChatMessage, Room
from socialstream.shared.schemas.room import ChatExchangeResponse, ChatMessageRequest
from socialstream.shared.services.room_service import RoomService


router = APIRouter()


@router.get("", response_model=List[Room])
async def list_rooms(
    room_service: RoomService = Depends(get_room_service),
):
    """All rooms."""
    return room_service.list_rooms()


@router.get("/{room_id}", response_model=Room)
async def get_room(
    room_id: str,
    room_service: RoomService = Depends(get_room_service),
):
    """A single room."""
    return room_service.get_room(room_id)


@router.get("/{room_id}/messages", response_model=List[ChatMessage])
async def list_messages(
    room_id: str,
    room_service: RoomService = Depends(get_room_service),
):
    """Chat history of a room, oldest first."""
    return room_service.history(room_id)


@router.post(
    "/{room_id}/messages",
    response_model=ChatExchangeResponse,
    status_code=status.HTTP_201_CREATED,
)
async def send_message(
    room_id: str,
    request: ChatMessageRequest,
    current_user: CurrentUser,
    room_service: RoomService = Depends(get_room_service),
):
    """Send a chat message as the logged-in user and get the bot's reply."""
    message, reply = await room_service.send_message(room_id, current_user, request.text)
    return ChatExchangeResponse(message=message, reply=reply)
