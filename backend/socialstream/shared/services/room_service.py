"""
Room Service

Simulated live-viewing rooms with a chat bot.

Rooms are a fixed table. Chat history is kept in process memory per room
and disappears on restart; it is never written to the collection store.

Message Flow:
=============
    send_message(room_id, user, text)
        1. append the user's message to the room history
        2. ask ChatResponder with the earlier history as "username: text" lines
        3. append the bot reply and return both messages
"""

from typing import Dict, List, Optional, Tuple

from socialstream.shared.core.exceptions import RoomNotFoundError, ValidationError
from socialstream.shared.core.logging import get_logger
from socialstream.shared.models.room import ChatMessage, Room
from socialstream.shared.models.user import User
from socialstream.shared.services.ai_service import ChatResponder

logger = get_logger(__name__)


ROOMS: Tuple[Room, ...] = (
    Room(id="room1", name="Sci-Fi Night", viewers=12, current_media="Interstellar Trailer", host="Admin"),
    Room(id="room2", name="Funny Videos", viewers=45, current_media="Cat Fails Compilation", host="pro_gamer"),
    Room(id="room3", name="Music Room", viewers=8, current_media="LoFi Radio", host="dj_master"),
)

BOT_USER_ID = "bot"
BOT_USERNAME = "RoomBot"
BOT_AVATAR = "https://api.dicebear.com/7.x/bottts/svg?seed=bot"


class RoomService:
    """
    Service for rooms and their chat.

    Attributes:
        rooms: Room table keyed by id
        chat_responder: Bot reply generator
    """

    def __init__(
        self,
        chat_responder: Optional[ChatResponder] = None,
        rooms: Tuple[Room, ...] = ROOMS,
    ) -> None:
        self.chat_responder = chat_responder or ChatResponder()
        self.rooms: Dict[str, Room] = {room.id: room for room in rooms}
        self._history: Dict[str, List[ChatMessage]] = {room.id: [] for room in rooms}

    def list_rooms(self) -> List[Room]:
        """All rooms."""
        return list(self.rooms.values())

    def get_room(self, room_id: str) -> Room:
        """
        Get a room by id.

        Raises:
            RoomNotFoundError: If the room does not exist
        """
        room = self.rooms.get(room_id)
        if room is None:
            raise RoomNotFoundError(room_id)
        return room

    def history(self, room_id: str) -> List[ChatMessage]:
        """Chat messages of a room, oldest first."""
        self.get_room(room_id)
        return list(self._history[room_id])

    async def send_message(self, room_id: str, user: User, text: str) -> Tuple[ChatMessage, ChatMessage]:
        """
        Post a chat message and collect the bot's reply.

        Args:
            room_id: Target room
            user: Session user sending the message
            text: Message text

        Returns:
            Tuple of (user_message, bot_message)

        Raises:
            RoomNotFoundError: If the room does not exist
            ValidationError: If text is blank
        """
        self.get_room(room_id)
        if not text or not text.strip():
            raise ValidationError("Message cannot be empty", details={"field": "text"})

        messages = self._history[room_id]
        prior = [f"{m.username}: {m.text}" for m in messages]

        user_message = ChatMessage(
            user_id=user.id,
            username=user.username,
            avatar=user.avatar,
            text=text,
        )
        messages.append(user_message)

        reply_text = await self.chat_responder.reply(prior, text)
        bot_message = ChatMessage(
            user_id=BOT_USER_ID,
            username=BOT_USERNAME,
            avatar=BOT_AVATAR,
            text=reply_text,
        )
        messages.append(bot_message)

        logger.info("Room message sent", room_id=room_id, user_id=user.id)
        return user_message, bot_message
