from unittest.mock import AsyncMock, MagicMock

import pytest

from socialstream.shared.core.exceptions import RoomNotFoundError, ValidationError
from socialstream.shared.services.room_service import BOT_USERNAME, RoomService


@pytest.fixture()
def responder() -> MagicMock:
    responder = MagicMock()
    responder.reply = AsyncMock(return_value="Nice!")
    return responder


@pytest.fixture()
def room_service(responder: MagicMock) -> RoomService:
    return RoomService(chat_responder=responder)


def test_rooms_are_fixed(room_service: RoomService) -> None:
    rooms = room_service.list_rooms()

    assert [room.id for room in rooms] == ["room1", "room2", "room3"]
    assert room_service.get_room("room2").name == "Funny Videos"


def test_unknown_room(room_service: RoomService) -> None:
    with pytest.raises(RoomNotFoundError):
        room_service.get_room("room9")
    with pytest.raises(RoomNotFoundError):
        room_service.history("room9")


async def test_send_message_appends_user_and_bot(room_service: RoomService, responder, logged_in_user) -> None:
    message, reply = await room_service.send_message("room1", logged_in_user, "hello")

    assert message.username == "admin"
    assert message.text == "hello"
    assert reply.username == BOT_USERNAME
    assert reply.text == "Nice!"
    assert room_service.history("room1") == [message, reply]
    assert room_service.history("room2") == []
    responder.reply.assert_awaited_once_with([], "hello")


async def test_history_is_passed_to_responder(room_service: RoomService, responder, logged_in_user) -> None:
    await room_service.send_message("room1", logged_in_user, "first")
    await room_service.send_message("room1", logged_in_user, "second")

    history, new_message = responder.reply.await_args.args
    assert history == ["admin: first", f"{BOT_USERNAME}: Nice!"]
    assert new_message == "second"


async def test_blank_message_rejected(room_service: RoomService, responder, logged_in_user) -> None:
    with pytest.raises(ValidationError):
        await room_service.send_message("room1", logged_in_user, "   ")

    responder.reply.assert_not_called()
    assert room_service.history("room1") == []
