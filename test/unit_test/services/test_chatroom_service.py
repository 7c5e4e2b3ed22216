import json
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi import HTTPException

from khet_mitra.api.websocket.manager import ConnectionManager
from khet_mitra.models.chatroom import ChatroomMessage, ChatroomUser
from khet_mitra.models.user import User
from khet_mitra.services.chatroom_service import (
    avatar_for,
    join_chatroom,
    post_chatroom_message,
    room_id_for_location,
)

SERVICE = "khet_mitra.services.chatroom_service"


def test_room_id_is_slug_of_address():
    assert room_id_for_location("Satara, Maharashtra, India") == "satara-maharashtra-india"


def test_room_id_needs_letters_or_digits():
    with pytest.raises(HTTPException) as exc_info:
        room_id_for_location(" ,, ")
    assert exc_info.value.status_code == 400


def test_avatar_defaults_to_generated_image():
    user = User(name="Sita", aadhaar="123456789012")
    assert avatar_for(user) == "https://avatar.vercel.sh/Sita.png"


def test_avatar_name_is_url_encoded():
    user = User(name="Sita Devi", aadhaar="123456789012")
    assert avatar_for(user) == "https://avatar.vercel.sh/Sita%20Devi.png"
    user = User(name="सीता", aadhaar="123456789012")
    assert avatar_for(user) == "https://avatar.vercel.sh/%E0%A4%B8%E0%A5%80%E0%A4%A4%E0%A4%BE.png"


def test_avatar_uses_profile_photo():
    user = User(name="Sita", aadhaar="123456789012", photo="user-content/u/profile/photo.png")
    with patch(f"{SERVICE}.build_blob_url", return_value="https://blob/u/photo.png"):
        assert avatar_for(user) == "https://blob/u/photo.png"


@pytest.mark.asyncio
async def test_join_returns_room_for_address():
    message = ChatroomMessage(
        room_id="karad-maharashtra-india",
        user_id="u2",
        user=ChatroomUser(name="Anil", avatar="https://avatar.vercel.sh/Anil.png"),
        text="Rain expected tomorrow.",
    )
    with patch(
        f"{SERVICE}.get_address_from_coordinates",
        new=AsyncMock(return_value="Karad, Maharashtra, India"),
    ), patch(
        f"{SERVICE}.get_latest_chatroom_messages", new=AsyncMock(return_value=[message])
    ) as latest:
        result = await join_chatroom(17.28, 74.18)

    assert result.room_id == "karad-maharashtra-india"
    assert result.location == "Karad, Maharashtra, India"
    assert result.messages == [message]
    latest.assert_awaited_once_with("karad-maharashtra-india")


@pytest.mark.asyncio
async def test_post_message_is_saved_and_broadcast(user):
    manager = MagicMock()
    manager.broadcast = AsyncMock()
    with patch(
        f"{SERVICE}.save_chatroom_message", new=AsyncMock(side_effect=lambda m: m)
    ), patch(f"{SERVICE}.manager", manager):
        message = await post_chatroom_message("satara", user, "  Good harvest!  ")

    assert message.text == "Good harvest!"
    assert message.user.name == user.name
    room_id, payload = manager.broadcast.call_args.args
    assert room_id == "satara"
    assert json.loads(payload)["text"] == "Good harvest!"
    assert json.loads(payload)["_id"] == message.id


@pytest.mark.asyncio
async def test_post_blank_message_is_rejected(user):
    with patch(f"{SERVICE}.save_chatroom_message", new=AsyncMock()) as save:
        with pytest.raises(HTTPException) as exc_info:
            await post_chatroom_message("satara", user, "   ")
    assert exc_info.value.status_code == 400
    save.assert_not_called()


@pytest.mark.asyncio
async def test_manager_broadcasts_to_room_and_drops_dead_connections():
    manager = ConnectionManager()
    alive, dead, other_room = AsyncMock(), AsyncMock(), AsyncMock()
    dead.send_text.side_effect = RuntimeError("closed")
    for ws, room in [(alive, "satara"), (dead, "satara"), (other_room, "karad")]:
        await manager.connect(ws, room)

    await manager.broadcast("satara", "hello")

    alive.send_text.assert_awaited_once_with("hello")
    other_room.send_text.assert_not_called()
    assert manager.active_connections["satara"] == [alive]

    manager.disconnect(alive, "satara")
    assert "satara" not in manager.active_connections
