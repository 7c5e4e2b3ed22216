import re
from urllib.parse import quote

from fastapi import HTTPException, status

from khet_mitra.api.websocket.manager import manager
from khet_mitra.collections.chatroom import (
    get_latest_chatroom_messages,
    save_chatroom_message,
)
from khet_mitra.models.chatroom import ChatroomJoinResponse, ChatroomMessage, ChatroomUser
from khet_mitra.models.user import User
from khet_mitra.services.files import build_blob_url
from khet_mitra.services.geocoding_service import get_address_from_coordinates


def room_id_for_location(location: str) -> str:
    slug = re.sub(r"[^a-z0-9]+", "-", location.lower()).strip("-")
    if not slug:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Could not derive a chatroom from the location.",
        )
    return slug


def avatar_for(user: User) -> str:
    if user.photo:
        return build_blob_url(user.photo)
    return f"https://avatar.vercel.sh/{quote(user.name)}.png"


async def join_chatroom(latitude: float, longitude: float) -> ChatroomJoinResponse:
    location = await get_address_from_coordinates(latitude, longitude)
    room_id = room_id_for_location(location)
    messages = await get_latest_chatroom_messages(room_id)
    return ChatroomJoinResponse(room_id=room_id, location=location, messages=messages)


async def post_chatroom_message(room_id: str, user: User, text: str) -> ChatroomMessage:
    text = (text or "").strip()
    if not text:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Message cannot be empty.",
        )
    message = await save_chatroom_message(
        ChatroomMessage(
            room_id=room_id,
            user_id=user.id,
            user=ChatroomUser(name=user.name, avatar=avatar_for(user)),
            text=text,
        )
    )
    await manager.broadcast(
        room_id, message.model_dump_json(by_alias=True, exclude_none=True)
    )
    return message
