from typing import List

from fastapi import APIRouter, Depends, Query

from khet_mitra.collections.chatroom import get_latest_chatroom_messages
from khet_mitra.core.security import get_current_user, verify_jwt
from khet_mitra.models.chatroom import (
    ChatroomJoinResponse,
    ChatroomMessage,
    ChatroomMessageRequest,
)
from khet_mitra.models.user import User
from khet_mitra.models.weather import Coordinates
from khet_mitra.services.chatroom_service import join_chatroom, post_chatroom_message

router = APIRouter(prefix="/chatroom", tags=["Chatroom"])


@router.post(
    "/join",
    response_model=ChatroomJoinResponse,
    dependencies=[Depends(verify_jwt)],
)
async def join_local_chatroom(request: Coordinates):
    """
    Finds the chatroom of the area around the given coordinates and returns
    its latest messages.
    """
    return await join_chatroom(request.latitude, request.longitude)


@router.get(
    "/{room_id}/messages",
    response_model=List[ChatroomMessage],
    dependencies=[Depends(verify_jwt)],
)
async def get_chatroom_messages(
    room_id: str,
    limit: int = Query(default=50, ge=1, le=100),
):
    return await get_latest_chatroom_messages(room_id, limit=limit)


@router.post("/{room_id}/messages", response_model=ChatroomMessage, status_code=201)
async def send_chatroom_message(
    room_id: str,
    request: ChatroomMessageRequest,
    user: User = Depends(get_current_user),
):
    return await post_chatroom_message(room_id, user, request.text)
