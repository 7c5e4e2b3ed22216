from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from khet_mitra.collections.chat_session import (
    delete_chat_session,
    get_chat_sessions_from_user_id,
    get_messages_from_chat_session_id,
    save_chat_session,
)
from khet_mitra.core.security import verify_jwt
from khet_mitra.models.chat_session import (
    ChatSession,
    ChatTurnResponse,
    Message,
    SendMessageRequest,
)
from khet_mitra.models.language import Language
from khet_mitra.services.files import FileType, delete_blobs_under
from khet_mitra.services.param_mitr_service import (
    get_owned_chat_session,
    send_chat_message,
)

router = APIRouter(prefix="/chats", tags=["Chat"])


class CreateChatRequest(BaseModel):
    title: Optional[str] = Field(default=None, max_length=120)
    language: Language = Language.ENGLISH


@router.post("", response_model=ChatSession, status_code=status.HTTP_201_CREATED)
async def create_chat_session(
    request: CreateChatRequest,
    user_payload: dict = Depends(verify_jwt),
):
    """
    Creates a new chat session and returns a permanent chat ID.
    """
    chat = ChatSession(
        user_id=user_payload.get("sub"),
        title=request.title,
        language=request.language,
    )
    return await save_chat_session(chat)


@router.get("", response_model=List[ChatSession], response_model_exclude_none=True)
async def get_user_chat_sessions(user_payload: dict = Depends(verify_jwt)):
    """
    Get all chat sessions for the authenticated user, newest first.
    """
    return await get_chat_sessions_from_user_id(user_payload.get("sub"))


@router.get("/{chat_id}", response_model=ChatSession, response_model_exclude_none=True)
async def get_chat_session(chat_id: str, user_payload: dict = Depends(verify_jwt)):
    return await get_owned_chat_session(chat_id, user_payload.get("sub"))


@router.get(
    "/{chat_id}/messages",
    response_model=List[Message],
    response_model_exclude_none=True,
)
async def get_chat_messages(
    chat_id: str,
    timestamp: Optional[float] = Query(
        default=None,
        description="Filter messages sent after this timestamp (Unix seconds)",
    ),
    limit: Optional[int] = Query(
        default=None, description="Limit the number of messages returned", ge=1, le=100
    ),
    user_payload: dict = Depends(verify_jwt),
):
    """
    Get all messages for a specific chat session.
    Ensures the chat session belongs to the authenticated user before fetching messages.
    """
    await get_owned_chat_session(chat_id, user_payload.get("sub"))
    return await get_messages_from_chat_session_id(chat_id, ts=timestamp, limit=limit)


@router.post(
    "/{chat_id}/messages",
    response_model=ChatTurnResponse,
    response_model_exclude_none=True,
)
async def post_chat_message(
    chat_id: str,
    request: SendMessageRequest,
    user_payload: dict = Depends(verify_jwt),
):
    return await send_chat_message(
        user_id=user_payload.get("sub"),
        chat_id=chat_id,
        message=request.message,
        audio_response=request.audio_response,
    )


@router.delete("/{chat_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user_chat_session(
    chat_id: str, user_payload: dict = Depends(verify_jwt)
):
    """
    Deletes a chat session with its messages and synthesized replies.
    """
    user_id = user_payload.get("sub")
    await get_owned_chat_session(chat_id, user_id)
    await delete_chat_session(chat_id)
    await delete_blobs_under(FileType.AI_CHAT, user_id, chat_id)
    return
