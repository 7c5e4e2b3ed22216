from datetime import datetime
from typing import List, Optional

from fastapi import HTTPException
from motor.motor_asyncio import AsyncIOMotorCollection

from khet_mitra.core.mongodb import (
    get_chat_session_collection,
    get_message_collection,
)
from khet_mitra.models.chat_session import ChatSession, Message

TITLE_LENGTH = 60


async def get_chat_sessions_from_user_id(user_id: str) -> List[ChatSession]:
    """The user's sessions, most recently active first."""
    chat_collection: AsyncIOMotorCollection = get_chat_session_collection()
    try:
        chats = chat_collection.find({"user_id": user_id}).sort("ts", -1)
        return [ChatSession.model_validate(chat) async for chat in chats]
    except Exception as e:
        raise HTTPException(
            status_code=500, detail=str(e) + " - get_chat_sessions_from_user_id"
        )


async def get_chat_session_from_id(chat_id: str) -> ChatSession:
    chat_collection: AsyncIOMotorCollection = get_chat_session_collection()
    response = await chat_collection.find_one({"_id": chat_id})
    if not response:
        raise HTTPException(status_code=404, detail=f"ChatSession {chat_id} not found")
    return ChatSession.model_validate(response)


async def save_chat_session(chat: ChatSession) -> ChatSession:
    chat_collection: AsyncIOMotorCollection = get_chat_session_collection()
    payload = chat.model_dump(mode="json", exclude_none=True, by_alias=True)
    try:
        await chat_collection.replace_one({"_id": chat.id}, payload, upsert=True)
        response = await chat_collection.find_one({"_id": chat.id})
    except Exception:
        raise HTTPException(status_code=500, detail="Error saving chat session")
    return ChatSession.model_validate(response)


async def touch_chat_session(chat_id: str, first_message: Optional[str] = None) -> None:
    """
    Marks the session as active now. An untitled session is named after the
    first message sent to it.
    """
    chat_collection: AsyncIOMotorCollection = get_chat_session_collection()
    try:
        await chat_collection.update_one(
            {"_id": chat_id}, {"$set": {"ts": datetime.now().timestamp()}}
        )
        if first_message:
            await chat_collection.update_one(
                {"_id": chat_id, "title": {"$exists": False}},
                {"$set": {"title": first_message.strip()[:TITLE_LENGTH]}},
            )
    except Exception:
        raise HTTPException(status_code=500, detail="Error updating chat session")


async def get_messages_from_chat_session_id(
    chat_id: str, ts: Optional[float] = None, limit: Optional[int] = None
) -> List[Message]:
    """Messages of the session in the order they were sent."""
    message_collection: AsyncIOMotorCollection = get_message_collection()
    query = {"chat_id": chat_id}
    if ts:
        query["ts"] = {"$gt": ts}
    try:
        messages = message_collection.find(query).sort("ts", 1)
        if limit:
            messages = messages.limit(limit)
        return [Message.model_validate(message) async for message in messages]
    except Exception:
        raise HTTPException(status_code=500, detail="Error getting chat messages")


async def save_message(message: Message) -> Message:
    message_collection: AsyncIOMotorCollection = get_message_collection()
    payload = message.model_dump(mode="json", exclude_none=True, by_alias=True)
    try:
        await message_collection.replace_one({"_id": message.id}, payload, upsert=True)
        response = await message_collection.find_one({"_id": message.id})
    except Exception:
        raise HTTPException(status_code=500, detail="Error saving chat message")
    return Message.model_validate(response)


async def delete_chat_session(chat_id: str) -> None:
    """Deletes the session together with its messages."""
    chat_collection: AsyncIOMotorCollection = get_chat_session_collection()
    message_collection: AsyncIOMotorCollection = get_message_collection()
    try:
        await message_collection.delete_many({"chat_id": chat_id})
        await chat_collection.delete_one({"_id": chat_id})
    except Exception:
        raise HTTPException(status_code=500, detail="Error deleting chat session")


async def delete_chat_sessions_by_user_id(user_id: str) -> int:
    """Deletes every session of the user and their messages. Returns the session count."""
    chat_collection: AsyncIOMotorCollection = get_chat_session_collection()
    message_collection: AsyncIOMotorCollection = get_message_collection()
    try:
        chat_ids = await chat_collection.distinct("_id", {"user_id": user_id})
        if chat_ids:
            await message_collection.delete_many({"chat_id": {"$in": chat_ids}})
        await chat_collection.delete_many({"user_id": user_id})
    except Exception:
        raise HTTPException(status_code=500, detail="Error deleting chat sessions")
    return len(chat_ids)
