from typing import List

from fastapi import HTTPException
from motor.motor_asyncio import AsyncIOMotorCollection

from khet_mitra.core.mongodb import get_chatroom_message_collection
from khet_mitra.models.chatroom import ChatroomMessage


async def save_chatroom_message(message: ChatroomMessage) -> ChatroomMessage:
    collection: AsyncIOMotorCollection = get_chatroom_message_collection()
    try:
        payload = message.model_dump(mode="json", exclude_none=True, by_alias=True)
        await collection.replace_one({"_id": message.id}, payload, upsert=True)
        return message
    except Exception:
        raise HTTPException(status_code=500, detail="Error saving chatroom message")


async def get_latest_chatroom_messages(
    room_id: str, limit: int = 50
) -> List[ChatroomMessage]:
    """Latest messages of the room, oldest first."""
    collection: AsyncIOMotorCollection = get_chatroom_message_collection()
    try:
        items = collection.find({"room_id": room_id}).sort("ts", -1).limit(limit)
        messages = [ChatroomMessage.model_validate(item) async for item in items]
    except Exception as e:
        raise HTTPException(
            status_code=500, detail=f"Error getting chatroom messages: {e}"
        )
    messages.reverse()
    return messages
