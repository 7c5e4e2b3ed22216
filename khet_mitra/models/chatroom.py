from datetime import datetime
from typing import List
from uuid import uuid4

from pydantic import AliasChoices, BaseModel, Field


class ChatroomUser(BaseModel):
    name: str
    avatar: str


class ChatroomMessage(BaseModel):
    id: str = Field(
        default_factory=lambda: uuid4().hex,
        validation_alias=AliasChoices("id", "_id"),
        serialization_alias="_id",
    )
    room_id: str = Field(...)
    user_id: str = Field(...)
    user: ChatroomUser
    text: str
    ts: float = Field(default_factory=lambda: datetime.now().timestamp())


class ChatroomMessageRequest(BaseModel):
    text: str


class ChatroomJoinResponse(BaseModel):
    room_id: str
    location: str
    messages: List[ChatroomMessage]
