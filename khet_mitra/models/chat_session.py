from datetime import datetime
from enum import Enum
from typing import Optional
from uuid import uuid4

from pydantic import AliasChoices, BaseModel, Field

from khet_mitra.models.language import Language


class Role(str, Enum):
    USER = "user"
    MODEL = "model"
    SYSTEM = "system"


class ChatSession(BaseModel):
    id: str = Field(
        default_factory=lambda: uuid4().hex,
        validation_alias=AliasChoices("id", "_id"),
        serialization_alias="_id",
    )
    user_id: str = Field(...)
    title: Optional[str] = Field(default=None)
    language: Language = Field(default=Language.ENGLISH)
    ts: float = Field(default_factory=lambda: datetime.now().timestamp())


class MessageFileData(BaseModel):
    file_uri: str = Field(validation_alias=AliasChoices("file_uri", "fileUri"))
    mime_type: str = Field(
        default="application/octet-stream",
        validation_alias=AliasChoices("mime_type", "mimeType"),
    )


class MessagePart(BaseModel):
    text: Optional[str] = Field(default=None)
    file_data: Optional[MessageFileData] = Field(
        default=None,
        validation_alias=AliasChoices("file_data", "fileData"),
    )


class MessageContent(BaseModel):
    role: Optional[str] = Field(default=None)
    parts: list[MessagePart] = Field(default_factory=list)


class Message(BaseModel):
    id: str = Field(
        default_factory=lambda: uuid4().hex,
        validation_alias=AliasChoices("id", "_id"),
        serialization_alias="_id",
    )
    chat_id: str = Field(...)
    content: MessageContent = Field(...)
    ts: float = Field(default_factory=lambda: datetime.now().timestamp())


class ParamMitrChatRequest(BaseModel):
    message: str = Field(..., description="The user's message to the chatbot.")
    language: Language = Field(
        default=Language.ENGLISH, description="The language of the conversation."
    )
    audio_response: bool = Field(default=False)


class ParamMitrChatOutput(BaseModel):
    response: str = Field(..., description="The chatbot's response to the user.")


class ParamMitrChatResponse(ParamMitrChatOutput):
    audio_url: Optional[str] = Field(default=None)


class SendMessageRequest(BaseModel):
    message: str
    audio_response: bool = False


class ChatTurnResponse(BaseModel):
    user_message: Message
    model_message: Message


class WelcomeMessage(BaseModel):
    text: str
