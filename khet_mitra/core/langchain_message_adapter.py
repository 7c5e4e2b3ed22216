from typing import Sequence

from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage

from khet_mitra.models.chat_session import (
    Message,
    MessageContent,
    MessageFileData,
    MessagePart,
    Role,
)


def message_text(content: MessageContent) -> str:
    return "\n".join(part.text for part in content.parts if part.text is not None)


def message_content_to_langchain_message(
    content: MessageContent, fallback_role: str = Role.USER
) -> BaseMessage:
    """
    Converts stored content to a LangChain message. Only text parts are
    replayed; stored audio is the spoken form of the same text.
    """
    role = content.role or fallback_role
    text = message_text(content)

    if role == Role.MODEL:
        return AIMessage(content=text)
    if role == Role.SYSTEM:
        return SystemMessage(content=text)
    return HumanMessage(content=text)


def chat_messages_to_langchain(messages: Sequence[Message]) -> list[BaseMessage]:
    return [
        message_content_to_langchain_message(message.content)
        for message in messages
        if message_text(message.content)
    ]


def text_to_message_content(text: str, role: str = Role.USER) -> MessageContent:
    return MessageContent(role=role, parts=[MessagePart(text=text)])


def message_content_with_audio(
    text: str, audio_url: str | None = None, role: str = Role.MODEL
) -> MessageContent:
    parts = [MessagePart(text=text)]
    if audio_url:
        parts.append(
            MessagePart(
                file_data=MessageFileData(file_uri=audio_url, mime_type="audio/wav")
            )
        )
    return MessageContent(role=role, parts=parts)
