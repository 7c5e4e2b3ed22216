from uuid import uuid4

from fastapi import HTTPException, status

from khet_mitra.collections.chat_session import (
    get_chat_session_from_id,
    get_messages_from_chat_session_id,
    save_message,
    touch_chat_session,
)
from khet_mitra.core.langchain_message_adapter import (
    chat_messages_to_langchain,
    message_content_with_audio,
    text_to_message_content,
)
from khet_mitra.models.chat_session import (
    ChatSession,
    ChatTurnResponse,
    Message,
    ParamMitrChatOutput,
    ParamMitrChatResponse,
    Role,
)
from khet_mitra.models.language import Language
from khet_mitra.prompts.param_mitr_system_prompt import PARAM_MITR_SYSTEM_PROMPT
from khet_mitra.services.files import text_to_speech_url
from khet_mitra.services.genai_flow import run_structured_prompt

HISTORY_LIMIT = 40


def _require_text(message: str) -> str:
    message = (message or "").strip()
    if not message:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Message cannot be empty.",
        )
    return message


def _user_turn(message: str, language: Language) -> str:
    return (
        f"User's message: {message}\n"
        f"User's preferred language setting: {Language(language).value}"
    )


async def param_mitr_chat(message: str, language: Language) -> ParamMitrChatOutput:
    """
    Single question to the Param-Mitr assistant, without history.
    """
    message = _require_text(message)
    return await run_structured_prompt(
        ParamMitrChatOutput,
        PARAM_MITR_SYSTEM_PROMPT,
        _user_turn(message, language),
        action="param_mitr_chat",
    )


async def param_mitr_reply(
    user_id: str,
    message: str,
    language: Language,
    audio_response: bool = False,
) -> ParamMitrChatResponse:
    output = await param_mitr_chat(message, language)
    audio_url = None
    if audio_response:
        audio_url = await text_to_speech_url(
            text=output.response,
            user_id=user_id,
            blob_name=uuid4().hex,
            language=Language(language).value,
            path_prefix="param-mitr",
        )
    return ParamMitrChatResponse(response=output.response, audio_url=audio_url)


async def get_owned_chat_session(chat_id: str, user_id: str) -> ChatSession:
    chat_session = await get_chat_session_from_id(chat_id)
    if chat_session.user_id != user_id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User does not have access to this chat session",
        )
    return chat_session


async def send_chat_message(
    user_id: str,
    chat_id: str,
    message: str,
    audio_response: bool = False,
) -> ChatTurnResponse:
    """
    Continues a stored conversation: the history is replayed to the model and
    both the user's and the model's message are saved.
    """
    message = _require_text(message)
    chat_session = await get_owned_chat_session(chat_id, user_id)

    history = await get_messages_from_chat_session_id(chat_id)
    output = await run_structured_prompt(
        ParamMitrChatOutput,
        PARAM_MITR_SYSTEM_PROMPT,
        _user_turn(message, chat_session.language),
        history=chat_messages_to_langchain(history[-HISTORY_LIMIT:]),
        action="param_mitr_session_chat",
    )

    # Nothing is stored until the reply, audio included, is ready.
    user_message = Message(
        content=text_to_message_content(message, role=Role.USER), chat_id=chat_id
    )
    audio_url = None
    if audio_response:
        audio_url = await text_to_speech_url(
            text=output.response,
            user_id=user_id,
            blob_name=user_message.id,
            language=chat_session.language.value,
            path_prefix=chat_id,
        )

    user_message = await save_message(user_message)
    model_message = await save_message(
        Message(
            content=message_content_with_audio(
                text=output.response, audio_url=audio_url, role=Role.MODEL
            ),
            chat_id=chat_id,
        )
    )
    await touch_chat_session(chat_id, first_message=None if history else message)
    return ChatTurnResponse(user_message=user_message, model_message=model_message)
