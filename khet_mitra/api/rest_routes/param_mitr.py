from fastapi import APIRouter, Depends, Query

from khet_mitra.core.security import verify_jwt
from khet_mitra.models.chat_session import (
    ParamMitrChatRequest,
    ParamMitrChatResponse,
    WelcomeMessage,
)
from khet_mitra.models.language import Language
from khet_mitra.services.localization import translate
from khet_mitra.services.param_mitr_service import param_mitr_reply

router = APIRouter(prefix="/chat", tags=["Param-Mitr"])


@router.post(
    "/param-mitr",
    response_model=ParamMitrChatResponse,
    response_model_exclude_none=True,
)
async def chat_with_param_mitr(
    request: ParamMitrChatRequest,
    user_payload: dict = Depends(verify_jwt),
) -> ParamMitrChatResponse:
    """
    One question to Param-Mitr without stored history. With `audio_response`
    the reply is also synthesized and its blob reference returned.
    """
    return await param_mitr_reply(
        user_id=user_payload.get("sub"),
        message=request.message,
        language=request.language,
        audio_response=request.audio_response,
    )


@router.get("/welcome", response_model=WelcomeMessage)
async def welcome_message(language: Language = Query(default=Language.ENGLISH)):
    return WelcomeMessage(text=translate(language.value, "chat", "welcomeMessage"))
