from langchain_google_genai import (
    ChatGoogleGenerativeAI,
    HarmBlockThreshold,
    HarmCategory,
)

from .config import settings

DEFAULT_SAFETY_SETTINGS = {
    HarmCategory.HARM_CATEGORY_HATE_SPEECH: HarmBlockThreshold.BLOCK_LOW_AND_ABOVE,
}


def get_chat_model(model: str | None = None, **kwargs) -> ChatGoogleGenerativeAI:
    if "google_api_key" not in kwargs and "api_key" not in kwargs:
        kwargs["google_api_key"] = settings.GEMINI_API_KEY
    if "safety_settings" not in kwargs:
        kwargs["safety_settings"] = DEFAULT_SAFETY_SETTINGS
    return ChatGoogleGenerativeAI(model=model or settings.CHAT_MODEL, **kwargs)


def get_speech_model(**kwargs) -> ChatGoogleGenerativeAI:
    """Gemini TTS model; replies carry wav bytes in ``additional_kwargs["audio"]``."""
    kwargs.setdefault("response_modalities", ["AUDIO"])
    return get_chat_model(model=settings.TTS_MODEL, **kwargs)
