"""
Structured prompt calls shared by the advisory flows.

Each flow hands a system prompt, the user's text and any uploaded media (as
data URIs) to the chat model and gets back an instance of its output schema.
"""

import logging
from typing import Sequence, Type, TypeVar

from fastapi import HTTPException, status
from langchain_core.messages import BaseMessage, HumanMessage
from langchain_core.prompts import ChatPromptTemplate
from pydantic import BaseModel, ValidationError

from khet_mitra.core.data_uri import parse_data_uri
from khet_mitra.core.genai_client import get_chat_model

logger = logging.getLogger(__name__)

OutputT = TypeVar("OutputT", bound=BaseModel)


def build_media_block(data_uri: str) -> dict:
    parsed = parse_data_uri(data_uri)
    if parsed.mime_type.startswith("image/"):
        return {"type": "image_url", "image_url": data_uri}
    return {"type": "media", "mime_type": parsed.mime_type, "data": parsed.data}


def build_messages(
    system_prompt: str,
    text: str,
    media: Sequence[str] = (),
    history: Sequence[BaseMessage] = (),
) -> list[BaseMessage]:
    prompt = ChatPromptTemplate.from_messages([("system", "{system_prompt}")])
    messages = prompt.format_messages(system_prompt=system_prompt)
    messages.extend(history)
    content = [{"type": "text", "text": text}] + [build_media_block(uri) for uri in media]
    messages.append(HumanMessage(content=content))
    return messages


async def run_structured_prompt(
    schema: Type[OutputT],
    system_prompt: str,
    text: str,
    media: Sequence[str] = (),
    *,
    action: str,
    history: Sequence[BaseMessage] = (),
    model: str | None = None,
) -> OutputT:
    messages = build_messages(system_prompt, text, media, history)
    try:
        structured_model = get_chat_model(model=model).with_structured_output(
            schema, method="json_schema"
        )
    except Exception as e:
        logger.exception("Could not create the chat model for %s", action)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"GenAI service error: {str(e)}",
        ) from e

    try:
        result = await structured_model.ainvoke(messages)
    except (ValidationError, TypeError):
        logger.exception("Invalid model output for %s", action)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Received an invalid response from the AI service.",
        )
    except Exception as e:
        logger.exception("Model invocation failed for %s", action)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"GenAI service error: {str(e)}",
        ) from e

    if result is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Received an empty response from the AI service.",
        )
    if isinstance(result, dict):
        try:
            result = schema.model_validate(result)
        except ValidationError:
            logger.exception("Invalid model output for %s", action)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Received an invalid response from the AI service.",
            )
    return result
