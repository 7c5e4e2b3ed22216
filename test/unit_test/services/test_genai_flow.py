from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi import HTTPException
from langchain_core.messages import AIMessage, HumanMessage, SystemMessage
from pydantic import BaseModel, ValidationError

from khet_mitra.services.genai_flow import (
    build_media_block,
    build_messages,
    run_structured_prompt,
)


class Answer(BaseModel):
    response: str


def mock_chat_model(result=None, side_effect=None) -> MagicMock:
    structured = MagicMock()
    structured.ainvoke = AsyncMock(return_value=result, side_effect=side_effect)
    model = MagicMock()
    model.with_structured_output.return_value = structured
    return model


def test_image_is_sent_as_image_url():
    uri = "data:image/png;base64,aGVsbG8="
    assert build_media_block(uri) == {"type": "image_url", "image_url": uri}


def test_pdf_is_sent_as_inline_media():
    block = build_media_block("data:application/pdf;base64,aGVsbG8=")
    assert block == {"type": "media", "mime_type": "application/pdf", "data": b"hello"}


def test_messages_have_system_history_and_user_turn():
    messages = build_messages(
        "You are helpful.",
        "Hello",
        ["data:image/png;base64,aGVsbG8="],
        history=[HumanMessage(content="earlier"), AIMessage(content="reply")],
    )
    assert isinstance(messages[0], SystemMessage)
    assert messages[0].content == "You are helpful."
    assert [m.content for m in messages[1:3]] == ["earlier", "reply"]
    assert messages[-1].content[0] == {"type": "text", "text": "Hello"}
    assert messages[-1].content[1]["type"] == "image_url"


@pytest.mark.asyncio
async def test_returns_structured_result():
    model = mock_chat_model(result=Answer(response="ok"))
    with patch("khet_mitra.services.genai_flow.get_chat_model", return_value=model):
        result = await run_structured_prompt(Answer, "system", "hi", action="test")
    assert result == Answer(response="ok")
    model.with_structured_output.assert_called_once_with(Answer, method="json_schema")


@pytest.mark.asyncio
async def test_dict_result_is_validated():
    model = mock_chat_model(result={"response": "ok"})
    with patch("khet_mitra.services.genai_flow.get_chat_model", return_value=model):
        result = await run_structured_prompt(Answer, "system", "hi", action="test")
    assert isinstance(result, Answer)


@pytest.mark.asyncio
async def test_invalid_dict_result_is_500():
    model = mock_chat_model(result={"unexpected": 1})
    with patch("khet_mitra.services.genai_flow.get_chat_model", return_value=model):
        with pytest.raises(HTTPException) as exc_info:
            await run_structured_prompt(Answer, "system", "hi", action="test")
    assert exc_info.value.status_code == 500


@pytest.mark.asyncio
async def test_empty_result_is_500():
    model = mock_chat_model(result=None)
    with patch("khet_mitra.services.genai_flow.get_chat_model", return_value=model):
        with pytest.raises(HTTPException) as exc_info:
            await run_structured_prompt(Answer, "system", "hi", action="test")
    assert exc_info.value.status_code == 500


@pytest.mark.asyncio
async def test_parse_error_is_500():
    try:
        Answer.model_validate({})
    except ValidationError as e:
        error = e
    model = mock_chat_model(side_effect=error)
    with patch("khet_mitra.services.genai_flow.get_chat_model", return_value=model):
        with pytest.raises(HTTPException) as exc_info:
            await run_structured_prompt(Answer, "system", "hi", action="test")
    assert exc_info.value.status_code == 500
    assert exc_info.value.detail == "Received an invalid response from the AI service."


@pytest.mark.asyncio
async def test_service_failure_is_503():
    model = mock_chat_model(side_effect=RuntimeError("quota exceeded"))
    with patch("khet_mitra.services.genai_flow.get_chat_model", return_value=model):
        with pytest.raises(HTTPException) as exc_info:
            await run_structured_prompt(Answer, "system", "hi", action="test")
    assert exc_info.value.status_code == 503
    assert "quota exceeded" in exc_info.value.detail


@pytest.mark.asyncio
async def test_bad_media_is_rejected_before_model_call():
    with patch("khet_mitra.services.genai_flow.get_chat_model") as get_model:
        with pytest.raises(HTTPException) as exc_info:
            await run_structured_prompt(
                Answer, "system", "hi", ["not-a-data-uri"], action="test"
            )
    assert exc_info.value.status_code == 400
    get_model.assert_not_called()
