import time
from datetime import timedelta
from unittest.mock import AsyncMock, patch

import jwt
import pytest
from fastapi import HTTPException

from khet_mitra.core.config import settings
from khet_mitra.core.security import (
    ALGORITHM,
    create_access_token,
    decode_access_token,
    get_current_user,
)


def test_token_round_trip_keeps_claims():
    token = create_access_token({"sub": "user-1", "language": "hi"})
    payload = decode_access_token(token)
    assert payload["sub"] == "user-1"
    assert payload["language"] == "hi"
    assert "exp" in payload


def test_token_expires_after_seven_days():
    token = create_access_token({"sub": "user-1"})
    payload = jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[ALGORITHM])
    lifetime = timedelta(seconds=payload["exp"] - time.time())
    assert timedelta(days=7) - timedelta(minutes=1) < lifetime <= timedelta(days=7)


def test_expired_token_is_rejected_with_message():
    token = create_access_token({"sub": "user-1"}, expires_delta=timedelta(seconds=-5))
    with pytest.raises(HTTPException) as exc_info:
        decode_access_token(token)
    assert exc_info.value.status_code == 401
    assert exc_info.value.detail == "Token has expired"


def test_token_signed_with_other_key_is_rejected():
    token = jwt.encode({"sub": "user-1"}, "another-key", algorithm=ALGORITHM)
    with pytest.raises(HTTPException) as exc_info:
        decode_access_token(token)
    assert exc_info.value.detail == "Could not validate credentials"


def test_token_without_subject_is_rejected():
    token = create_access_token({"language": "en"})
    with pytest.raises(HTTPException) as exc_info:
        decode_access_token(token)
    assert exc_info.value.status_code == 401


@pytest.mark.asyncio
async def test_get_current_user_unknown_user():
    with patch(
        "khet_mitra.core.security.get_user_from_id", new=AsyncMock(return_value=None)
    ):
        with pytest.raises(HTTPException) as exc_info:
            await get_current_user({"sub": "missing"})
    assert exc_info.value.status_code == 404


@pytest.mark.asyncio
async def test_get_current_user_returns_stored_user(user):
    with patch(
        "khet_mitra.core.security.get_user_from_id", new=AsyncMock(return_value=user)
    ) as mock_get:
        assert await get_current_user({"sub": user.id}) == user
    mock_get.assert_awaited_once_with(user.id)
