"""
Conversion between uploaded files and ``data:`` URIs.

The prompt flows take every image as a data URI of the form
``data:<mimetype>;base64,<encoded_data>``, which is also how the model client
accepts inline media.
"""

import base64
import binascii
import re
from dataclasses import dataclass
from typing import Iterable

from fastapi import HTTPException, UploadFile, status

from .config import settings

DATA_URI_PATTERN = re.compile(
    r"^data:(?P<mime>[\w.+-]+/[\w.+-]+);base64,(?P<data>[A-Za-z0-9+/=\s]*)$"
)

IMAGE_TYPES = ("image/",)
DOCUMENT_TYPES = ("image/", "application/pdf")


@dataclass(frozen=True)
class DataUri:
    mime_type: str
    data: bytes


def file_to_data_uri(data: bytes, mime_type: str) -> str:
    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"


def parse_data_uri(uri: str) -> DataUri:
    match = DATA_URI_PATTERN.match(uri or "")
    if not match:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Expected a data URI in the format 'data:<mimetype>;base64,<encoded_data>'.",
        )
    try:
        data = base64.b64decode(match.group("data"), validate=False)
    except (binascii.Error, ValueError):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Data URI payload is not valid base64.",
        )
    if not data:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Data URI payload is empty.",
        )
    return DataUri(mime_type=match.group("mime").lower(), data=data)


def _is_allowed(mime_type: str, allowed_prefixes: Iterable[str]) -> bool:
    return any(mime_type.startswith(prefix) for prefix in allowed_prefixes)


async def read_upload(
    upload: UploadFile,
    allowed_prefixes: Iterable[str] = IMAGE_TYPES,
) -> DataUri:
    allowed_prefixes = tuple(allowed_prefixes)
    mime_type = (upload.content_type or "").lower()
    if not _is_allowed(mime_type, allowed_prefixes):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unsupported file type '{mime_type or 'unknown'}'.",
        )

    data = await upload.read(settings.MAX_UPLOAD_BYTES + 1)
    if len(data) > settings.MAX_UPLOAD_BYTES:
        raise HTTPException(
            status_code=413,
            detail=f"File is larger than {settings.MAX_UPLOAD_BYTES} bytes.",
        )
    if not data:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Uploaded file is empty.",
        )
    return DataUri(mime_type=mime_type, data=data)


async def upload_to_data_uri(
    upload: UploadFile,
    allowed_prefixes: Iterable[str] = IMAGE_TYPES,
) -> str:
    parsed = await read_upload(upload, allowed_prefixes)
    return file_to_data_uri(parsed.data, parsed.mime_type)
