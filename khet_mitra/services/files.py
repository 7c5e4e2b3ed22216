import logging
import mimetypes
import re
from enum import Enum

from azure.storage.blob import ContentSettings
from fastapi import HTTPException

from khet_mitra.core.config import settings
from khet_mitra.core.genai_client import get_speech_model
from khet_mitra.services.azure_blob import get_blob_service_client, get_container_client

logger = logging.getLogger(__name__)


class FileType(str, Enum):
    USER_CONTENT = "user-content"
    AI_CHAT = "ai-chat"


CONTAINER_NAMES = {
    FileType.USER_CONTENT: lambda: settings.AZURE_STORAGE_USER_CONTENT_CONTAINER_NAME,
    FileType.AI_CHAT: lambda: settings.AZURE_STORAGE_AI_CHAT_CONTAINER_NAME,
}


class VoiceName(str, Enum):
    KORE = "Kore"


def _clean_path_segment(value: str | None) -> str:
    if not value:
        return ""
    return value.strip().strip("/")


def normalize_blob_name(blob_name: str) -> str:
    cleaned = _clean_path_segment(blob_name)
    segments = [segment.strip() for segment in cleaned.split("/") if segment.strip()]
    return "/".join(re.sub(r"\s+", "-", segment) for segment in segments)


def build_blob_reference(
    file_type: FileType, user_id: str, blob_name: str, path_prefix: str | None = None
) -> tuple[str, str]:
    """
    Returns ('<container>/<user_id>/<prefix>/<name>', '<user_id>/<prefix>/<name>').
    """
    cleaned_user_id = _clean_path_segment(user_id)
    if not cleaned_user_id:
        raise HTTPException(status_code=401, detail="Could not validate credentials")

    cleaned_blob_name = normalize_blob_name(blob_name)
    if not cleaned_blob_name:
        raise HTTPException(status_code=400, detail="blob_name cannot be empty.")

    parts = [cleaned_user_id, normalize_blob_name(path_prefix or ""), cleaned_blob_name]
    name_in_container = "/".join(part for part in parts if part)
    return f"{file_type.value}/{name_in_container}", name_in_container


def split_blob_reference(blob_reference: str) -> tuple[FileType, str]:
    cleaned = _clean_path_segment(blob_reference)
    container, _, blob_name = cleaned.partition("/")
    try:
        file_type = FileType(container)
    except ValueError:
        raise HTTPException(
            status_code=400,
            detail="Blob value must be in '<container>/<path>' format.",
        )
    if not blob_name:
        raise HTTPException(
            status_code=400,
            detail="Blob value must be in '<container>/<path>' format.",
        )
    return file_type, blob_name


def build_blob_url(blob_reference: str) -> str:
    service_url = get_blob_service_client().url.rstrip("/")
    return f"{service_url}/{_clean_path_segment(blob_reference)}"


def _with_extension(blob_name: str, mime_type: str | None) -> str:
    ext = mimetypes.guess_extension(mime_type) if mime_type else None
    if not ext:
        return blob_name
    if mime_type == "image/jpeg" and ext in [".jpe", ".jpeg"]:
        ext = ".jpg"
    if blob_name.lower().endswith(ext):
        return blob_name
    return f"{blob_name}{ext}"


async def upload_bytes(
    data: bytes,
    file_type: FileType,
    user_id: str,
    blob_name: str,
    mime_type: str | None = None,
    path_prefix: str | None = None,
) -> str:
    """
    Uploads bytes to Azure Blob Storage and returns the
    '<container>/<user_id>/<path>/<file.ext>' blob reference.
    """
    blob_reference, name_in_container = build_blob_reference(
        file_type, user_id, _with_extension(blob_name, mime_type), path_prefix
    )
    try:
        container_client = await get_container_client(CONTAINER_NAMES[file_type]())
        blob_client = container_client.get_blob_client(name_in_container)
        if mime_type:
            await blob_client.upload_blob(
                data,
                overwrite=True,
                content_settings=ContentSettings(content_type=mime_type),
            )
        else:
            await blob_client.upload_blob(data, overwrite=True)
    except Exception as e:
        logger.exception("Blob upload failed for %s", blob_reference)
        raise HTTPException(
            status_code=500,
            detail=f"Failed to upload file to blob storage: {str(e)}",
        )
    return blob_reference


async def delete_blob(blob_reference: str) -> None:
    file_type, blob_name = split_blob_reference(blob_reference)
    try:
        container_client = await get_container_client(CONTAINER_NAMES[file_type]())
        await container_client.get_blob_client(blob_name).delete_blob()
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to delete file from blob storage: {str(e)}",
        )


async def delete_blob_quietly(blob_reference: str | None) -> None:
    """Best-effort delete; failures are logged and never raised."""
    if not blob_reference:
        return
    try:
        await delete_blob(blob_reference)
    except HTTPException as exc:
        logger.warning(
            "Blob cleanup skipped for '%s' (status=%s, detail=%s)",
            blob_reference,
            exc.status_code,
            exc.detail,
        )


async def delete_blobs_under(
    file_type: FileType, user_id: str, path_prefix: str | None = None
) -> int:
    """
    Best-effort removal of every blob under '<user_id>/<path_prefix>/', or
    under '<user_id>/' when no prefix is given.
    Returns the number of deleted blobs.
    """
    if path_prefix:
        _, prefix = build_blob_reference(file_type, user_id, path_prefix)
    else:
        prefix = _clean_path_segment(user_id)
        if not prefix:
            raise HTTPException(status_code=401, detail="Could not validate credentials")
    deleted = 0
    try:
        container_client = await get_container_client(CONTAINER_NAMES[file_type]())
        async for blob in container_client.list_blobs(name_starts_with=f"{prefix}/"):
            await container_client.delete_blob(blob.name)
            deleted += 1
    except Exception:
        logger.warning("Blob cleanup under '%s' stopped after %d files", prefix, deleted)
    return deleted


async def text_to_speech_url(
    text: str,
    user_id: str,
    blob_name: str,
    language: str = "same as text",
    voice_name: VoiceName = VoiceName.KORE,
    path_prefix: str | None = None,
) -> str:
    """
    Synthesizes speech for the text and returns the blob reference of the
    uploaded audio.
    """
    if not text or not text.strip():
        raise HTTPException(status_code=400, detail="Text cannot be empty.")
    try:
        tts_response = await get_speech_model().ainvoke(
            f"Say clearly little faster in the language {language}: {text}",
            speech_config={
                "voice_config": {
                    "prebuilt_voice_config": {"voice_name": voice_name.value}
                }
            },
        )
    except Exception as e:
        logger.exception("Text to speech model call failed")
        raise HTTPException(
            status_code=503, detail="Text to speech conversion failed."
        ) from e

    data = tts_response.additional_kwargs.get("audio")
    if not data:
        raise HTTPException(status_code=500, detail="TTS response has no audio data.")

    return await upload_bytes(
        data,
        FileType.AI_CHAT,
        user_id=user_id,
        blob_name=blob_name,
        mime_type="audio/wav",
        path_prefix=path_prefix,
    )
