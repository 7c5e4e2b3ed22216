from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from khet_mitra.core.security import verify_jwt
from khet_mitra.models.language import Language
from khet_mitra.services.files import VoiceName, text_to_speech_url

router = APIRouter(prefix="/files", tags=["Files"])


class TextToSpeechRequest(BaseModel):
    text: str = Field(..., min_length=1)
    blob_name: str = Field(..., min_length=1)
    language: Language | None = None
    voice_name: VoiceName = VoiceName.KORE


class FileUploadResponse(BaseModel):
    url: str


@router.post("/text-to-speech", response_model=FileUploadResponse, status_code=201)
async def synthesize_speech(
    request: TextToSpeechRequest,
    user_payload: dict = Depends(verify_jwt),
) -> FileUploadResponse:
    """
    Converts text to speech, stores the audio and returns its blob reference.
    """
    url = await text_to_speech_url(
        text=request.text,
        user_id=user_payload.get("sub"),
        blob_name=request.blob_name,
        language=request.language.value if request.language else "same as text",
        voice_name=request.voice_name,
        path_prefix="speech",
    )
    return FileUploadResponse(url=url)
