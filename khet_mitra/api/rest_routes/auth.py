from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
from pydantic import BaseModel, Field

from khet_mitra.collections.advisory_history import delete_advisory_records_by_user_id
from khet_mitra.collections.chat_session import delete_chat_sessions_by_user_id
from khet_mitra.collections.user import (
    delete_user as db_delete_user,
)
from khet_mitra.collections.user import (
    get_user_from_aadhaar,
    save_user,
    update_user_fields,
)
from khet_mitra.core.data_uri import IMAGE_TYPES, read_upload, upload_to_data_uri
from khet_mitra.core.security import create_access_token, get_current_user
from khet_mitra.models.aadhaar import AadhaarInfo
from khet_mitra.models.language import Language
from khet_mitra.models.user import LoginRequest, User, UserPublic
from khet_mitra.services.aadhaar_service import extract_aadhaar_info
from khet_mitra.services.files import (
    FileType,
    delete_blob_quietly,
    delete_blobs_under,
    upload_bytes,
)
from khet_mitra.services.soil_sensor import simulator

router = APIRouter(prefix="/auth", tags=["Authentication"])


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserPublic


class LocationUpdateRequest(BaseModel):
    location: str = Field(..., max_length=200)


class LanguageUpdateRequest(BaseModel):
    language: Language


@router.post("/login", response_model=Token)
async def login(request_data: LoginRequest):
    """
    Logs in with name and Aadhaar number. A user is created on first login;
    later logins refresh the stored name.
    """
    user = await get_user_from_aadhaar(request_data.aadhaar)
    if user is None:
        user = User(name=request_data.name, aadhaar=request_data.aadhaar)
        user = await save_user(user)
    elif user.name != request_data.name:
        user.name = request_data.name
        user = await save_user(user)

    access_token = create_access_token(
        data={"sub": user.id, "language": user.language.value}
    )
    return Token(access_token=access_token, user=UserPublic.from_user(user))


@router.post("/scan-aadhaar", response_model=AadhaarInfo)
async def scan_aadhaar(photo: UploadFile = File(...)):
    """
    Reads the name and Aadhaar number from a card photo to prefill the login form.
    """
    photo_data_uri = await upload_to_data_uri(photo, IMAGE_TYPES)
    return await extract_aadhaar_info(photo_data_uri)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(user: User = Depends(get_current_user)):
    """
    Tokens are stateless; the client discards its token.
    """
    return


@router.get("/user", response_model=UserPublic)
async def get_user(user: User = Depends(get_current_user)):
    return UserPublic.from_user(user)


@router.put("/user/photo", response_model=UserPublic)
async def update_profile_photo(
    photo: UploadFile = File(...),
    user: User = Depends(get_current_user),
):
    """
    Stores a new profile photo and removes the previous one.
    """
    upload = await read_upload(photo, IMAGE_TYPES)
    blob_reference = await upload_bytes(
        upload.data,
        FileType.USER_CONTENT,
        user_id=user.id,
        blob_name="photo",
        mime_type=upload.mime_type,
        path_prefix="profile",
    )
    if user.photo and user.photo != blob_reference:
        await delete_blob_quietly(user.photo)
    updated = await update_user_fields(user.id, photo=blob_reference)
    return UserPublic.from_user(updated)


@router.put("/user/location", response_model=UserPublic)
async def update_user_location(
    request: LocationUpdateRequest,
    user: User = Depends(get_current_user),
):
    updated = await update_user_fields(user.id, location=request.location.strip())
    return UserPublic.from_user(updated)


@router.put("/user/language", response_model=UserPublic)
async def update_user_language(
    request: LanguageUpdateRequest,
    user: User = Depends(get_current_user),
):
    updated = await update_user_fields(user.id, language=request.language.value)
    return UserPublic.from_user(updated)


@router.delete("/user", status_code=status.HTTP_204_NO_CONTENT)
async def delete_current_user(user: User = Depends(get_current_user)):
    """
    Deletes the authenticated user with their photo, advisory history, chat
    sessions and chat audio.
    """
    await delete_blob_quietly(user.photo)
    await delete_advisory_records_by_user_id(user.id)
    await delete_chat_sessions_by_user_id(user.id)
    await delete_blobs_under(FileType.AI_CHAT, user.id)
    simulator.forget(user.id)
    if not await db_delete_user(user.id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="User not found."
        )
    return
