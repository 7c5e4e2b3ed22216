from fastapi import HTTPException

from khet_mitra.models.aadhaar import AadhaarInfo
from khet_mitra.models.user import AADHAAR_PATTERN
from khet_mitra.prompts.aadhaar_ocr_system_prompt import AADHAAR_OCR_SYSTEM_PROMPT
from khet_mitra.services.genai_flow import run_structured_prompt


async def extract_aadhaar_info(photo_data_uri: str) -> AadhaarInfo:
    """
    Extracts the cardholder's name and Aadhaar number from a card photo.
    Raises 422 when either field could not be read.
    """
    info = await run_structured_prompt(
        AadhaarInfo,
        AADHAAR_OCR_SYSTEM_PROMPT,
        "Extract the name and the 12-digit Aadhaar number.",
        [photo_data_uri],
        action="extract_aadhaar_info",
    )
    if not info.name or not AADHAAR_PATTERN.match(info.aadhaar_number):
        raise HTTPException(
            status_code=422,
            detail="Could not extract details from the Aadhaar card.",
        )
    return info
