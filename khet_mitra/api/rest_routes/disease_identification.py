from fastapi import APIRouter, Depends, File, UploadFile

from khet_mitra.collections.advisory_history import save_advisory_record
from khet_mitra.core.data_uri import IMAGE_TYPES, upload_to_data_uri
from khet_mitra.core.security import verify_jwt
from khet_mitra.models.crop_disease import AnalyzeCropDiseaseOutput
from khet_mitra.models.history import AdvisoryKind, AdvisoryRecord
from khet_mitra.services.crop_disease_service import analyze_crop_disease_from_image

router = APIRouter(prefix="/disease-identification", tags=["Disease Identification"])


@router.post("", response_model=AnalyzeCropDiseaseOutput)
async def identify_crop_disease(
    photo: UploadFile = File(...),
    user_payload: dict = Depends(verify_jwt),
) -> AnalyzeCropDiseaseOutput:
    """
    Analyzes an uploaded crop photo for diseases.
    """
    photo_data_uri = await upload_to_data_uri(photo, IMAGE_TYPES)
    result = await analyze_crop_disease_from_image(photo_data_uri)
    await save_advisory_record(
        AdvisoryRecord(
            user_id=user_payload.get("sub"),
            kind=AdvisoryKind.CROP_DISEASE,
            inputs={"photo": photo.filename},
            result=result.model_dump(mode="json"),
        )
    )
    return result
