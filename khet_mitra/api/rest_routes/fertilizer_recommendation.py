from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile

from khet_mitra.collections.advisory_history import save_advisory_record
from khet_mitra.core.data_uri import DOCUMENT_TYPES, upload_to_data_uri
from khet_mitra.core.security import verify_jwt
from khet_mitra.models.fertilizer import FertilizerRecommendationOutput
from khet_mitra.models.history import AdvisoryKind, AdvisoryRecord
from khet_mitra.services.fertilizer_service import (
    recommend_fertilizers_and_insecticides,
)

router = APIRouter(prefix="/fertilizer-recommendation", tags=["Fertilizer Recommendation"])


@router.post("", response_model=FertilizerRecommendationOutput)
async def recommend_fertilizers(
    soil_report: UploadFile = File(...),
    crop_type: Optional[str] = Form(default=None),
    region: Optional[str] = Form(default=None),
    user_payload: dict = Depends(verify_jwt),
) -> FertilizerRecommendationOutput:
    """
    Fertilizer and insecticide advice from a soil report. Crop type and region
    are read from the report when not given.
    """
    soil_report_data_uri = await upload_to_data_uri(soil_report, DOCUMENT_TYPES)
    result = await recommend_fertilizers_and_insecticides(
        soil_report_data_uri, crop_type=crop_type, region=region
    )
    await save_advisory_record(
        AdvisoryRecord(
            user_id=user_payload.get("sub"),
            kind=AdvisoryKind.FERTILIZER,
            inputs={
                "soil_report": soil_report.filename,
                "crop_type": crop_type,
                "region": region,
            },
            result=result.model_dump(mode="json"),
        )
    )
    return result
