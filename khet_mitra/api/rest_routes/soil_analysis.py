from fastapi import APIRouter, Depends, File, Form, UploadFile

from khet_mitra.collections.advisory_history import save_advisory_record
from khet_mitra.core.data_uri import DOCUMENT_TYPES, upload_to_data_uri
from khet_mitra.core.security import verify_jwt
from khet_mitra.models.history import AdvisoryKind, AdvisoryRecord
from khet_mitra.models.soil_analysis import SoilAnalysisOutput
from khet_mitra.services.soil_analysis_service import (
    recommend_crops_based_on_soil_analysis,
)

router = APIRouter(prefix="/soil-analysis", tags=["Soil Analysis"])


@router.post("", response_model=SoilAnalysisOutput)
async def analyze_soil_report(
    soil_report: UploadFile = File(...),
    location: str = Form(..., min_length=3, description="Farm location."),
    user_payload: dict = Depends(verify_jwt),
) -> SoilAnalysisOutput:
    """
    Reads a soil test report and recommends crops with market rates.
    """
    soil_report_data_uri = await upload_to_data_uri(soil_report, DOCUMENT_TYPES)
    result = await recommend_crops_based_on_soil_analysis(soil_report_data_uri, location)
    await save_advisory_record(
        AdvisoryRecord(
            user_id=user_payload.get("sub"),
            kind=AdvisoryKind.SOIL_ANALYSIS,
            inputs={"soil_report": soil_report.filename, "location": location},
            result=result.model_dump(mode="json"),
        )
    )
    return result
