from typing import Optional

from khet_mitra.models.fertilizer import FertilizerRecommendationOutput
from khet_mitra.prompts.fertilizer_system_prompt import FERTILIZER_SYSTEM_PROMPT
from khet_mitra.services.genai_flow import run_structured_prompt


def build_fertilizer_prompt_text(
    crop_type: Optional[str] = None, region: Optional[str] = None
) -> str:
    lines = ["Soil Report: attached"]
    if crop_type and crop_type.strip():
        lines.append(f"Crop Type: {crop_type.strip()}")
    if region and region.strip():
        lines.append(f"Region: {region.strip()}")
    return "\n".join(lines)


async def recommend_fertilizers_and_insecticides(
    soil_report_data_uri: str,
    crop_type: Optional[str] = None,
    region: Optional[str] = None,
) -> FertilizerRecommendationOutput:
    return await run_structured_prompt(
        FertilizerRecommendationOutput,
        FERTILIZER_SYSTEM_PROMPT,
        build_fertilizer_prompt_text(crop_type, region),
        [soil_report_data_uri],
        action="fertilizer_recommendation",
    )
