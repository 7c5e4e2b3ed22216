from khet_mitra.models.soil_analysis import SoilAnalysisOutput
from khet_mitra.prompts.soil_analysis_system_prompt import SOIL_ANALYSIS_SYSTEM_PROMPT
from khet_mitra.services.genai_flow import run_structured_prompt


async def recommend_crops_based_on_soil_analysis(
    soil_report_data_uri: str,
    location: str,
) -> SoilAnalysisOutput:
    """
    Extracts soil test results from the report image and recommends crops for
    the location, with current market rates.
    """
    text = f"Soil Test Report Image: attached\nLocation: {location.strip()}"
    return await run_structured_prompt(
        SoilAnalysisOutput,
        SOIL_ANALYSIS_SYSTEM_PROMPT,
        text,
        [soil_report_data_uri],
        action="soil_analysis",
    )
