from khet_mitra.models.crop_disease import AnalyzeCropDiseaseOutput
from khet_mitra.prompts.crop_disease_system_prompt import CROP_DISEASE_SYSTEM_PROMPT
from khet_mitra.services.genai_flow import run_structured_prompt


async def analyze_crop_disease_from_image(photo_data_uri: str) -> AnalyzeCropDiseaseOutput:
    """
    Analyzes a photo of a crop to identify potential diseases.
    """
    return await run_structured_prompt(
        AnalyzeCropDiseaseOutput,
        CROP_DISEASE_SYSTEM_PROMPT,
        "Analyze the following image and provide a diagnosis.",
        [photo_data_uri],
        action="analyze_crop_disease",
    )
