from typing import List

from pydantic import BaseModel, Field


class RecommendedCrop(BaseModel):
    name: str = Field(..., description="The name of the recommended crop.")
    market_rate: str = Field(
        ...,
        description="The current wholesale market rate for the crop, in INR per quintal. e.g. '₹2275'",
    )


class SoilAnalysisOutput(BaseModel):
    recommended_crops: List[RecommendedCrop] = Field(
        ...,
        description="A list of recommended crops suitable for the given soil conditions, location, and climate.",
    )
    soil_info: str = Field(
        ...,
        description="A summary of the soil analysis results, highlighting key characteristics and deficiencies.",
    )
