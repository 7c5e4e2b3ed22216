from pydantic import BaseModel, Field


class FertilizerRecommendationOutput(BaseModel):
    fertilizer_recommendations: str = Field(
        ...,
        description="Specific fertilizer recommendations for the given crop and soil conditions.",
    )
    insecticide_recommendations: str = Field(
        ...,
        description="Specific insecticide recommendations based on any identified diseases or common pests for the crop and region.",
    )
