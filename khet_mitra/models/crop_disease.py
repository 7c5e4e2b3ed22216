from pydantic import BaseModel, Field, field_validator


class DiseaseIdentification(BaseModel):
    disease_detected: bool = Field(
        ..., description="Whether or not a disease is detected in the crop."
    )
    likely_disease: str = Field(
        default="", description="The most likely disease affecting the crop, if any."
    )
    confidence_level: float = Field(
        default=0.0,
        description="The confidence level of the disease identification (0-1).",
    )
    suggested_actions: str = Field(
        default="",
        description="Suggested actions to take to address the identified disease.",
    )

    @field_validator("likely_disease", "suggested_actions", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        return "" if value is None else value

    @field_validator("confidence_level", mode="before")
    @classmethod
    def _clamp_confidence(cls, value):
        if value is None:
            return 0.0
        return min(max(float(value), 0.0), 1.0)


class AnalyzeCropDiseaseOutput(BaseModel):
    disease_identification: DiseaseIdentification
