from pydantic import BaseModel, Field, field_validator

from khet_mitra.models.user import normalize_aadhaar


class AadhaarInfo(BaseModel):
    name: str = Field(default="", description="The full name of the cardholder.")
    aadhaar_number: str = Field(default="", description="The 12-digit Aadhaar number.")

    @field_validator("name", mode="before")
    @classmethod
    def _strip_name(cls, value):
        return (value or "").strip()

    @field_validator("aadhaar_number", mode="before")
    @classmethod
    def _remove_spaces(cls, value):
        return normalize_aadhaar(value)
