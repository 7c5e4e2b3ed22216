import re
from uuid import uuid4

from pydantic import AliasChoices, BaseModel, Field, computed_field, field_validator

from khet_mitra.models.language import Language

AADHAAR_PATTERN = re.compile(r"^\d{12}$")


def normalize_aadhaar(value: str) -> str:
    return re.sub(r"\s", "", value or "")


def mask_aadhaar(value: str) -> str:
    digits = normalize_aadhaar(value)
    return f"XXXX XXXX {digits[-4:]}" if digits else ""


class User(BaseModel):
    id: str = Field(
        default_factory=lambda: uuid4().hex,
        validation_alias=AliasChoices("id", "_id"),
        serialization_alias="_id",
    )
    name: str = Field(...)
    aadhaar: str = Field(...)
    photo: str = Field(default="", description="Blob reference of the profile photo.")
    location: str = Field(default="")
    language: Language = Field(default=Language.ENGLISH)


class UserPublic(BaseModel):
    """User as shown to clients; the Aadhaar number is masked."""

    id: str
    name: str
    aadhaar: str = Field(exclude=True)
    photo: str = ""
    location: str = ""
    language: Language = Language.ENGLISH

    @computed_field
    @property
    def masked_aadhaar(self) -> str:
        return mask_aadhaar(self.aadhaar)

    @classmethod
    def from_user(cls, user: User) -> "UserPublic":
        return cls.model_validate(user.model_dump())


class LoginRequest(BaseModel):
    name: str = Field(..., min_length=2, description="Please enter a valid name.")
    aadhaar: str = Field(..., description="12-digit Aadhaar number.")

    @field_validator("name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        value = value.strip()
        if len(value) < 2:
            raise ValueError("Please enter a valid name.")
        return value

    @field_validator("aadhaar")
    @classmethod
    def _validate_aadhaar(cls, value: str) -> str:
        value = normalize_aadhaar(value)
        if not AADHAAR_PATTERN.match(value):
            raise ValueError("Please enter a valid 12-digit Aadhaar number.")
        return value
