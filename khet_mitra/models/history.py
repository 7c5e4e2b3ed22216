from datetime import datetime
from enum import Enum
from typing import Any, Dict
from uuid import uuid4

from pydantic import AliasChoices, BaseModel, Field


class AdvisoryKind(str, Enum):
    CROP_DISEASE = "crop_disease"
    SOIL_ANALYSIS = "soil_analysis"
    FERTILIZER = "fertilizer"
    WEATHER = "weather"


class AdvisoryRecord(BaseModel):
    id: str = Field(
        default_factory=lambda: uuid4().hex,
        validation_alias=AliasChoices("id", "_id"),
        serialization_alias="_id",
    )
    user_id: str = Field(...)
    kind: AdvisoryKind = Field(...)
    inputs: Dict[str, Any] = Field(
        default_factory=dict,
        description="Form values of the request, uploads excluded.",
    )
    result: Dict[str, Any] = Field(default_factory=dict)
    ts: float = Field(default_factory=lambda: datetime.now().timestamp())
