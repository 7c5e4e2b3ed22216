from typing import Dict, List

from fastapi import APIRouter
from pydantic import BaseModel

from khet_mitra.models.language import LANGUAGE_LABELS, Language
from khet_mitra.services.localization import get_namespace

router = APIRouter(prefix="/i18n", tags=["Localization"])


class LanguageOption(BaseModel):
    code: Language
    label: str


@router.get("/languages", response_model=List[LanguageOption])
async def list_languages():
    return [LanguageOption(code=code, label=LANGUAGE_LABELS[code]) for code in Language]


@router.get("/{language}/{namespace}", response_model=Dict)
async def get_translations(language: Language, namespace: str):
    """
    Translation strings of one namespace. Languages without their own
    namespace get the English strings.
    """
    return get_namespace(language.value, namespace)
