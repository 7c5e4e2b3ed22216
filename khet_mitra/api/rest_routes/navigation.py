from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from khet_mitra.core.security import get_current_user
from khet_mitra.models.language import Language
from khet_mitra.models.navigation import Dashboard, MenuItem
from khet_mitra.models.user import User
from khet_mitra.services.navigation import build_dashboard, build_menu

router = APIRouter(prefix="/navigation", tags=["Navigation"])


@router.get("/menu", response_model=List[MenuItem])
async def get_menu(
    language: Language = Query(default=Language.ENGLISH),
    path: Optional[str] = Query(default=None, description="Current page path"),
):
    return build_menu(language.value, path)


@router.get("/dashboard", response_model=Dashboard)
async def get_dashboard(
    language: Optional[Language] = Query(default=None),
    user: User = Depends(get_current_user),
):
    """
    Dashboard greeting and cards. Defaults to the user's preferred language.
    """
    language = language or user.language
    return build_dashboard(language.value, name=user.name)
