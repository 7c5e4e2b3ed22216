from typing import List

from fastapi import APIRouter, Query

from khet_mitra.models.language import Language
from khet_mitra.models.marketplace import Product
from khet_mitra.services.marketplace import list_products

router = APIRouter(prefix="/marketplace", tags=["Marketplace"])


@router.get("/products", response_model=List[Product])
async def get_products(language: Language = Query(default=Language.ENGLISH)):
    return list_products(language.value)
