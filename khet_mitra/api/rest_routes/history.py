from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from khet_mitra.collections.advisory_history import get_advisory_records
from khet_mitra.core.security import verify_jwt
from khet_mitra.models.history import AdvisoryKind, AdvisoryRecord

router = APIRouter(prefix="/history", tags=["History"])


@router.get("", response_model=List[AdvisoryRecord])
async def list_history(
    kind: Optional[AdvisoryKind] = Query(default=None),
    limit: int = Query(default=50, ge=1, le=100),
    user_payload: dict = Depends(verify_jwt),
):
    """
    The caller's past advisory results, newest first.
    """
    return await get_advisory_records(user_payload.get("sub"), kind=kind, limit=limit)
