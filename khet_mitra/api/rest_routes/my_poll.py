from fastapi import APIRouter, Depends

from khet_mitra.core.security import verify_jwt
from khet_mitra.models.soil_sensor import SensorState
from khet_mitra.services.soil_sensor import simulator

router = APIRouter(prefix="/my-poll", tags=["My Poll"])


@router.post("/connect", response_model=SensorState)
async def connect_device(user_payload: dict = Depends(verify_jwt)):
    """
    Tries to connect the user's soil probe. The attempt can fail, leaving the
    device offline.
    """
    return simulator.connect(user_payload.get("sub"))


@router.get("/readings", response_model=SensorState)
async def get_readings(user_payload: dict = Depends(verify_jwt)):
    return simulator.refresh(user_payload.get("sub"))
