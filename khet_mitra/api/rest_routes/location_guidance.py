from fastapi import APIRouter, Depends

from khet_mitra.collections.advisory_history import save_advisory_record
from khet_mitra.core.security import verify_jwt
from khet_mitra.models.history import AdvisoryKind, AdvisoryRecord
from khet_mitra.models.weather import (
    AddressResponse,
    Coordinates,
    ForecastRequest,
    WeatherForecastOutput,
)
from khet_mitra.services.geocoding_service import get_address_from_coordinates
from khet_mitra.services.weather_service import get_weather_forecast

router = APIRouter(prefix="/location-guidance", tags=["Location Guidance"])


@router.post("/forecast", response_model=WeatherForecastOutput)
async def forecast_with_crop_advice(
    request: ForecastRequest,
    user_payload: dict = Depends(verify_jwt),
) -> WeatherForecastOutput:
    """
    Weekly weather forecast for the location with crops suited to it.
    """
    result = await get_weather_forecast(request.location.strip())
    await save_advisory_record(
        AdvisoryRecord(
            user_id=user_payload.get("sub"),
            kind=AdvisoryKind.WEATHER,
            inputs={"location": request.location},
            result=result.model_dump(mode="json"),
        )
    )
    return result


@router.post(
    "/address",
    response_model=AddressResponse,
    dependencies=[Depends(verify_jwt)],
)
async def address_from_coordinates(request: Coordinates) -> AddressResponse:
    """
    Converts coordinates reported by the device into a readable address.
    """
    address = await get_address_from_coordinates(request.latitude, request.longitude)
    return AddressResponse(address=address)
