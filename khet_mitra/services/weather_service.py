import logging
import random
import re
from collections import Counter, OrderedDict
from datetime import date, datetime, timedelta
from typing import List, Optional

from khet_mitra.core.config import settings
from khet_mitra.models.weather import (
    ForecastDay,
    ForecastResponse,
    WeatherCropAdvice,
    WeatherForecastOutput,
    WeatherReport,
)
from khet_mitra.prompts.weather_crop_advice_system_prompt import (
    WEATHER_CROP_ADVICE_SYSTEM_PROMPT,
)
from khet_mitra.services.genai_flow import run_structured_prompt
from khet_mitra.services.geocoding_service import (
    LOOKUP_ERRORS,
    get_direct_geocoding,
    openweathermap_client,
)

logger = logging.getLogger(__name__)

BASE_URL = "https://api.openweathermap.org/data/2.5"

FORECAST_DAYS = 7
RAINY_LOCATIONS = ("mumbai", "satara")
COORDINATES_PATTERN = re.compile(
    r"^\s*(?P<lat>-?\d+(?:\.\d+)?)\s*,\s*(?P<lon>-?\d+(?:\.\d+)?)\s*$"
)


def parse_coordinates(location: str) -> Optional[tuple[float, float]]:
    match = COORDINATES_PATTERN.match(location or "")
    if not match:
        return None
    return float(match.group("lat")), float(match.group("lon"))


def simulate_weather(
    location: str,
    today: Optional[date] = None,
    rng: Optional[random.Random] = None,
) -> WeatherReport:
    """
    Simulated 7-day forecast used when no weather service is configured.
    """
    today = today or date.today()
    rng = rng or random.Random()
    is_rainy = any(name in location.lower() for name in RAINY_LOCATIONS)

    forecast = []
    for i in range(FORECAST_DAYS):
        day = today + timedelta(days=i)
        forecast.append(
            ForecastDay(
                day=day.strftime("%A"),
                temperature=f"{28 + rng.randint(0, 4)}°C",
                condition="Light Rain" if is_rainy and i < 3 else "Mostly Sunny",
                humidity=f"{60 + rng.randint(0, 19)}%",
            )
        )
    return WeatherReport(forecast=forecast)


def summarize_forecast(forecast: ForecastResponse) -> WeatherReport:
    """
    Collapses 3-hour forecast entries into one entry per calendar day.
    """
    days: "OrderedDict[str, list]" = OrderedDict()
    for item in forecast.list:
        days.setdefault(item.dt_txt[:10], []).append(item)

    result = []
    for day_text, items in days.items():
        conditions = Counter(item.weather[0].main for item in items if item.weather)
        humidity = sum(item.main.humidity for item in items) / len(items)
        result.append(
            ForecastDay(
                day=datetime.strptime(day_text, "%Y-%m-%d").strftime("%A"),
                temperature=f"{round(max(item.main.temp_max for item in items))}°C",
                condition=conditions.most_common(1)[0][0] if conditions else "Unknown",
                humidity=f"{round(humidity)}%",
            )
        )
    return WeatherReport(forecast=result)


async def get_5_day_3_hour_forecast(
    lat: float, lon: float
) -> Optional[ForecastResponse]:
    """
    Fetches the 5-day forecast (with 3-hour intervals) for a given location.

    Returns:
        A ForecastResponse object or None if the request fails.
    """
    params = {
        "lat": lat,
        "lon": lon,
        "appid": settings.OPENWEATHERMAP_API_KEY,
        "units": "metric",
    }
    async with openweathermap_client() as client:
        response = await client.get(f"{BASE_URL}/forecast", params=params)
        if response.status_code == 200:
            return ForecastResponse(**response.json())
    return None


async def _fetch_live_weather(location: str) -> Optional[WeatherReport]:
    coordinates = parse_coordinates(location)
    if coordinates is None:
        place = await get_direct_geocoding(location)
        if place is None:
            return None
        coordinates = (place.lat, place.lon)

    forecast = await get_5_day_3_hour_forecast(*coordinates)
    if forecast is None or not forecast.list:
        return None
    return summarize_forecast(forecast)


async def get_weather(location: str) -> WeatherReport:
    """
    Returns the weather forecast for a location in India.
    """
    logger.info("Fetching weather for: %s", location)
    if settings.OPENWEATHERMAP_API_KEY:
        try:
            report = await _fetch_live_weather(location)
        except LOOKUP_ERRORS:
            logger.warning("Weather service request failed for '%s'", location)
            report = None
        if report is not None:
            return report
        logger.warning("Falling back to simulated weather for '%s'", location)
    return simulate_weather(location)


def format_forecast_lines(forecast: List[ForecastDay]) -> str:
    return "\n".join(
        f"- {day.day}: {day.temperature}, {day.condition}, Humidity: {day.humidity}"
        for day in forecast
    )


async def get_weather_forecast(location: str) -> WeatherForecastOutput:
    """
    Weather forecast for the location plus crops suited to it. The forecast is
    passed through from the weather source, only the crop list comes from the
    model.
    """
    weather = await get_weather(location)
    text = (
        f"Location: {location}\n\n"
        f"Weather Forecast:\n{format_forecast_lines(weather.forecast)}\n\n"
        "Provide a list of suitable crops."
    )
    advice = await run_structured_prompt(
        WeatherCropAdvice,
        WEATHER_CROP_ADVICE_SYSTEM_PROMPT,
        text,
        action="weather_crop_advice",
    )
    return WeatherForecastOutput(
        forecast=weather.forecast,
        crop_recommendations=advice.crop_recommendations or [],
    )
