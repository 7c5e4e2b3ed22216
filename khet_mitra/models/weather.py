from typing import List, Optional

from pydantic import BaseModel, Field

# --- OpenWeatherMap API Models ---


class GeocodingResponse(BaseModel):
    """Model for the response from the direct and reverse Geocoding API."""

    name: str
    lat: float
    lon: float
    country: str
    state: Optional[str] = None


class WeatherCondition(BaseModel):
    """Describes the weather condition (e.g., 'Clouds', 'Rain')."""

    id: int
    main: str
    description: str
    icon: str


class MainWeatherData(BaseModel):
    """Core weather metrics like temperature and humidity."""

    temp: float
    temp_min: float
    temp_max: float
    humidity: int


class ForecastItem(BaseModel):
    """A single 3-hour forecast entry."""

    dt: int
    main: MainWeatherData
    weather: List[WeatherCondition]
    dt_txt: str


class ForecastResponse(BaseModel):
    """Model for the 5-day / 3-hour forecast response."""

    cod: str
    list: List[ForecastItem]


# --- Khet-Mitra weather models ---


class ForecastDay(BaseModel):
    day: str = Field(..., description="The day of the week.")
    temperature: str = Field(..., description="The predicted temperature in Celsius.")
    condition: str = Field(
        ...,
        description="The predicted weather condition (e.g., Sunny, Cloudy, Rain).",
    )
    humidity: str = Field(..., description="The predicted humidity percentage.")


class WeatherReport(BaseModel):
    forecast: List[ForecastDay]


class WeatherCropAdvice(BaseModel):
    crop_recommendations: List[str] = Field(
        default_factory=list,
        description="A list of crops that are suitable to grow in the forecasted weather conditions for the given location.",
    )


class WeatherForecastOutput(BaseModel):
    forecast: List[ForecastDay]
    crop_recommendations: List[str] = Field(default_factory=list)


class ForecastRequest(BaseModel):
    location: str = Field(
        ...,
        min_length=3,
        description="The city or region in India for which to get the weather forecast.",
    )


class Coordinates(BaseModel):
    latitude: float = Field(..., ge=-90, le=90, description="The latitude of the location.")
    longitude: float = Field(
        ..., ge=-180, le=180, description="The longitude of the location."
    )


class AddressResponse(BaseModel):
    address: str
