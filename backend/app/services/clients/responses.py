# backend/app/services/clients/responses.py
import datetime
from pydantic import BaseModel, Field, ValidationError

from backend.app.core.errors import ProviderResponseError


# --- Pydantic Models for the provider payloads ---
# Only the handful of fields we actually read are declared; everything else
# in the payload is ignored.

class OpenWeatherMain(BaseModel):
    temp: float


class OpenWeatherCondition(BaseModel):
    main: str
    icon: str


class OpenWeatherResponse(BaseModel):
    main: OpenWeatherMain
    weather: list[OpenWeatherCondition] = Field(..., min_length=1)


class WorldTimeResponse(BaseModel):
    # e.g. "2024-05-05T14:03:11.120381+09:00"
    timestamp: str = Field(..., alias="datetime", min_length=10)


class WeatherReading(BaseModel):
    """The part of a weather report that gets stored with a diary entry."""
    weather: str = Field(..., max_length=50)
    icon: str = Field(..., max_length=50)
    temperature: float


def parse_weather(raw: str) -> WeatherReading:
    """
    Extracts main.temp, weather[0].main and weather[0].icon from an
    OpenWeatherMap current-weather response.
    Raises ProviderResponseError if the JSON is malformed or fields are missing.
    """
    try:
        payload = OpenWeatherResponse.model_validate_json(raw)
        condition = payload.weather[0]
        return WeatherReading(
            weather=condition.main,
            icon=condition.icon,
            temperature=payload.main.temp,
        )
    except ValidationError as e:
        raise ProviderResponseError(f"Unexpected weather response: {e}") from e


def parse_current_date(raw: str) -> datetime.date:
    """The first 10 characters of the 'datetime' field are the provider's local ISO date."""
    try:
        payload = WorldTimeResponse.model_validate_json(raw)
        return datetime.date.fromisoformat(payload.timestamp[:10])
    except ValidationError as e:
        raise ProviderResponseError(f"Unexpected time response: {e}") from e
    except ValueError as e:
        raise ProviderResponseError(f"Time response has no ISO date: {e}") from e
