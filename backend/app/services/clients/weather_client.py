# backend/app/services/clients/weather_client.py
import logging

from backend.app.core.config import Settings
from backend.app.core.errors import ExternalApiError
from backend.app.services.clients.http import fetch_text
from backend.app.services.clients.responses import WeatherReading, parse_weather

logger = logging.getLogger(__name__)


class WeatherClient:
    """Current weather for the configured city from OpenWeatherMap."""

    def __init__(self, settings: Settings):
        self.api_key = settings.openweather_api_key
        self.api_url = settings.openweather_api_url
        self.city = settings.openweather_city
        self.timeout = settings.http_timeout_seconds

    def fetch_raw(self) -> str:
        if not self.api_key:
            logger.error("OPENWEATHER_API_KEY not found. Cannot fetch weather.")
            raise ExternalApiError("OPENWEATHER_API_KEY is not configured")
        params = {"q": self.city, "appid": self.api_key}
        return fetch_text(self.api_url, params=params, timeout=self.timeout)

    def fetch_weather(self) -> WeatherReading:
        reading = parse_weather(self.fetch_raw())
        logger.info(
            "Fetched weather for %s: %s (%s), %.2f",
            self.city, reading.weather, reading.icon, reading.temperature,
        )
        return reading
