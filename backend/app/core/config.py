# backend/app/core/config.py
import os
from dotenv import load_dotenv
from pydantic import BaseModel

# Load environment variables from .env.local in the project root
load_dotenv(dotenv_path=os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..', '..', '.env.local')))

DEFAULT_DATABASE_URL = "sqlite:///./weather_diary.db"
OPENWEATHER_API_URL = "https://api.openweathermap.org/data/2.5/weather"
WORLDTIME_API_URL = "http://worldtimeapi.org/api/timezone/Asia/Seoul"


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings(BaseModel):
    """
    Runtime configuration, built once at startup and handed to the clients,
    the engine factory and the app factory.
    """
    database_url: str = DEFAULT_DATABASE_URL
    sql_echo: bool = False

    openweather_api_key: str | None = None
    openweather_api_url: str = OPENWEATHER_API_URL
    openweather_city: str = "seoul"

    # Authoritative "today" comes from here, never from the local clock
    clock_api_url: str = WORLDTIME_API_URL
    http_timeout_seconds: float = 15.0

    scheduler_enabled: bool = True
    scheduler_timezone: str = "Asia/Seoul"
    weather_refresh_hour: int = 1
    weather_refresh_minute: int = 0

    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            database_url=os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL),
            sql_echo=_env_bool("SQL_ECHO", False),
            openweather_api_key=os.getenv("OPENWEATHER_API_KEY"),
            openweather_api_url=os.getenv("OPENWEATHER_API_URL", OPENWEATHER_API_URL),
            openweather_city=os.getenv("OPENWEATHER_CITY", "seoul"),
            clock_api_url=os.getenv("CLOCK_API_URL", WORLDTIME_API_URL),
            http_timeout_seconds=float(os.getenv("HTTP_TIMEOUT_SECONDS", 15)),
            scheduler_enabled=_env_bool("SCHEDULER_ENABLED", True),
            scheduler_timezone=os.getenv("SCHEDULER_TIMEZONE", "Asia/Seoul"),
            weather_refresh_hour=int(os.getenv("WEATHER_REFRESH_HOUR", 1)),
            weather_refresh_minute=int(os.getenv("WEATHER_REFRESH_MINUTE", 0)),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )
