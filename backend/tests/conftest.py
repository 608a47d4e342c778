# backend/tests/conftest.py
import pytest
from unittest.mock import MagicMock
from datetime import date
import os
import sys

# Go up to the project root
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..')))

from backend.app.db.session import init_db, make_engine, make_session_factory
from backend.app.services.clients.clock_client import ClockClient
from backend.app.services.clients.responses import WeatherReading
from backend.app.services.clients.weather_client import WeatherClient
from backend.app.services.diary_service import DiaryService

TODAY = date(2024, 5, 10)


@pytest.fixture
def session_factory():
    engine = make_engine("sqlite:///:memory:")
    init_db(engine)
    yield make_session_factory(engine)
    engine.dispose()


@pytest.fixture
def clock_client():
    clock = MagicMock(spec=ClockClient)
    clock.current_date.return_value = TODAY
    return clock


@pytest.fixture
def weather_client():
    client = MagicMock(spec=WeatherClient)
    client.fetch_weather.return_value = WeatherReading(weather="Clear", icon="01d", temperature=291.45)
    return client


@pytest.fixture
def diary_service(session_factory, weather_client, clock_client):
    return DiaryService(session_factory, weather_client, clock_client)
