# backend/tests/services/test_clients.py
import json
import pytest
import requests
from unittest.mock import patch, MagicMock
from datetime import date

from backend.app.core.config import Settings
from backend.app.core.errors import ExternalApiError, ProviderResponseError
from backend.app.services.clients.clock_client import ClockClient
from backend.app.services.clients.weather_client import WeatherClient


@pytest.fixture
def settings():
    return Settings(
        openweather_api_key="mock_key",
        openweather_api_url="https://api.openweathermap.org/data/2.5/weather",
        openweather_city="seoul",
        clock_api_url="http://worldtimeapi.org/api/timezone/Asia/Seoul",
        http_timeout_seconds=3,
    )


@pytest.fixture
def mock_openweather_payload():
    # Trimmed current-weather response
    return {
        "coord": {"lon": 126.9778, "lat": 37.5683},
        "weather": [{"id": 803, "main": "Clouds", "description": "broken clouds", "icon": "04d"}],
        "main": {"temp": 293.82, "feels_like": 293.4, "humidity": 58},
        "dt": 1714885200,
        "name": "Seoul",
    }


def _response(body, status_code=200):
    response = MagicMock()
    response.status_code = status_code
    response.text = body if isinstance(body, str) else json.dumps(body)
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(f"{status_code} Error")
    else:
        response.raise_for_status.return_value = None
    return response


@patch('requests.get')
def test_fetch_weather_success(mock_requests_get, settings, mock_openweather_payload):
    mock_requests_get.return_value = _response(mock_openweather_payload)

    reading = WeatherClient(settings).fetch_weather()

    assert reading.weather == "Clouds"
    assert reading.icon == "04d"
    assert reading.temperature == pytest.approx(293.82)

    mock_requests_get.assert_called_once()
    assert mock_requests_get.call_args[0][0] == "https://api.openweathermap.org/data/2.5/weather"
    assert mock_requests_get.call_args.kwargs["params"] == {"q": "seoul", "appid": "mock_key"}
    assert mock_requests_get.call_args.kwargs["timeout"] == 3


@patch('requests.get')
def test_fetch_weather_without_api_key(mock_requests_get, settings):
    client = WeatherClient(settings.model_copy(update={"openweather_api_key": None}))
    with pytest.raises(ExternalApiError):
        client.fetch_weather()
    mock_requests_get.assert_not_called()


@patch('requests.get')
def test_fetch_weather_http_error(mock_requests_get, settings):
    mock_requests_get.return_value = _response({"cod": 401, "message": "Invalid API key"}, status_code=401)
    with pytest.raises(ExternalApiError):
        WeatherClient(settings).fetch_weather()


@patch('requests.get')
def test_fetch_weather_network_error(mock_requests_get, settings):
    mock_requests_get.side_effect = requests.exceptions.ConnectionError("unreachable")
    with pytest.raises(ExternalApiError):
        WeatherClient(settings).fetch_weather()
    # No retries
    mock_requests_get.assert_called_once()


@patch('requests.get')
def test_fetch_weather_malformed_payload(mock_requests_get, settings):
    mock_requests_get.return_value = _response({"main": {"temp": 280.0}, "weather": []})
    with pytest.raises(ProviderResponseError):
        WeatherClient(settings).fetch_weather()


@patch('requests.get')
def test_current_date_success(mock_requests_get, settings):
    mock_requests_get.return_value = _response({
        "abbreviation": "KST",
        "datetime": "2024-05-05T23:59:01.120381+09:00",
        "timezone": "Asia/Seoul",
    })

    assert ClockClient(settings).current_date() == date(2024, 5, 5)
    assert mock_requests_get.call_args[0][0] == "http://worldtimeapi.org/api/timezone/Asia/Seoul"


@patch('requests.get')
def test_current_date_not_json(mock_requests_get, settings):
    mock_requests_get.return_value = _response("<html>maintenance</html>")
    with pytest.raises(ProviderResponseError):
        ClockClient(settings).current_date()
