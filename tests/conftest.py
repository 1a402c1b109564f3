"""
Common test fixtures and configuration.
"""

from typing import Any, Optional
from unittest.mock import AsyncMock

import httpx
import pytest

from app.config import Settings
from app.services.weather_client import WeatherClient

TEST_API_KEY = "test-key"
BASE_URL = "https://api.openweathermap.org/data/2.5"


def _make_response(
    status_code: int = 200,
    json: Any = None,
    content: Optional[bytes] = None,
    endpoint: str = "weather",
) -> httpx.Response:
    """
    Build an upstream response bound to a request, as httpx returns them.
    """
    request = httpx.Request("GET", f"{BASE_URL}/{endpoint}")
    if content is not None:
        return httpx.Response(status_code, content=content, request=request)
    return httpx.Response(status_code, json=json, request=request)


@pytest.fixture
def upstream_response():
    """
    Factory for mocked upstream responses.
    """
    return _make_response


@pytest.fixture
def settings():
    """
    Settings isolated from the local .env file, with a known API key.
    """
    return Settings(
        _env_file=None,
        openweather_api_key=TEST_API_KEY,
        weather_api_url=BASE_URL,
        weather_api_units="metric",
        forecast_limit=5,
    )


@pytest.fixture
def http_client():
    """
    Mocked httpx client; tests set `get.return_value` or `get.side_effect`.
    """
    return AsyncMock(spec=httpx.AsyncClient)


@pytest.fixture
def weather_client(settings, http_client):
    return WeatherClient(settings, http_client)


@pytest.fixture
def current_payload():
    """Recorded OpenWeatherMap `/weather` body for London."""
    return {
        "coord": {"lon": -0.1257, "lat": 51.5085},
        "weather": [
            {"id": 803, "main": "Clouds", "description": "broken clouds", "icon": "04d"}
        ],
        "base": "stations",
        "main": {
            "temp": 14.3,
            "feels_like": 13.72,
            "temp_min": 13.1,
            "temp_max": 15.2,
            "pressure": 1012,
            "humidity": 76,
        },
        "visibility": 10000,
        "wind": {"speed": 4.12, "deg": 240},
        "clouds": {"all": 75},
        "dt": 1700000000,
        "sys": {"type": 2, "id": 2075535, "country": "GB", "sunrise": 1699946155, "sunset": 1699978412},
        "timezone": 0,
        "id": 2643743,
        "name": "London",
        "cod": 200,
    }


def _forecast_entry(index: int) -> dict:
    conditions = ["Clouds", "Rain", "Clear"]
    return {
        "dt": 1700006400 + index * 10800,
        "main": {"temp": 10.5 + index, "feels_like": 9.0 + index, "humidity": 80},
        "weather": [{"id": 500, "main": conditions[index % 3], "description": "n/a"}],
        "wind": {"speed": 3.0},
        "dt_txt": "",
    }


@pytest.fixture
def forecast_payload():
    """Recorded OpenWeatherMap `/forecast` body for London with eight entries."""
    return {
        "cod": "200",
        "message": 0,
        "cnt": 8,
        "list": [_forecast_entry(i) for i in range(8)],
        "city": {
            "id": 2643743,
            "name": "London",
            "coord": {"lat": 51.5085, "lon": -0.1257},
            "country": "GB",
            "timezone": 0,
        },
    }
