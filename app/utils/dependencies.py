"""
FastAPI dependency injection providers.

The weather client is built once during application startup and stored on
`app.state`; routes receive it through `get_weather_client`, which tests
replace via `app.dependency_overrides`.
"""

import httpx
from fastapi import Request

from app.config import Settings
from app.exceptions import ConfigurationError
from app.services.weather_client import WeatherClient
from app.utils.logger import setup_logger

logger = setup_logger(__name__)


def build_weather_client(settings: Settings) -> WeatherClient:
    """
    Create the process-wide weather client.

    Raises:
        ConfigurationError: if no upstream API key is configured
    """
    if not settings.openweather_api_key:
        raise ConfigurationError("OPENWEATHER_API_KEY is not set")

    http_client = httpx.AsyncClient(timeout=settings.weather_api_timeout)
    logger.info(
        "Weather client initialized",
        extra={
            "event": "client_init",
            "base_url": settings.weather_api_url,
            "timeout": settings.weather_api_timeout,
        },
    )
    return WeatherClient(settings, http_client)


def get_weather_client(request: Request) -> WeatherClient:
    """
    Provide the shared weather client for the request.
    """
    return request.app.state.weather_client
