"""
Client for the OpenWeatherMap current conditions and forecast endpoints.
"""

from datetime import datetime, UTC
from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError

from app.config import Settings
from app.exceptions import LocationNotFoundError, UpstreamDataError, UpstreamError
from app.schemas.upstream import (
    UpstreamCurrentResponse,
    UpstreamForecastItem,
    UpstreamForecastResponse,
)
from app.schemas.weather import (
    CurrentConditions,
    CurrentWeather,
    ForecastEntry,
    ForecastResult,
    Location,
)
from app.utils.logger import setup_logger

logger = setup_logger(__name__)

MPS_TO_KPH = 3.6


def epoch_to_datetime(seconds: int) -> datetime:
    return datetime.fromtimestamp(seconds, UTC)


def mps_to_kph(speed: float) -> float:
    return round(speed * MPS_TO_KPH, 1)


def _describe_validation_error(error: ValidationError) -> str:
    first = error.errors()[0]
    field = ".".join(str(part) for part in first["loc"]) or "body"
    return f"{field}: {first['msg']}"


class WeatherClient:
    """
    Issues one GET per operation against the weather provider and maps the
    provider's JSON into the service's response schemas.

    No retries and no caching: every failure propagates to the caller as an
    `UpstreamError` (transport or status) or `UpstreamDataError` (shape).
    """

    def __init__(self, settings: Settings, http_client: Optional[httpx.AsyncClient] = None):
        self.settings = settings
        self.client = http_client or httpx.AsyncClient(
            timeout=settings.weather_api_timeout
        )

    async def close(self):
        await self.client.aclose()

    async def get_current_weather(self, city: str) -> CurrentWeather:
        data = await self._fetch("weather", {"q": city})
        return self._map_current(data)

    async def get_forecast(self, city: str) -> ForecastResult:
        data = await self._fetch("forecast", {"q": city})
        return self._map_forecast(data)

    async def get_current_weather_by_coordinates(self, lat: float, lon: float) -> CurrentWeather:
        data = await self._fetch("weather", {"lat": lat, "lon": lon})
        return self._map_current(data)

    async def get_forecast_by_coordinates(self, lat: float, lon: float) -> ForecastResult:
        data = await self._fetch("forecast", {"lat": lat, "lon": lon})
        return self._map_forecast(data)

    async def _fetch(self, endpoint: str, location: Dict[str, Any]) -> Any:
        url = f"{self.settings.weather_api_url.rstrip('/')}/{endpoint}"
        params = {
            **location,
            "appid": self.settings.openweather_api_key,
            "units": self.settings.weather_api_units,
        }
        log_context = {"endpoint": endpoint, **location}

        logger.info(
            "Fetching weather from external API",
            extra={"event": "api_call", "api": "openweathermap", **log_context},
        )

        try:
            response = await self.client.get(url, params=params)
            response.raise_for_status()
        except httpx.TimeoutException as e:
            logger.error(
                "Weather provider timed out",
                extra={"event": "api_timeout", "error_type": type(e).__name__, **log_context},
            )
            raise UpstreamError("Weather provider timed out") from e
        except httpx.HTTPStatusError as e:
            # str(e) embeds the request URL, credential included
            status = e.response.status_code
            if status == 404:
                logger.warning(
                    "Location not found by weather provider",
                    extra={"event": "api_not_found", "status_code": status, **log_context},
                )
                raise LocationNotFoundError(
                    "Location not found", upstream_status=status
                ) from e
            logger.error(
                "Weather provider returned an error status",
                extra={"event": "api_error", "status_code": status, **log_context},
            )
            raise UpstreamError(
                f"Weather provider returned HTTP {status}", upstream_status=status
            ) from e
        except httpx.HTTPError as e:
            logger.error(
                "Weather provider request failed",
                extra={
                    "event": "api_error",
                    "error": str(e),
                    "error_type": type(e).__name__,
                    **log_context,
                },
            )
            raise UpstreamError("Weather provider request failed") from e

        try:
            return response.json()
        except ValueError as e:
            logger.error(
                "Weather provider returned a non-JSON body",
                extra={"event": "api_bad_data", **log_context},
            )
            raise UpstreamDataError("Weather provider returned invalid JSON") from e

    def _map_current(self, data: Any) -> CurrentWeather:
        try:
            parsed = UpstreamCurrentResponse.model_validate(data)
        except ValidationError as e:
            raise self._data_error("weather", e) from e

        return CurrentWeather(
            location=Location(city=parsed.name, country=parsed.sys.country),
            current=CurrentConditions(
                temp_c=parsed.main.temp,
                feels_like_c=parsed.main.feels_like,
                condition=parsed.weather[0].main,
                humidity=parsed.main.humidity,
                wind_kph=mps_to_kph(parsed.wind.speed),
                updated_at=epoch_to_datetime(parsed.dt),
            ),
        )

    def _map_forecast(self, data: Any) -> ForecastResult:
        try:
            parsed = UpstreamForecastResponse.model_validate(data)
            items = [
                UpstreamForecastItem.model_validate(entry)
                for entry in parsed.entries[: self.settings.forecast_limit]
            ]
        except ValidationError as e:
            raise self._data_error("forecast", e) from e

        return ForecastResult(
            location=Location(city=parsed.city.name, country=parsed.city.country),
            forecast=[
                ForecastEntry(
                    time=epoch_to_datetime(item.dt),
                    temp_c=item.main.temp,
                    condition=item.weather[0].main,
                )
                for item in items
            ],
        )

    @staticmethod
    def _data_error(endpoint: str, error: ValidationError) -> UpstreamDataError:
        description = _describe_validation_error(error)
        logger.error(
            "Weather provider response is missing expected fields",
            extra={
                "event": "api_bad_data",
                "endpoint": endpoint,
                "error": description,
                "error_count": error.error_count(),
            },
        )
        return UpstreamDataError(
            f"Weather provider response is missing expected fields ({description})"
        )
