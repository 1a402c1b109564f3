"""
This module defines the public weather routes.
"""

from datetime import datetime, UTC
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse

from app.config import Settings, get_settings
from app.exceptions import (
    InvalidInputError,
    LocationNotFoundError,
    UpstreamDataError,
    UpstreamError,
    WeatherServiceException,
)
from app.schemas.weather import (
    CurrentWeather,
    ErrorResponse,
    ForecastResult,
    HealthResponse,
)
from app.services.weather_client import WeatherClient
from app.utils.dependencies import get_weather_client
from app.utils.logger import setup_logger
from app.utils.validators import validate_city, validate_coordinates

logger = setup_logger(__name__)

router = APIRouter(prefix="/api", tags=["weather"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Missing or invalid location"},
    404: {"model": ErrorResponse, "description": "Location unknown to the provider"},
    502: {"model": ErrorResponse, "description": "Weather provider failure"},
}


def _error_title(exc: Exception) -> str:
    if isinstance(exc, LocationNotFoundError):
        return "Location not found"
    if isinstance(exc, UpstreamDataError):
        return "Invalid response from weather provider"
    if isinstance(exc, UpstreamError):
        return "Weather provider unavailable"
    return "Internal server error"


def _error_response(request: Request, exc: Exception, **context) -> JSONResponse:
    """
    Build the JSON error body for a failed request.

    Client input errors carry only the message; everything else also
    carries a detail and the request ID for correlation with the logs.
    """
    if isinstance(exc, InvalidInputError):
        logger.info(
            "Rejected invalid input",
            extra={"event": "invalid_input", "error": exc.message, **context},
        )
        body = ErrorResponse(error=exc.message)
        return JSONResponse(
            status_code=exc.status_code,
            content=body.model_dump(by_alias=True, exclude_none=True),
        )

    request_id = getattr(request.state, "request_id", None)
    status_code = getattr(exc, "status_code", 500)
    if isinstance(exc, WeatherServiceException):
        detail = exc.message
    else:
        detail = "Failed to retrieve weather data"

    logger.error(
        "Error getting weather",
        extra={
            "event": "request_error",
            "path": request.url.path,
            "status_code": status_code,
            "error": str(exc),
            "error_type": type(exc).__name__,
            "request_id": request_id,
            **context,
        },
    )

    body = ErrorResponse(error=_error_title(exc), detail=detail, request_id=request_id)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(by_alias=True, exclude_none=True),
    )


@router.get("/weather", response_model=CurrentWeather, responses=ERROR_RESPONSES)
async def get_current_weather(
    request: Request,
    city: Optional[str] = Query(None, description="City name"),
    weather_client: WeatherClient = Depends(get_weather_client),
):
    """
    Get the current conditions for a city.
    """
    try:
        return await weather_client.get_current_weather(validate_city(city))
    except Exception as e:
        return _error_response(request, e, city=city)


@router.get("/forecast", response_model=ForecastResult, responses=ERROR_RESPONSES)
async def get_forecast(
    request: Request,
    city: Optional[str] = Query(None, description="City name"),
    weather_client: WeatherClient = Depends(get_weather_client),
):
    """
    Get the next forecast entries (up to five, in chronological order) for a city.
    """
    try:
        return await weather_client.get_forecast(validate_city(city))
    except Exception as e:
        return _error_response(request, e, city=city)


@router.get(
    "/weather/coordinates", response_model=CurrentWeather, responses=ERROR_RESPONSES
)
async def get_current_weather_by_coordinates(
    request: Request,
    lat: Optional[str] = Query(None, description="Latitude in [-90, 90]"),
    lon: Optional[str] = Query(None, description="Longitude in [-180, 180]"),
    weather_client: WeatherClient = Depends(get_weather_client),
):
    """
    Get the current conditions for a latitude/longitude pair.
    """
    try:
        latitude, longitude = validate_coordinates(lat, lon)
        return await weather_client.get_current_weather_by_coordinates(latitude, longitude)
    except Exception as e:
        return _error_response(request, e, lat=lat, lon=lon)


@router.get(
    "/forecast/coordinates", response_model=ForecastResult, responses=ERROR_RESPONSES
)
async def get_forecast_by_coordinates(
    request: Request,
    lat: Optional[str] = Query(None, description="Latitude in [-90, 90]"),
    lon: Optional[str] = Query(None, description="Longitude in [-180, 180]"),
    weather_client: WeatherClient = Depends(get_weather_client),
):
    """
    Get the next forecast entries for a latitude/longitude pair.
    """
    try:
        latitude, longitude = validate_coordinates(lat, lon)
        return await weather_client.get_forecast_by_coordinates(latitude, longitude)
    except Exception as e:
        return _error_response(request, e, lat=lat, lon=lon)


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_settings)):
    """
    Health check endpoint that returns service status without calling the provider.

    Startup refuses to run without an API key, so a serving process is
    always configured.
    """
    return HealthResponse(
        status="healthy",
        version=settings.app_version,
        timestamp=datetime.now(UTC).isoformat(),
        services={"openweathermap": settings.weather_api_url},
    )
