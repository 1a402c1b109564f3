"""
This module defines the response schemas served to API clients.
"""

from datetime import datetime
from typing import List, Optional, Dict

from pydantic import BaseModel, ConfigDict, Field


class ApiModel(BaseModel):
    """
    Base model for client-facing payloads.

    Attributes are snake_case in Python and camelCase on the wire.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class Location(ApiModel):
    city: str = Field(..., description="City name as reported by the provider")
    country: str = Field(..., description="ISO 3166 country code")


class CurrentConditions(ApiModel):
    temp_c: float = Field(..., alias="tempC", description="Temperature in Celsius")
    feels_like_c: float = Field(
        ..., alias="feelsLikeC", description="Perceived temperature in Celsius"
    )
    condition: str = Field(..., description="Weather condition group, e.g. 'Clouds'")
    humidity: int = Field(..., ge=0, le=100, description="Humidity percentage")
    wind_kph: float = Field(..., alias="windKph", ge=0, description="Wind speed in km/h")
    updated_at: datetime = Field(
        ..., alias="updatedAt", description="Observation time (UTC)"
    )


class CurrentWeather(ApiModel):
    """
    Current conditions for a single location.
    """

    location: Location
    current: CurrentConditions


class ForecastEntry(ApiModel):
    time: datetime = Field(..., description="Forecast time (UTC)")
    temp_c: float = Field(..., alias="tempC", description="Temperature in Celsius")
    condition: str = Field(..., description="Weather condition group, e.g. 'Rain'")


class ForecastResult(ApiModel):
    """
    Upcoming forecast entries for a single location.

    Entries keep the chronological order returned by the provider.
    """

    location: Location
    forecast: List[ForecastEntry] = Field(default_factory=list)


class ErrorResponse(ApiModel):
    error: str = Field(..., description="Error message")
    detail: Optional[str] = Field(None, description="Detailed error information")
    request_id: Optional[str] = Field(
        None, alias="requestId", description="Request tracking ID"
    )


class HealthResponse(ApiModel):
    status: str = Field(..., description="Service health status")
    version: str = Field(..., description="API version")
    timestamp: str = Field(..., description="Current timestamp")
    services: Dict[str, str] = Field(..., description="Status of dependent services")
