"""
Parse models for OpenWeatherMap responses.

Only the fields the service maps are declared; everything else the
provider sends is ignored.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, Field

# 9999-12-31T23:59:59Z, the last instant a datetime can hold
MAX_EPOCH_SECONDS = 253402300799


class UpstreamCondition(BaseModel):
    main: str
    description: str = ""


class UpstreamMain(BaseModel):
    temp: float
    feels_like: float
    humidity: int = Field(..., ge=0, le=100)


class UpstreamWind(BaseModel):
    speed: float = Field(..., ge=0, description="Wind speed in m/s")


class UpstreamSys(BaseModel):
    country: str


class UpstreamCurrentResponse(BaseModel):
    """Body of the provider's `/weather` endpoint."""

    name: str
    sys: UpstreamSys
    main: UpstreamMain
    weather: List[UpstreamCondition] = Field(..., min_length=1)
    wind: UpstreamWind
    dt: int = Field(
        ..., ge=0, le=MAX_EPOCH_SECONDS, description="Observation time, Unix epoch seconds"
    )


class UpstreamForecastMain(BaseModel):
    temp: float


class UpstreamForecastItem(BaseModel):
    dt: int = Field(
        ..., ge=0, le=MAX_EPOCH_SECONDS, description="Forecast time, Unix epoch seconds"
    )
    main: UpstreamForecastMain
    weather: List[UpstreamCondition] = Field(..., min_length=1)


class UpstreamCity(BaseModel):
    name: str
    country: str


class UpstreamForecastResponse(BaseModel):
    """
    Body of the provider's `/forecast` endpoint.

    Entries are kept raw so that only the ones actually served are validated.
    """

    city: UpstreamCity
    entries: List[Dict[str, Any]] = Field(..., alias="list")
