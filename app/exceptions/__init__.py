"""Weather service exceptions."""

from .common import (
    WeatherServiceException,
    InvalidInputError,
    UpstreamError,
    LocationNotFoundError,
    UpstreamDataError,
    ConfigurationError,
)

__all__ = [
    "WeatherServiceException",
    "InvalidInputError",
    "UpstreamError",
    "LocationNotFoundError",
    "UpstreamDataError",
    "ConfigurationError",
]
