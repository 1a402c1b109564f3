class WeatherServiceException(Exception):
    """Base exception for weather service."""

    status_code: int = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidInputError(WeatherServiceException):
    """Raised when a client-supplied parameter is missing or malformed."""

    status_code = 400


class UpstreamError(WeatherServiceException):
    """Raised when the weather provider call fails, times out or returns a non-success status."""

    status_code = 502

    def __init__(self, message: str, upstream_status: int | None = None):
        self.upstream_status = upstream_status
        super().__init__(message)


class LocationNotFoundError(UpstreamError):
    """Raised when the weather provider does not know the requested location."""

    status_code = 404


class UpstreamDataError(WeatherServiceException):
    """Raised when the weather provider response is missing expected fields."""

    status_code = 502


class ConfigurationError(WeatherServiceException):
    """Raised when the application is started with invalid configuration."""
