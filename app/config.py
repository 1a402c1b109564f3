"""
This module contains configuration settings for the application.
"""

from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application configuration using Pydantic BaseSettings.
    Automatically handles environment variable parsing and type conversion.

    The instance is frozen: it is built once at startup and shared read-only
    by every request for the lifetime of the process.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", frozen=True
    )

    # Application settings
    app_name: str = "Weather Proxy API"
    app_version: str = "1.0.0"
    log_level: str = "INFO"

    # Server settings
    host: str = "0.0.0.0"
    port: int = 5000

    # Upstream provider settings
    openweather_api_key: str = ""
    weather_api_url: str = "https://api.openweathermap.org/data/2.5"
    weather_api_timeout: float = 10
    weather_api_units: str = "metric"
    forecast_limit: int = Field(5, ge=0)

    # CORS settings
    cors_origins: List[str] = ["*"]
    cors_allow_credentials: bool = True
    cors_allow_methods: List[str] = ["*"]
    cors_allow_headers: List[str] = ["*"]


@lru_cache()
def get_settings() -> Settings:
    """
    Get the application settings.
    """
    return Settings()
