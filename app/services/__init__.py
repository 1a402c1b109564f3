"""
Services package initialization.
"""

from app.services.weather_client import WeatherClient

__all__ = [
    "WeatherClient",
]
