"""
Validation of client-supplied location parameters.
"""

import math
from typing import Optional, Tuple, Union

from app.exceptions import InvalidInputError

CITY_REQUIRED_MESSAGE = "City is required"
INVALID_COORDINATES_MESSAGE = "Invalid latitude or longitude"

Coordinate = Union[float, int, str, None]


def validate_city(city: Optional[str]) -> str:
    """
    Check that a city name is present and not blank.

    Returns:
        The city name with surrounding whitespace removed
    """
    if city is None or not city.strip():
        raise InvalidInputError(CITY_REQUIRED_MESSAGE)
    return city.strip()


def _parse_coordinate(value: Coordinate) -> float:
    if value is None or isinstance(value, bool):
        raise InvalidInputError(INVALID_COORDINATES_MESSAGE)
    try:
        parsed = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(INVALID_COORDINATES_MESSAGE) from e
    if not math.isfinite(parsed):
        raise InvalidInputError(INVALID_COORDINATES_MESSAGE)
    return parsed


def validate_coordinates(lat: Coordinate, lon: Coordinate) -> Tuple[float, float]:
    """
    Check a latitude/longitude pair.

    Both values must be finite numbers (numeric strings are accepted),
    with latitude in [-90, 90] and longitude in [-180, 180].

    Returns:
        The parsed (latitude, longitude) pair
    """
    latitude = _parse_coordinate(lat)
    longitude = _parse_coordinate(lon)

    if not -90 <= latitude <= 90 or not -180 <= longitude <= 180:
        raise InvalidInputError(INVALID_COORDINATES_MESSAGE)

    return latitude, longitude
