"""Async client for the Weather Union hyperlocal weather API."""

__version__ = "0.1.0"

from .client import DEFAULT_BASE_URL, WeatherUnionClient
from .errors import (
    InvalidLocalityId,
    WeatherResponseError,
    WeatherUnionConnectionError,
    WeatherUnionError,
    WeatherUnionTimeout,
)
from .localities import (
    LocalityEntry,
    LocalityId,
    all_localities,
    find_by_coordinates,
    is_known_locality,
    lookup,
)
from .models import WeatherError, WeatherErrorKind, WeatherRecord
from .response import interpret_response, parse_response

__all__ = [
    "DEFAULT_BASE_URL",
    "InvalidLocalityId",
    "LocalityEntry",
    "LocalityId",
    "WeatherError",
    "WeatherErrorKind",
    "WeatherRecord",
    "WeatherResponseError",
    "WeatherUnionClient",
    "WeatherUnionConnectionError",
    "WeatherUnionError",
    "WeatherUnionTimeout",
    "__version__",
    "all_localities",
    "find_by_coordinates",
    "interpret_response",
    "is_known_locality",
    "lookup",
    "parse_response",
]
