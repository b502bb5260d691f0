"""Client error types for Weather Union API interactions."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import WeatherError, WeatherErrorKind


class WeatherUnionError(Exception):
    """Base error for Weather Union client failures."""


class WeatherUnionTimeout(WeatherUnionError):
    """Timeout while communicating with the provider."""


class WeatherUnionConnectionError(WeatherUnionError):
    """Network connection to the provider failed."""


class WeatherResponseError(WeatherUnionError):
    """The provider answered, but not with usable weather data.

    Wraps exactly one WeatherError describing the outcome.
    """

    def __init__(self, error: WeatherError) -> None:
        super().__init__(str(error))
        self.error = error

    @property
    def kind(self) -> WeatherErrorKind:
        """Kind of the wrapped error."""
        return self.error.kind


class InvalidLocalityId(WeatherUnionError, ValueError):
    """Locality code is empty or not present in the locality directory."""

    def __init__(self, code: str) -> None:
        super().__init__(f"Invalid locality id: {code!r}")
        self.code = code
