"""Weather Union data structures.

Response payloads from the provider look like:

    {
        "message": "",
        "device_type": 1,
        "locality_weather_data": {
            "temperature": 24.5,
            "humidity": 61.2,
            "wind_speed": 1.9,
            "wind_direction": 210.0,
            "rain_intensity": 0,
            "rain_accumulation": null
        }
    }
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

MEASUREMENT_KEYS: tuple[str, ...] = (
    "temperature",
    "humidity",
    "wind_speed",
    "wind_direction",
    "rain_intensity",
    "rain_accumulation",
)


class WeatherErrorKind(Enum):
    """Outcomes other than a usable weather record."""

    ERROR_RETRIEVING_DATA = "error_retrieving_data"
    NOT_SUPPORTED = "not_supported"
    API_KEY_LIMIT_EXHAUSTED = "api_key_limit_exhausted"
    COULD_NOT_AUTHENTICATE = "could_not_authenticate"
    TEMPORARILY_UNAVAILABLE = "temporarily_unavailable"
    UNKNOWN_ERROR = "unknown_error"
    INVALID_RESPONSE = "invalid_response"


@dataclass(frozen=True)
class WeatherError:
    """A protocol-level failure reported by (or inferred from) the provider.

    Attributes:
        kind: Which failure this is.
        message: Provider advisory text, only for TEMPORARILY_UNAVAILABLE.
        status: HTTP status code, only for UNKNOWN_ERROR.
    """

    kind: WeatherErrorKind
    message: str | None = None
    status: int | None = None

    @classmethod
    def error_retrieving_data(cls) -> WeatherError:
        return cls(WeatherErrorKind.ERROR_RETRIEVING_DATA)

    @classmethod
    def not_supported(cls) -> WeatherError:
        return cls(WeatherErrorKind.NOT_SUPPORTED)

    @classmethod
    def api_key_limit_exhausted(cls) -> WeatherError:
        return cls(WeatherErrorKind.API_KEY_LIMIT_EXHAUSTED)

    @classmethod
    def could_not_authenticate(cls) -> WeatherError:
        return cls(WeatherErrorKind.COULD_NOT_AUTHENTICATE)

    @classmethod
    def temporarily_unavailable(cls, message: str) -> WeatherError:
        return cls(WeatherErrorKind.TEMPORARILY_UNAVAILABLE, message=message)

    @classmethod
    def unknown_error(cls, status: int) -> WeatherError:
        return cls(WeatherErrorKind.UNKNOWN_ERROR, status=status)

    @classmethod
    def invalid_response(cls) -> WeatherError:
        return cls(WeatherErrorKind.INVALID_RESPONSE)

    def __str__(self) -> str:
        if self.kind is WeatherErrorKind.TEMPORARILY_UNAVAILABLE:
            return f"{self.kind.value}: {self.message}"
        if self.kind is WeatherErrorKind.UNKNOWN_ERROR:
            return f"{self.kind.value}: HTTP {self.status}"
        return self.kind.value


@dataclass(frozen=True)
class WeatherRecord:
    """Current readings for a location.

    Measurements the provider did not report are 0.0, so a zero value
    may also mean "no reading".

    Attributes:
        device_kind: Sensor hardware class reported as device_type.
        temperature: Air temperature in degrees Celsius.
        humidity: Relative humidity in percent.
        wind_speed: Wind speed in m/s.
        wind_direction: Wind direction in degrees.
        rain_intensity: Rain intensity in mm/min.
        rain_accumulation: Rain accumulated so far today in mm.
    """

    device_kind: int
    temperature: float = 0.0
    humidity: float = 0.0
    wind_speed: float = 0.0
    wind_direction: float = 0.0
    rain_intensity: float = 0.0
    rain_accumulation: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary using the provider's key names."""
        result: dict[str, Any] = {"device_type": self.device_kind}
        for key in MEASUREMENT_KEYS:
            result[key] = getattr(self, key)
        return result


@dataclass(frozen=True)
class RawResponseBody:
    """Decoded 200 response body, before it becomes a WeatherRecord."""

    message: str
    locality_weather_data: dict[str, float | None]
    device_type: int
