"""Interpretation of Weather Union HTTP responses.

The provider uses the status code to signal request-level failures, and
the ``message`` field of a 200 body to signal that the returned readings
should not be trusted (for example when a station is offline).
"""

from __future__ import annotations

import json
import logging
import math
from http import HTTPStatus
from typing import Any

from .errors import WeatherResponseError
from .models import MEASUREMENT_KEYS, RawResponseBody, WeatherError, WeatherRecord

_LOGGER = logging.getLogger(__name__)

_STATUS_ERRORS: dict[int, WeatherError] = {
    HTTPStatus.INTERNAL_SERVER_ERROR: WeatherError.error_retrieving_data(),
    HTTPStatus.BAD_REQUEST: WeatherError.not_supported(),
    HTTPStatus.TOO_MANY_REQUESTS: WeatherError.api_key_limit_exhausted(),
    HTTPStatus.FORBIDDEN: WeatherError.could_not_authenticate(),
}

_DEVICE_TYPE_MAX = 255


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-finite number {name} is not valid JSON")


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and math.isfinite(value)


def _decode_object(body: bytes | str) -> dict[str, Any]:
    payload = json.loads(body, parse_constant=_reject_constant)
    if not isinstance(payload, dict):
        raise ValueError("Response body is not a JSON object")
    return payload


def _advisory_message(payload: dict[str, Any]) -> str | None:
    message = payload.get("message")
    if isinstance(message, str) and message:
        return message
    return None


def _build_raw_body(payload: dict[str, Any]) -> RawResponseBody:
    try:
        message = payload["message"]
        data = payload["locality_weather_data"]
        device_type = payload["device_type"]
    except KeyError as err:
        raise ValueError(f"Response body is missing key {err}") from err

    if not isinstance(message, str):
        raise ValueError("message must be a string")
    if not _is_int(device_type) or not 0 <= device_type <= _DEVICE_TYPE_MAX:
        raise ValueError("device_type must be an integer between 0 and 255")
    if not isinstance(data, dict):
        raise ValueError("locality_weather_data must be an object")

    measurements: dict[str, float | None] = {}
    for key, value in data.items():
        if value is None:
            measurements[key] = None
        elif _is_number(value):
            try:
                measurements[key] = float(value)
            except OverflowError as err:
                raise ValueError(
                    f"locality_weather_data[{key!r}] is out of range"
                ) from err
        else:
            raise ValueError(f"locality_weather_data[{key!r}] must be a number or null")

    return RawResponseBody(
        message=message,
        locality_weather_data=measurements,
        device_type=device_type,
    )


def parse_body(body: bytes | str) -> RawResponseBody:
    """Decode a 200 response body.

    Raises:
        ValueError: If the body is not JSON or does not have the expected shape.
    """
    return _build_raw_body(_decode_object(body))


def build_record(raw: RawResponseBody) -> WeatherRecord:
    """Build a WeatherRecord, using 0.0 for absent or null measurements."""
    values: dict[str, float] = {}
    for key in MEASUREMENT_KEYS:
        value = raw.locality_weather_data.get(key)
        values[key] = value if value is not None else 0.0
    return WeatherRecord(device_kind=raw.device_type, **values)


def parse_response(status: int, body: bytes | str) -> WeatherRecord | WeatherError:
    """Interpret a provider response.

    The status code decides the outcome; the body is only read for 200.
    A 200 whose ``message`` is non-empty is reported as temporarily
    unavailable before the readings are looked at.

    Args:
        status: HTTP status code of the response.
        body: Raw response body.

    Returns:
        The weather record, or the WeatherError describing the failure.
        This function never raises.
    """
    if status != HTTPStatus.OK:
        if error := _STATUS_ERRORS.get(status):
            return error
        return WeatherError.unknown_error(int(status))

    try:
        payload = _decode_object(body)
        if (message := _advisory_message(payload)) is not None:
            return WeatherError.temporarily_unavailable(message)
        raw = _build_raw_body(payload)
    except (ValueError, RecursionError) as err:
        _LOGGER.debug("Invalid response body: %s", err)
        return WeatherError.invalid_response()

    return build_record(raw)


def interpret_response(status: int, body: bytes | str) -> WeatherRecord:
    """Interpret a provider response, raising on anything but a record.

    Raises:
        WeatherResponseError: If the response does not carry usable data.
    """
    result = parse_response(status, body)
    if isinstance(result, WeatherError):
        raise WeatherResponseError(result)
    return result
