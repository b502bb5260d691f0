"""HTTP client for the Weather Union external API."""

from __future__ import annotations

import logging
import math
from decimal import Decimal
from typing import Any

import aiohttp

from .errors import (
    WeatherResponseError,
    WeatherUnionConnectionError,
    WeatherUnionTimeout,
)
from .localities import LocalityId
from .models import WeatherError, WeatherRecord
from .response import parse_response

_LOGGER = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://www.weatherunion.com"
API_KEY_HEADER = "x-zomato-api-key"

WEATHER_DATA_PATH = "/gw/weather/external/v0/get_weather_data"
LOCALITY_WEATHER_DATA_PATH = "/gw/weather/external/v0/get_locality_weather_data"


def format_coordinate(value: float) -> str:
    """Format a coordinate in plain positional notation.

    Integral values have no trailing ".0" and exponents are expanded,
    e.g. 12.0 -> "12", 1e-07 -> "0.0000001".
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return format(Decimal(repr(value)).normalize(), "f")


class WeatherUnionClient:
    """Client for current weather readings from Weather Union.

    Every call performs exactly one GET request. Nothing is cached or
    retried between calls.

    Args:
        api_key: API key sent with every request. Not validated locally.
        session: Optional caller-owned session. When omitted, each call
            opens and closes its own session.
        base_url: Provider root URL.
        timeout: Total request timeout in seconds. None defers to the
            session's timeout; a session the client opens itself then has
            no timeout.
    """

    def __init__(
        self,
        api_key: str,
        *,
        session: aiohttp.ClientSession | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float | None = None,
    ) -> None:
        self._api_key = api_key
        self._session = session
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self._base_url!r})"

    def _url(self, path: str, query: str) -> str:
        return f"{self._base_url}{path}?{query}"

    def _headers(self) -> dict[str, str]:
        return {API_KEY_HEADER: self._api_key}

    async def by_coordinates(self, lat: float, long: float) -> WeatherRecord:
        """Fetch readings for a latitude/longitude pair.

        Coordinates are sent as given; the provider decides whether they
        are serviceable.

        Raises:
            WeatherResponseError: If the provider does not return usable data.
            WeatherUnionTimeout: If the request times out.
            WeatherUnionConnectionError: If the request fails at network level.
        """
        query = (
            f"latitude={format_coordinate(lat)}&longitude={format_coordinate(long)}"
        )
        url = self._url(WEATHER_DATA_PATH, query)
        return await self._fetch(url)

    async def by_locality_code(self, code: str) -> WeatherRecord:
        """Fetch readings for a locality code, without checking the directory."""
        url = self._url(LOCALITY_WEATHER_DATA_PATH, f"locality_id={code}")
        return await self._fetch(url)

    async def by_locality(self, locality_id: LocalityId) -> WeatherRecord:
        """Fetch readings for a validated locality."""
        return await self.by_locality_code(locality_id.code)

    async def _fetch(self, url: str) -> WeatherRecord:
        if self._session is not None:
            status, body = await self._get(self._session, url)
        else:
            try:
                async with aiohttp.ClientSession(
                    timeout=aiohttp.ClientTimeout(total=self._timeout)
                ) as session:
                    status, body = await self._get(session, url)
            except aiohttp.ClientError as err:
                raise WeatherUnionConnectionError("Weather request failed") from err

        result = parse_response(status, body)
        if isinstance(result, WeatherError):
            _LOGGER.warning("Weather request to %s failed: %s", url, result)
            raise WeatherResponseError(result)
        return result

    async def _get(self, session: aiohttp.ClientSession, url: str) -> tuple[int, bytes]:
        _LOGGER.debug("GET %s", url)
        # Without an explicit timeout the session's own timeout applies.
        kwargs: dict[str, Any] = {"headers": self._headers()}
        if self._timeout is not None:
            kwargs["timeout"] = aiohttp.ClientTimeout(total=self._timeout)
        try:
            async with session.get(url, **kwargs) as resp:
                body = await resp.read()
                _LOGGER.debug("GET %s returned HTTP %s", url, resp.status)
                return resp.status, body
        except TimeoutError as err:
            _LOGGER.warning("Weather request to %s timed out", url)
            raise WeatherUnionTimeout("Weather request timed out") from err
        except aiohttp.ClientError as err:
            _LOGGER.warning("Weather request to %s failed: %s", url, err)
            raise WeatherUnionConnectionError("Weather request failed") from err
