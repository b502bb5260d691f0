"""Pytest configuration and fixtures for weatherunion tests."""

from __future__ import annotations

import json
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest


@pytest.fixture
def mock_session() -> MagicMock:
    """Create a mock aiohttp ClientSession."""
    import aiohttp

    return MagicMock(spec=aiohttp.ClientSession)


def weather_body(
    *,
    message: str = "",
    device_type: int = 1,
    readings: dict[str, Any] | None = None,
) -> bytes:
    """Encode a provider response body."""
    return json.dumps(
        {
            "message": message,
            "device_type": device_type,
            "locality_weather_data": readings if readings is not None else {},
        }
    ).encode()


def create_mock_response(
    status: int = 200,
    read_data: bytes | None = None,
) -> AsyncMock:
    """Create a configured mock response.

    Args:
        status: HTTP status code
        read_data: Data to return from read() call

    Returns:
        Configured AsyncMock response
    """
    response = AsyncMock()
    response.status = status
    response.read.return_value = read_data if read_data is not None else b""

    response.__aenter__.return_value = response
    response.__aexit__.return_value = None

    return response
