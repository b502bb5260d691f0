"""Locality directory and validated locality identifiers.

The directory is the list of localities Weather Union has stations for.
It ships with the package as ``data/localities.yaml`` and is loaded once,
on first use. Entries are never added, removed or modified at runtime.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from functools import cache
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml

from .errors import InvalidLocalityId

_LOGGER = logging.getLogger(__name__)

DIRECTORY_PATH = Path(__file__).parent / "data" / "localities.yaml"

UNKNOWN_LOCALITY_NAME = "<Unknown LocalityId>"


class DirectoryLoadError(Exception):
    """Error loading the locality directory data file."""


@dataclass(frozen=True)
class LocalityEntry:
    """A single directory entry.

    Attributes:
        code: Locality code (e.g., "ZWL003467").
        name: Human-readable locality name.
        latitude: Latitude in decimal degrees.
        longitude: Longitude in decimal degrees.
    """

    code: str
    name: str
    latitude: float
    longitude: float

    @property
    def coordinates(self) -> tuple[float, float]:
        """(latitude, longitude) pair."""
        return (self.latitude, self.longitude)


@dataclass(frozen=True)
class _Directory:
    entries: tuple[LocalityEntry, ...]
    by_code: Mapping[str, int] = field(repr=False)
    by_coordinates: Mapping[tuple[float, float], int] = field(repr=False)


def _parse_entry(item: dict[str, Any]) -> LocalityEntry:
    try:
        return LocalityEntry(
            code=str(item["code"]),
            name=str(item["name"]),
            latitude=float(item["latitude"]),
            longitude=float(item["longitude"]),
        )
    except (KeyError, TypeError, ValueError) as err:
        raise DirectoryLoadError(f"Malformed locality entry: {item!r}") from err


def load_directory(path: Path) -> tuple[LocalityEntry, ...]:
    """Load directory entries from a YAML file.

    Args:
        path: Path to a YAML file with a top-level ``localities`` list.

    Returns:
        Entries in file order.

    Raises:
        DirectoryLoadError: If the file is missing, malformed, or repeats a code.
    """
    if not path.exists():
        raise DirectoryLoadError(f"File not found: {path}")
    with path.open(encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    entries = tuple(_parse_entry(item) for item in data.get("localities", []))

    seen: set[str] = set()
    for entry in entries:
        if entry.code in seen:
            raise DirectoryLoadError(f"Duplicate locality code: {entry.code}")
        seen.add(entry.code)
    return entries


@cache
def _directory() -> _Directory:
    entries = load_directory(DIRECTORY_PATH)
    _LOGGER.debug("Loaded %d localities from %s", len(entries), DIRECTORY_PATH)
    return _Directory(
        entries=entries,
        by_code=MappingProxyType({e.code: i for i, e in enumerate(entries)}),
        by_coordinates=MappingProxyType(
            {e.coordinates: i for i, e in enumerate(entries)}
        ),
    )


def lookup(code: str) -> LocalityEntry | None:
    """Find the directory entry for a locality code."""
    directory = _directory()
    index = directory.by_code.get(code)
    if index is None:
        return None
    return directory.entries[index]


def is_known_locality(code: str) -> bool:
    """Check whether a code is present in the directory."""
    return code in _directory().by_code


def all_localities() -> tuple[LocalityEntry, ...]:
    """All directory entries, in directory order."""
    return _directory().entries


def find_by_coordinates(latitude: float, longitude: float) -> LocalityEntry | None:
    """Find the entry registered at exactly these coordinates."""
    directory = _directory()
    index = directory.by_coordinates.get((latitude, longitude))
    if index is None:
        return None
    return directory.entries[index]


@dataclass(frozen=True)
class LocalityId:
    """A locality code known to be present in the directory.

    Construction fails with InvalidLocalityId for empty or unknown codes.
    Two ids are equal when their codes are equal.
    """

    code: str

    def __post_init__(self) -> None:
        if not self.code or not is_known_locality(self.code):
            raise InvalidLocalityId(self.code)

    @classmethod
    def from_string(cls, code: str) -> LocalityId:
        """Validate a locality code.

        Raises:
            InvalidLocalityId: If the code is empty or not in the directory.
        """
        return cls(code)

    @classmethod
    def from_coordinates(cls, latitude: float, longitude: float) -> LocalityId | None:
        """Return the locality registered at exactly these coordinates."""
        entry = find_by_coordinates(latitude, longitude)
        if entry is None:
            return None
        return cls(entry.code)

    def entry(self) -> LocalityEntry | None:
        return lookup(self.code)

    def display_name(self) -> str | None:
        """Human-readable name of the locality."""
        entry = self.entry()
        return entry.name if entry is not None else None

    def coordinates(self) -> tuple[float, float] | None:
        """(latitude, longitude) of the locality."""
        entry = self.entry()
        return entry.coordinates if entry is not None else None

    def __str__(self) -> str:
        return f"{self.code} {self.display_name() or UNKNOWN_LOCALITY_NAME}"
