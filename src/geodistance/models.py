"""Coordinate value type consumed by the distance calculator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


class CoordinateLike(Protocol):
    """Anything exposing WGS84 decimal-degree latitude/longitude."""

    @property
    def latitude(self) -> float: ...

    @property
    def longitude(self) -> float: ...


@dataclass(frozen=True)
class Coordinate:
    """Immutable (latitude, longitude) pair in decimal degrees.

    Not validated: latitude is expected in [-90, 90] and longitude in
    [-180, 180], but out-of-range values are carried as given.
    """

    latitude: float
    longitude: float

    def __str__(self) -> str:
        return f"{self.latitude}, {self.longitude}"
