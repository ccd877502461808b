"""Distance between two points on Earth: flat, haversine and Vincenty methods."""

from geodistance.distance import DistanceCalculator
from geodistance.geo import (
    EARTH_RADIUS,
    VincentyConvergenceError,
    flat_m,
    haversine_m,
    vincenty_m,
)
from geodistance.models import Coordinate, CoordinateLike
from geodistance.settings import DistanceSettings, load_default_unit, load_settings
from geodistance.units import METERS_PER_MILE, Unit, convert_meters

__all__ = [
    "DistanceCalculator",
    "Coordinate",
    "CoordinateLike",
    "DistanceSettings",
    "load_settings",
    "load_default_unit",
    "Unit",
    "convert_meters",
    "METERS_PER_MILE",
    "EARTH_RADIUS",
    "VincentyConvergenceError",
    "flat_m",
    "haversine_m",
    "vincenty_m",
]
