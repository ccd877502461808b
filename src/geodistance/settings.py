"""Runtime settings for distance calculations, read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

from geodistance.geo import VINCENTY_MAX_ITERATIONS, VINCENTY_TOLERANCE
from geodistance.units import Unit


@dataclass(frozen=True)
class DistanceSettings:
    """Defaults applied by DistanceCalculator."""

    default_unit: Unit = Unit.METER
    vincenty_max_iterations: int = VINCENTY_MAX_ITERATIONS
    vincenty_tolerance: float = VINCENTY_TOLERANCE

    def __post_init__(self):
        if self.vincenty_max_iterations < 1:
            raise ValueError(
                f"vincenty_max_iterations must be >= 1, got {self.vincenty_max_iterations}"
            )
        if not self.vincenty_tolerance > 0:
            raise ValueError(
                f"vincenty_tolerance must be > 0, got {self.vincenty_tolerance}"
            )


def load_default_unit() -> Unit:
    """Read GEODISTANCE_DEFAULT_UNIT, falling back to meters."""
    return Unit.parse(os.getenv("GEODISTANCE_DEFAULT_UNIT", Unit.METER.value))


def load_settings() -> DistanceSettings:
    """Build settings from GEODISTANCE_* environment variables.

    Unset variables keep their defaults. An unknown unit falls back to meters;
    non-numeric iteration or tolerance values raise ValueError.
    """
    return DistanceSettings(
        default_unit=load_default_unit(),
        vincenty_max_iterations=int(
            os.getenv("GEODISTANCE_VINCENTY_MAX_ITERATIONS", VINCENTY_MAX_ITERATIONS)
        ),
        vincenty_tolerance=float(
            os.getenv("GEODISTANCE_VINCENTY_TOLERANCE", VINCENTY_TOLERANCE)
        ),
    )
