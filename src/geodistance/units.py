"""Distance units and the meters → unit conversion."""

from __future__ import annotations

import logging
from enum import Enum

logger = logging.getLogger(__name__)

METERS_PER_MILE = 0.000621371192    # meters × this = miles


class Unit(str, Enum):
    METER = "m"
    KILOMETER = "km"
    MILE = "mi"

    @classmethod
    def parse(cls, value: object) -> Unit:
        """Return the matching unit, or METER for anything unrecognised."""
        try:
            return cls(value)
        except ValueError:
            return cls.METER


def convert_meters(meters: float, unit: object) -> float:
    """Convert a distance in meters to ``unit``.

    Accepts a Unit member or its short code ("km", "mi"). Any other value
    leaves the distance in meters.
    """
    if unit == Unit.KILOMETER:
        return meters / 1000
    if unit == Unit.MILE:
        return meters * METERS_PER_MILE
    if unit is not None and unit != Unit.METER:
        logger.debug("Unknown unit %r, returning meters", unit)
    return meters
