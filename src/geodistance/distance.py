"""Builder-style distance calculator over two coordinates."""

from __future__ import annotations

from typing import Optional, Union

from geodistance.geo import flat_m, haversine_m, vincenty_m
from geodistance.models import CoordinateLike
from geodistance.settings import DistanceSettings, load_default_unit, load_settings
from geodistance.units import Unit, convert_meters

UnitLike = Union[Unit, str, None]   # unknown values convert as meters


class DistanceCalculator:
    """Distance between ``from`` and ``to`` in a chosen unit.

    Setters return the calculator, so calls chain::

        DistanceCalculator().set_from(a).set_to(b).in_unit("km").haversine()

    Every distance method reads the current state; nothing is cached, so the
    same instance can be re-pointed and reused. Instances are not locked:
    don't mutate one from another thread while it is computing.
    """

    def __init__(
        self,
        from_: Optional[CoordinateLike] = None,
        to: Optional[CoordinateLike] = None,
        unit: UnitLike = None,
        settings: Optional[DistanceSettings] = None,
    ):
        self._settings = settings
        self._from = from_
        self._to = to
        if unit is None:
            unit = settings.default_unit if settings is not None else load_default_unit()
        self._unit = unit

    @property
    def settings(self) -> DistanceSettings:
        """Settings passed in, or loaded from the environment on first use."""
        if self._settings is None:
            self._settings = load_settings()
        return self._settings

    def set_from(self, coordinate: CoordinateLike) -> DistanceCalculator:
        self._from = coordinate
        return self

    def get_from(self) -> Optional[CoordinateLike]:
        return self._from

    def set_to(self, coordinate: CoordinateLike) -> DistanceCalculator:
        self._to = coordinate
        return self

    def get_to(self) -> Optional[CoordinateLike]:
        return self._to

    def in_unit(self, unit: UnitLike) -> DistanceCalculator:
        """Select the result unit. Unrecognised units yield meters."""
        self._unit = unit
        return self

    @property
    def unit(self) -> UnitLike:
        return self._unit

    def flat(self) -> float:
        """Flat-plane (equirectangular) distance. Not accurate over long distances."""
        return convert_meters(flat_m(*self._endpoints()), self._unit)

    def haversine(self) -> float:
        """Great-circle distance on a sphere, accurate to around 0.3%."""
        return convert_meters(haversine_m(*self._endpoints()), self._unit)

    def vincenty(self) -> float:
        """Geodesic distance on the WGS-84 ellipsoid.

        Returns 0.0 for coincident points. Raises VincentyConvergenceError when
        the iteration does not converge (nearly antipodal points).
        """
        meters = vincenty_m(
            *self._endpoints(),
            max_iterations=self.settings.vincenty_max_iterations,
            tolerance=self.settings.vincenty_tolerance,
        )
        return convert_meters(meters, self._unit)

    def _endpoints(self) -> tuple[float, float, float, float]:
        if self._from is None:
            raise ValueError("origin coordinate is not set (call set_from first)")
        if self._to is None:
            raise ValueError("destination coordinate is not set (call set_to first)")
        return (
            self._from.latitude,
            self._from.longitude,
            self._to.latitude,
            self._to.longitude,
        )
