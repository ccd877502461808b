"""Geographic distance formulas, pure Python with no external deps.

All functions take WGS84 decimal degrees and return meters.
"""

from __future__ import annotations

import logging
import math

logger = logging.getLogger(__name__)

# WGS-84 ellipsoid
EARTH_RADIUS = 6378136.6            # semi-major axis (m)
SEMI_MINOR_AXIS = 6356752.314245    # m
FLATTENING = 1 / 298.257223563

VINCENTY_MAX_ITERATIONS = 100
VINCENTY_TOLERANCE = 1e-12


class VincentyConvergenceError(ArithmeticError):
    """Raised when Vincenty's inverse formula does not converge."""

    def __init__(self, iterations: int, delta: float):
        self.iterations = iterations
        self.delta = delta
        super().__init__(
            f"Vincenty formula failed to converge after {iterations} iterations "
            f"(last lambda delta {delta:.3e})"
        )


def flat_m(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Equirectangular (Pythagoras) distance in meters.

    Fast but inaccurate over long distances and at high latitudes.
    """
    rlat1, rlon1 = math.radians(lat1), math.radians(lon1)
    rlat2, rlon2 = math.radians(lat2), math.radians(lon2)

    x = (rlon2 - rlon1) * math.cos((rlat1 + rlat2) / 2)
    y = rlat2 - rlat1

    return math.sqrt(x * x + y * y) * EARTH_RADIUS


def haversine_m(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance between two points on Earth in meters.

    Uses the Haversine formula on a sphere of radius EARTH_RADIUS, accurate
    to around 0.3%.
    """
    rlat1, rlon1 = math.radians(lat1), math.radians(lon1)
    rlat2, rlon2 = math.radians(lat2), math.radians(lon2)

    dlat = rlat2 - rlat1
    dlon = rlon2 - rlon1

    a = math.sin(dlat / 2) ** 2 + math.cos(rlat1) * math.cos(rlat2) * math.sin(dlon / 2) ** 2
    # Rounding can push a just past 1 for nearly antipodal points
    a = min(1.0, a)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS * c


def vincenty_m(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
    max_iterations: int = VINCENTY_MAX_ITERATIONS,
    tolerance: float = VINCENTY_TOLERANCE,
) -> float:
    """Geodesic distance on the WGS-84 ellipsoid in meters (Vincenty inverse).

    Accurate to within 0.5 mm. Returns 0.0 for coincident points.

    Raises:
        VincentyConvergenceError: if lambda has not settled within
            ``tolerance`` after ``max_iterations`` iterations, which happens
            for nearly antipodal points.
    """
    a = EARTH_RADIUS
    b = SEMI_MINOR_AXIS
    f = FLATTENING

    L = math.radians(lon2 - lon1)
    u1 = math.atan((1 - f) * math.tan(math.radians(lat1)))
    u2 = math.atan((1 - f) * math.tan(math.radians(lat2)))

    sin_u1, cos_u1 = math.sin(u1), math.cos(u1)
    sin_u2, cos_u2 = math.sin(u2), math.cos(u2)

    lam = L
    delta = math.inf

    for iteration in range(1, max_iterations + 1):
        sin_lam, cos_lam = math.sin(lam), math.cos(lam)
        sin_sigma = math.sqrt(
            (cos_u2 * sin_lam) ** 2
            + (cos_u1 * sin_u2 - sin_u1 * cos_u2 * cos_lam) ** 2
        )

        if sin_sigma == 0:
            logger.debug("Coincident points after %d iteration(s)", iteration)
            return 0.0

        cos_sigma = sin_u1 * sin_u2 + cos_u1 * cos_u2 * cos_lam
        sigma = math.atan2(sin_sigma, cos_sigma)
        sin_alpha = cos_u1 * cos_u2 * sin_lam / sin_sigma
        cos_sq_alpha = 1 - sin_alpha * sin_alpha

        # Equatorial line: cos_sq_alpha is 0
        if cos_sq_alpha != 0:
            cos_2sigma_m = cos_sigma - 2 * sin_u1 * sin_u2 / cos_sq_alpha
        else:
            cos_2sigma_m = 0.0

        C = f / 16 * cos_sq_alpha * (4 + f * (4 - 3 * cos_sq_alpha))
        lam_prev = lam
        lam = L + (1 - C) * f * sin_alpha * (
            sigma + C * sin_sigma * (
                cos_2sigma_m + C * cos_sigma * (-1 + 2 * cos_2sigma_m ** 2)
            )
        )

        delta = abs(lam - lam_prev)
        # NaN delta counts as converged: NaN input gives a NaN distance
        if not delta > tolerance:
            logger.debug("Vincenty converged after %d iteration(s)", iteration)
            break
    else:
        logger.warning(
            "Vincenty did not converge: (%s, %s) -> (%s, %s)", lat1, lon1, lat2, lon2
        )
        raise VincentyConvergenceError(max_iterations, delta)

    u_sq = cos_sq_alpha * (a * a - b * b) / (b * b)
    A = 1 + u_sq / 16384 * (4096 + u_sq * (-768 + u_sq * (320 - 175 * u_sq)))
    B = u_sq / 1024 * (256 + u_sq * (-128 + u_sq * (74 - 47 * u_sq)))
    delta_sigma = B * sin_sigma * (
        cos_2sigma_m + B / 4 * (
            cos_sigma * (-1 + 2 * cos_2sigma_m ** 2)
            - B / 6 * cos_2sigma_m * (-3 + 4 * sin_sigma ** 2) * (-3 + 4 * cos_2sigma_m ** 2)
        )
    )

    return b * A * (sigma - delta_sigma)
