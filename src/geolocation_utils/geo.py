"""Geographic utility functions — pure Python, no external deps."""

from __future__ import annotations

import logging
import math

from geolocation_utils.units import EARTH_RADIUS_KM

logger = logging.getLogger(__name__)

MAX_LATITUDE = 90.0
MAX_LONGITUDE = 180.0


def wrap_to_bounds(value: float, bound: float) -> float:
    """Wrap ``value`` around the periodic range [-bound, bound].

    Values already in range are returned unchanged, including both ends.
    Anything outside is shifted by the fewest whole periods (``2 * bound``)
    that bring it back in, so 181 wraps to 1 and 91 to -89 for a bound of 90.
    Non-finite values have no representative and come back as NaN.
    """
    if bound <= 0:
        raise ValueError(f"bound must be positive, got {bound}")
    if not math.isfinite(value):
        return math.nan

    period = 2 * bound
    if -bound <= value <= bound:
        return value
    # fmod is exact, and so is the fold since bound < |r| < period
    r = math.fmod(value, period)
    if r > bound:
        r -= period
    elif r < -bound:
        r += period
    return r


def normalize_latitude(lat: float) -> float:
    return wrap_to_bounds(lat, MAX_LATITUDE)


def normalize_longitude(lon: float) -> float:
    return wrap_to_bounds(lon, MAX_LONGITUDE)


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance between two points on Earth in kilometers.

    Uses the Haversine formula on a sphere of radius EARTH_RADIUS_KM.
    Inputs are decimal degrees.
    """
    rlat1, rlon1 = math.radians(lat1), math.radians(lon1)
    rlat2, rlon2 = math.radians(lat2), math.radians(lon2)

    dlat = rlat2 - rlat1
    dlon = rlon2 - rlon1

    a = math.sin(dlat / 2) ** 2 + math.cos(rlat1) * math.cos(rlat2) * math.sin(dlon / 2) ** 2

    # Rounding can push a just past 1 for near-antipodal points
    if a > 1.0 or a < 0.0:
        logger.debug("haversine term %r clamped to [0, 1]", a)
        a = min(1.0, max(0.0, a))
    c = 2 * math.asin(math.sqrt(a))

    return EARTH_RADIUS_KM * c
