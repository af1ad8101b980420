"""Latitude/longitude bounding box around an origin at a given radius.

The box is a planar small-angle approximation of a circle: a degree of
latitude is treated as a fixed length per unit, and longitude degrees are
widened by 1/|cos(latitude)| because meridians converge toward the poles.
Use it as a cheap range pre-filter before an exact ``in_radius`` check.
"""

from __future__ import annotations

import logging
import math
from typing import Optional

from geolocation_utils.coordinate import Coordinate, validate_coordinate
from geolocation_utils.units import DistanceUnit, latitude_divisor

logger = logging.getLogger(__name__)

DEFAULT_UNIT = DistanceUnit.MILES


def _calculate(unit: DistanceUnit, distance: float,
               lat: float, lon: float) -> tuple[float, float, float, float]:
    """Return (min_lat, max_lat, min_lon, max_lon) for the given inputs."""
    lat_delta = distance / latitude_divisor(unit)

    cos_lat = abs(math.cos(math.radians(lat)))
    # Longitude is unbounded at an exact pole
    lon_delta = lat_delta / cos_lat if cos_lat else math.inf

    return lat - lat_delta, lat + lat_delta, lon - lon_delta, lon + lon_delta


class BoundingBox:
    """Cached lat/lon bounds for an origin, a distance and a unit.

    The four bounds are recomputed eagerly by every mutator, so they always
    match the current inputs. Instances are not thread-safe.

    The constructor does not check ``origin``; use ``create`` to get None
    back for a latitude outside [-90, 90] or a longitude outside [-180, 180].
    """

    def __init__(self, origin: Coordinate, distance: float,
                 unit: DistanceUnit = DEFAULT_UNIT):
        self._latitude = origin.latitude
        self._longitude = origin.longitude
        self._distance = distance
        self._unit = unit
        self._recalculate()

    @classmethod
    def create(cls, origin: Coordinate, distance: float,
               unit: Optional[DistanceUnit] = None) -> Optional[BoundingBox]:
        """Build a box, or return None when ``origin`` is not a legal coordinate.

        ``unit`` defaults to miles.
        """
        errors = validate_coordinate(origin)
        if errors:
            logger.debug("Rejected bounding box origin %s: %s", origin, errors)
            return None
        return cls(origin, distance, unit if unit is not None else DEFAULT_UNIT)

    def _recalculate(self) -> None:
        (self._min_lat, self._max_lat,
         self._min_lon, self._max_lon) = _calculate(
            self._unit, self._distance, self._latitude, self._longitude,
        )

    @property
    def origin(self) -> Coordinate:
        return Coordinate(self._latitude, self._longitude)

    @property
    def distance(self) -> float:
        return self._distance

    @property
    def distance_unit(self) -> DistanceUnit:
        return self._unit

    def min_latitude(self) -> float:
        return self._min_lat

    def max_latitude(self) -> float:
        return self._max_lat

    def min_longitude(self) -> float:
        return self._min_lon

    def max_longitude(self) -> float:
        return self._max_lon

    def set_coords(self, origin: Coordinate) -> None:
        """Move the box to a new origin, keeping distance and unit."""
        self._latitude = origin.latitude
        self._longitude = origin.longitude
        self._recalculate()

    def set_distance(self, distance: float, unit: Optional[DistanceUnit] = None) -> None:
        """Change the distance and unit.

        An omitted ``unit`` resets to miles; the previous unit is not kept.
        """
        self._distance = distance
        self._unit = unit if unit is not None else DEFAULT_UNIT
        self._recalculate()

    def contains(self, coord: Coordinate) -> bool:
        """Inclusive range test of ``coord`` against the cached bounds."""
        return (self._min_lat <= coord.latitude <= self._max_lat
                and self._min_lon <= coord.longitude <= self._max_lon)

    def as_tuple(self) -> tuple[float, float, float, float]:
        return self._min_lat, self._max_lat, self._min_lon, self._max_lon

    def __repr__(self) -> str:
        return (
            f"BoundingBox(origin={self.origin!s}, distance={self._distance}, "
            f"unit={self._unit.value}, lat=[{self._min_lat}, {self._max_lat}], "
            f"lon=[{self._min_lon}, {self._max_lon}])"
        )
