"""Spherical-earth distance, radius and bounding box helpers."""

from geolocation_utils.boundaries import BoundingBox
from geolocation_utils.coordinate import Coordinate, ValidationError, validate_coordinate
from geolocation_utils.geo import (
    EARTH_RADIUS_KM,
    haversine_km,
    normalize_latitude,
    normalize_longitude,
    wrap_to_bounds,
)
from geolocation_utils.units import DistanceUnit, latitude_divisor, linear_divisor

__all__ = [
    "BoundingBox",
    "Coordinate",
    "DistanceUnit",
    "EARTH_RADIUS_KM",
    "ValidationError",
    "haversine_km",
    "latitude_divisor",
    "linear_divisor",
    "normalize_latitude",
    "normalize_longitude",
    "validate_coordinate",
    "wrap_to_bounds",
]
