"""Latitude/longitude value type and its distance queries."""

from __future__ import annotations

import json
from dataclasses import dataclass, asdict

from geolocation_utils.geo import (
    MAX_LATITUDE,
    MAX_LONGITUDE,
    haversine_km,
    normalize_latitude,
    normalize_longitude,
)
from geolocation_utils.units import DistanceUnit, linear_divisor


class ValidationError(Exception):
    """Raised when coordinate data fails validation."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__(f"Validation failed: {'; '.join(errors)}")


@dataclass(frozen=True, order=True)
class Coordinate:
    """A point on the globe in decimal degrees.

    The plain constructor stores whatever it is given; use
    ``Coordinate.normalized`` to wrap out-of-range values around the globe.
    """

    latitude: float
    longitude: float

    @classmethod
    def normalized(cls, lat: float, lon: float) -> Coordinate:
        return cls(normalize_latitude(lat), normalize_longitude(lon))

    def normalize(self) -> Coordinate:
        return Coordinate.normalized(self.latitude, self.longitude)

    @property
    def is_valid(self) -> bool:
        return not validate_coordinate(self)

    def get_distance_from(self, other: Coordinate,
                          unit: DistanceUnit = DistanceUnit.MILES) -> float:
        """Great-circle distance to ``other``, expressed in ``unit``."""
        distance_km = haversine_km(self.latitude, self.longitude,
                                   other.latitude, other.longitude)
        return distance_km * linear_divisor(DistanceUnit.KILOMETERS) / linear_divisor(unit)

    def in_radius(self, other: Coordinate, radius: float,
                  unit: DistanceUnit = DistanceUnit.MILES) -> bool:
        """True when ``other`` lies within ``radius`` (inclusive) of this point.

        ``radius`` is read in ``unit``; the distance is converted, never the radius.
        """
        return self.get_distance_from(other, unit) <= radius

    def to_dict(self) -> dict[str, float]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> Coordinate:
        errors: list[str] = []
        values: dict[str, float] = {}
        for key in ("latitude", "longitude"):
            if key not in data:
                errors.append(f"{key} is missing")
                continue
            value = data[key]
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                errors.append(f"{key} {value!r} is not a number")
                continue
            values[key] = float(value)
        if errors:
            raise ValidationError(errors)
        return cls(**values)

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, raw: str) -> Coordinate:
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ValidationError([f"invalid JSON: {exc.msg}"]) from exc
        if not isinstance(data, dict):
            raise ValidationError(["expected a JSON object"])
        return cls.from_dict(data)

    def __str__(self) -> str:
        return f"({self.latitude}, {self.longitude})"


def validate_coordinate(coord: Coordinate) -> list[str]:
    """Validate a Coordinate. Returns list of error messages (empty = valid)."""
    errors: list[str] = []

    # NaN fails both comparisons, so it is reported as out of range too
    if not -MAX_LATITUDE <= coord.latitude <= MAX_LATITUDE:
        errors.append(f"latitude {coord.latitude} out of range [-90, 90]")

    if not -MAX_LONGITUDE <= coord.longitude <= MAX_LONGITUDE:
        errors.append(f"longitude {coord.longitude} out of range [-180, 180]")

    return errors
