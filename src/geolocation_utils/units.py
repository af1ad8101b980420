"""Distance units and the conversion table used by the distance math."""

from __future__ import annotations

import enum
from dataclasses import dataclass

EARTH_RADIUS_KM = 6371.0


class DistanceUnit(str, enum.Enum):
    """Unit a distance or radius is expressed in."""

    MILES = "Miles"
    NAUTICAL_MILES = "NauticalMiles"
    KILOMETERS = "Kilometers"
    METERS = "Meters"

    @classmethod
    def parse(cls, text: str) -> DistanceUnit:
        """Look up a unit by value, member name or abbreviation (case-insensitive)."""
        key = text.strip().lower().replace("-", "_")
        for unit in cls:
            if key in (unit.value.lower(), unit.name.lower()):
                return unit
        if key in _ABBREVIATIONS:
            return _ABBREVIATIONS[key]
        raise ValueError(f"unknown distance unit '{text}'")

    def __str__(self) -> str:
        return self.value


_ABBREVIATIONS = {
    "mi": DistanceUnit.MILES,
    "nmi": DistanceUnit.NAUTICAL_MILES,
    "nm": DistanceUnit.NAUTICAL_MILES,
    "km": DistanceUnit.KILOMETERS,
    "m": DistanceUnit.METERS,
}


@dataclass(frozen=True)
class UnitConversion:
    """Conversion constants for a single distance unit."""

    latitude_divisor: float     # one degree of latitude, in this unit
    linear_divisor: float       # meters per one of this unit


UNIT_CONVERSIONS: dict[DistanceUnit, UnitConversion] = {
    DistanceUnit.MILES: UnitConversion(latitude_divisor=69.0, linear_divisor=1609.0),
    DistanceUnit.NAUTICAL_MILES: UnitConversion(latitude_divisor=60.0, linear_divisor=1852.0),
    DistanceUnit.KILOMETERS: UnitConversion(latitude_divisor=111.045, linear_divisor=1000.0),
    DistanceUnit.METERS: UnitConversion(latitude_divisor=111045.0, linear_divisor=1.0),
}


def latitude_divisor(unit: DistanceUnit) -> float:
    return UNIT_CONVERSIONS[unit].latitude_divisor


def linear_divisor(unit: DistanceUnit) -> float:
    return UNIT_CONVERSIONS[unit].linear_divisor
