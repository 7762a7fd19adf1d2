"""Linear unit conversion (mm, cm, inch, m) to and from meters."""

from __future__ import annotations

from enum import Enum
from typing import Union


class LinearUnit(str, Enum):
    MILLIMETER = "mm"
    CENTIMETER = "cm"
    INCH = "inch"
    METER = "m"

    @property
    def factor(self) -> float:
        """Meters per one of this unit."""
        return _METERS_PER_UNIT[self]

    @classmethod
    def parse(cls, text: str) -> "LinearUnit":
        key = text.strip().lower()
        if key in _ALIASES:
            return _ALIASES[key]
        raise ValueError(f"Unknown unit '{text}'. Valid: {[u.value for u in cls]}")


_METERS_PER_UNIT: dict[LinearUnit, float] = {
    LinearUnit.MILLIMETER: 0.001,
    LinearUnit.CENTIMETER: 0.01,
    LinearUnit.INCH: 0.0254,
    LinearUnit.METER: 1.0,
}

_ALIASES: dict[str, LinearUnit] = {
    "mm": LinearUnit.MILLIMETER,
    "millimeter": LinearUnit.MILLIMETER,
    "millimeters": LinearUnit.MILLIMETER,
    "millimetre": LinearUnit.MILLIMETER,
    "millimetres": LinearUnit.MILLIMETER,
    "cm": LinearUnit.CENTIMETER,
    "centimeter": LinearUnit.CENTIMETER,
    "centimeters": LinearUnit.CENTIMETER,
    "centimetre": LinearUnit.CENTIMETER,
    "centimetres": LinearUnit.CENTIMETER,
    "in": LinearUnit.INCH,
    "inch": LinearUnit.INCH,
    "inches": LinearUnit.INCH,
    "m": LinearUnit.METER,
    "meter": LinearUnit.METER,
    "meters": LinearUnit.METER,
    "metre": LinearUnit.METER,
    "metres": LinearUnit.METER,
}

UnitLike = Union[LinearUnit, str]


def _as_unit(unit: UnitLike) -> LinearUnit:
    if isinstance(unit, LinearUnit):
        return unit
    return LinearUnit.parse(unit)


def to_meters(value: float, unit: UnitLike) -> float:
    """
    Convert a length in `unit` to meters.

    Zero and negative values pass straight through; rejecting them is the
    caller's job.
    """
    return float(value) * _as_unit(unit).factor


def from_meters(meters: float, unit: UnitLike) -> float:
    """Convert a length in meters to `unit`."""
    return float(meters) / _as_unit(unit).factor


def convert(value: float, from_unit: UnitLike, to_unit: UnitLike) -> float:
    return from_meters(to_meters(value, from_unit), to_unit)


def to_cubic_meters(length: float, width: float, height: float, unit: UnitLike) -> float:
    """Volume (CBM) of a box given in `unit`."""
    return to_meters(length, unit) * to_meters(width, unit) * to_meters(height, unit)
