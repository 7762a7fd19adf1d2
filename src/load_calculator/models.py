from __future__ import annotations

import math
from typing import Iterable, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from load_calculator.units import LinearUnit, to_meters


def positive_lengths(values: Iterable[float]) -> bool:
    """True when every value is a finite length above zero (NaN and inf fail)."""
    return all(math.isfinite(v) and v > 0 for v in values)


class BoxDimensions(BaseModel):
    """One rectangular box, in any supported linear unit."""

    model_config = ConfigDict(frozen=True)

    length: float = Field(description="Length of the box")
    width: float = Field(description="Width of the box")
    height: float = Field(description="Height of the box")
    unit: LinearUnit = Field(default=LinearUnit.CENTIMETER, description="Unit of the three edges")

    @field_validator("unit", mode="before")
    @classmethod
    def _parse_unit(cls, value):
        if isinstance(value, str) and not isinstance(value, LinearUnit):
            return LinearUnit.parse(value)
        return value

    @property
    def is_valid(self) -> bool:
        return positive_lengths((self.length, self.width, self.height))

    def as_meters(self) -> Tuple[float, float, float]:
        return (
            to_meters(self.length, self.unit),
            to_meters(self.width, self.unit),
            to_meters(self.height, self.unit),
        )

    def in_meters(self) -> "BoxDimensions":
        L, W, H = self.as_meters()
        return BoxDimensions(length=L, width=W, height=H, unit=LinearUnit.METER)

    @property
    def volume_m3(self) -> float:
        L, W, H = self.as_meters()
        return L * W * H


class ContainerSpec(BaseModel):
    """Container internal dimensions, always in meters."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(default="Custom Container", description="Display name")
    length: float = Field(description="Internal length in meters")
    width: float = Field(description="Internal width in meters")
    height: float = Field(description="Internal height in meters")

    @property
    def dims(self) -> Tuple[float, float, float]:
        return (float(self.length), float(self.width), float(self.height))

    @property
    def volume(self) -> float:
        return float(self.length) * float(self.width) * float(self.height)

    @property
    def is_valid(self) -> bool:
        return positive_lengths((self.length, self.width, self.height))


class RemainingSpace(BaseModel):
    """Leftover linear space per container axis after the fitted grid."""

    model_config = ConfigDict(frozen=True)

    length: float = Field(ge=0, description="Unused length in meters")
    width: float = Field(ge=0, description="Unused width in meters")
    height: float = Field(ge=0, description="Unused height in meters")


class ArrangementResult(BaseModel):
    """Grid of identically oriented boxes filling one container."""

    model_config = ConfigDict(frozen=True)

    length_count: int = Field(ge=0, description="Boxes along the container length")
    width_count: int = Field(ge=0, description="Boxes along the container width")
    height_count: int = Field(ge=0, description="Boxes along the container height")
    total_boxes: int = Field(ge=0, description="length_count * width_count * height_count")
    efficiency: float = Field(ge=0, le=100, description="Percent of container volume occupied")
    remaining_space: RemainingSpace

    # Box edges (meters) as laid along the container's (length, width, height)
    orientation: Optional[Tuple[float, float, float]] = Field(
        default=None,
        description="Oriented box edges (L, W, H) in meters",
    )
    orientation_code: Optional[int] = Field(
        default=None,
        ge=0,
        le=5,
        description="0:(L,W,H) 1:(L,H,W) 2:(W,L,H) 3:(W,H,L) 4:(H,L,W) 5:(H,W,L)",
    )

    def describe(self) -> str:
        return f"{self.length_count}L × {self.width_count}W × {self.height_count}H"
