"""Manual box-quantity override and effective quantity selection."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from load_calculator.models import ArrangementResult

logger = logging.getLogger(__name__)


class QuantitySource(str, Enum):
    AUTO = "AUTO"
    MANUAL = "MANUAL"
    # Manual value accepted although the solver found no arrangement
    UNCONSTRAINED_OVERRIDE = "UNCONSTRAINED_OVERRIDE"


class QuantityErrorCode(str, Enum):
    INVALID_QUANTITY = "INVALID_QUANTITY"
    EXCEEDS_CAPACITY = "EXCEEDS_CAPACITY"
    NO_FEASIBLE_ARRANGEMENT = "NO_FEASIBLE_ARRANGEMENT"


class EffectiveQuantity(BaseModel):
    """Box count used for reporting, with where it came from."""

    model_config = ConfigDict(frozen=True)

    quantity: int = Field(ge=0, description="Authoritative box count")
    source: QuantitySource
    capacity: Optional[int] = Field(default=None, description="Solver maximum, if any arrangement exists")

    @property
    def label(self) -> str:
        if self.source is QuantitySource.AUTO:
            return "Auto Calculated"
        return "Manual Input"

    @property
    def is_manual(self) -> bool:
        return self.source is not QuantitySource.AUTO


class QuantityError(BaseModel):
    """Rejected manual quantity, carrying enough context for display."""

    model_config = ConfigDict(frozen=True)

    code: QuantityErrorCode
    requested: Any = Field(description="The value the caller supplied")
    capacity: Optional[int] = Field(default=None, description="Solver maximum, if known")

    @property
    def message(self) -> str:
        if self.code is QuantityErrorCode.EXCEEDS_CAPACITY:
            return f"Quantity exceeds container capacity (max: {self.capacity})"
        if self.code is QuantityErrorCode.NO_FEASIBLE_ARRANGEMENT:
            return "Box does not fit in the container; a manual quantity cannot be applied"
        return "Manual box quantity must be greater than 0"


QuantityOutcome = Union[EffectiveQuantity, QuantityError]


def _is_positive_int(value) -> bool:
    # bool is an int subclass; True is not a quantity
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def validate_manual_quantity(
    requested,
    best: Optional[ArrangementResult],
    *,
    strict: bool = False,
) -> QuantityOutcome:
    """
    Check a user-asserted box count against the best arrangement.

    - requested must be a positive int, else INVALID_QUANTITY
    - with an arrangement, requested <= best.total_boxes, else EXCEEDS_CAPACITY
    - without one, the value is accepted as UNCONSTRAINED_OVERRIDE, unless
      strict=True, which rejects it with NO_FEASIBLE_ARRANGEMENT
    """
    capacity = best.total_boxes if best is not None else None

    if not _is_positive_int(requested):
        return QuantityError(code=QuantityErrorCode.INVALID_QUANTITY, requested=requested, capacity=capacity)

    if best is None:
        if strict:
            return QuantityError(code=QuantityErrorCode.NO_FEASIBLE_ARRANGEMENT, requested=requested)
        logger.warning("manual quantity %d accepted with no feasible arrangement", requested)
        return EffectiveQuantity(quantity=requested, source=QuantitySource.UNCONSTRAINED_OVERRIDE)

    if requested > best.total_boxes:
        return QuantityError(code=QuantityErrorCode.EXCEEDS_CAPACITY, requested=requested, capacity=capacity)

    return EffectiveQuantity(quantity=requested, source=QuantitySource.MANUAL, capacity=capacity)


def resolve_quantity(
    best: Optional[ArrangementResult],
    manual=None,
    *,
    strict: bool = False,
) -> QuantityOutcome:
    """
    Pick the authoritative box count.

    Without a manual value this is best.total_boxes (0 when nothing fits).
    The arrangement's grid shape is untouched either way; only the count
    reported downstream changes.
    """
    if manual is None:
        capacity = best.total_boxes if best is not None else None
        return EffectiveQuantity(quantity=capacity or 0, source=QuantitySource.AUTO, capacity=capacity)
    return validate_manual_quantity(manual, best, strict=strict)
