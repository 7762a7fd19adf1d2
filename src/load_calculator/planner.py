"""End-to-end load plan: convert, solve, resolve quantity, draw."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from load_calculator.config import ViewConfig
from load_calculator.models import ArrangementResult, BoxDimensions, ContainerSpec
from load_calculator.projection import ThreeViewDrawing, project_views
from load_calculator.quantity import EffectiveQuantity, QuantityError, resolve_quantity
from load_calculator.solver import solve_arrangements, top_alternatives

logger = logging.getLogger(__name__)


class EfficiencyRating(str, Enum):
    EXCELLENT = "Excellent"
    GOOD = "Good"
    FAIR = "Fair"
    POOR = "Poor"


def efficiency_rating(efficiency: float) -> EfficiencyRating:
    if efficiency >= 85:
        return EfficiencyRating.EXCELLENT
    if efficiency >= 70:
        return EfficiencyRating.GOOD
    if efficiency >= 50:
        return EfficiencyRating.FAIR
    return EfficiencyRating.POOR


class LoadPlan(BaseModel):
    """Everything a report or UI needs for one box/container pair."""

    model_config = ConfigDict(frozen=True)

    box: BoxDimensions
    container: ContainerSpec
    arrangements: tuple[ArrangementResult, ...] = ()
    quantity: Union[EffectiveQuantity, QuantityError]
    drawing: ThreeViewDrawing
    cbm_per_box: float = Field(ge=0, description="Volume of one box in m³ (0 for invalid boxes)")

    @property
    def best(self) -> Optional[ArrangementResult]:
        return self.arrangements[0] if self.arrangements else None

    @property
    def fits(self) -> bool:
        return bool(self.arrangements)

    @property
    def quantity_error(self) -> Optional[QuantityError]:
        return self.quantity if isinstance(self.quantity, QuantityError) else None

    @property
    def effective_quantity(self) -> int:
        """Count used for totals; falls back to the solver count when the override was rejected."""
        if isinstance(self.quantity, EffectiveQuantity):
            return self.quantity.quantity
        return self.best.total_boxes if self.best is not None else 0

    @property
    def total_cbm(self) -> float:
        return self.cbm_per_box * self.effective_quantity

    def alternatives(self, limit: int = 3) -> list[ArrangementResult]:
        return top_alternatives(list(self.arrangements), limit)


def plan_load(
    box: BoxDimensions,
    container: ContainerSpec,
    manual_quantity=None,
    *,
    strict_override: bool = False,
    view_config: Optional[ViewConfig] = None,
    has_validation_errors: bool = False,
) -> LoadPlan:
    """
    Build the load plan for one box in one container.

    A rejected manual quantity does not stop the plan; it is carried in
    `quantity` as a QuantityError and the drawing is flagged for fixing.
    """
    arrangements = solve_arrangements(box, container)
    best = arrangements[0] if arrangements else None

    quantity = resolve_quantity(best, manual_quantity, strict=strict_override)
    flagged = has_validation_errors or isinstance(quantity, QuantityError)

    drawing = project_views(
        container,
        box,
        best,
        config=view_config,
        has_validation_errors=flagged,
    )

    logger.info(
        "plan %s in %s: %d arrangements, best=%s, quantity=%s",
        box.as_meters(),
        container.name,
        len(arrangements),
        best.describe() if best is not None else None,
        getattr(quantity, "quantity", None),
    )

    return LoadPlan(
        box=box,
        container=container,
        arrangements=tuple(arrangements),
        quantity=quantity,
        drawing=drawing,
        cbm_per_box=box.volume_m3 if box.is_valid else 0.0,
    )


def format_summary(plan: LoadPlan) -> str:
    """Human-readable summary of a plan."""
    c = plan.container
    header = f"Container: {c.name} ({c.length:.3f} × {c.width:.3f} × {c.height:.3f} m)"

    best = plan.best
    if best is None:
        return f"{header}\nBox too large: it does not fit in any orientation."

    lines = [
        header,
        f"Arrangement: {best.describe()}",
    ]

    if isinstance(plan.quantity, QuantityError):
        lines.append(f"Boxes: {best.total_boxes} (Auto Calculated)")
        lines.append(f"Manual quantity rejected: {plan.quantity.message}")
    else:
        lines.append(f"Boxes: {plan.quantity.quantity} ({plan.quantity.label})")
        if plan.quantity.is_manual and plan.quantity.capacity is not None:
            lines.append(f"Capacity: {plan.quantity.capacity}")

    rating = efficiency_rating(best.efficiency)
    r = best.remaining_space
    lines.extend([
        f"Efficiency: {best.efficiency:.1f}% ({rating.value})",
        f"Remaining space: L {r.length:.3f} m, W {r.width:.3f} m, H {r.height:.3f} m",
        f"Volume: {plan.cbm_per_box:.4f} CBM per box, {plan.total_cbm:.2f} CBM loaded",
    ])
    return "\n".join(lines)
