from __future__ import annotations

import pytest

from load_calculator.containers import get_container
from load_calculator.models import BoxDimensions
from load_calculator.planner import EfficiencyRating, efficiency_rating, format_summary, plan_load
from load_calculator.projection import ViewStatus
from load_calculator.quantity import EffectiveQuantity, QuantityError, QuantityErrorCode, QuantitySource


def test_plan_unit_cube_auto() -> None:
    """Full flow for a 100 cm cube in a 20ft, no manual quantity."""
    box = BoxDimensions(length=100, width=100, height=100, unit="cm")
    plan = plan_load(box, get_container("20ft"))

    assert plan.fits
    assert plan.best.total_boxes == 20
    assert isinstance(plan.quantity, EffectiveQuantity)
    assert plan.quantity.source is QuantitySource.AUTO
    assert plan.effective_quantity == 20
    assert plan.cbm_per_box == pytest.approx(1.0)
    assert plan.total_cbm == pytest.approx(20.0)
    assert len(plan.drawing.top.boxes) == 10
    assert plan.drawing.status is None
    assert len(plan.alternatives(limit=3)) == 3


def test_plan_manual_override_accepted() -> None:
    box = BoxDimensions(length=1, width=1, height=1, unit="m")
    plan = plan_load(box, get_container("20ft"), manual_quantity=15)

    assert plan.quantity.source is QuantitySource.MANUAL
    assert plan.effective_quantity == 15
    # grid stays the solver's
    assert plan.best.describe() == "5L × 2W × 2H"
    assert len(plan.drawing.side.boxes) == 10


def test_plan_manual_override_rejected() -> None:
    """A rejected override is carried as an error and the drawing asks for fixes."""
    box = BoxDimensions(length=1, width=1, height=1, unit="m")
    plan = plan_load(box, get_container("20ft"), manual_quantity=25)

    assert isinstance(plan.quantity, QuantityError)
    assert plan.quantity_error.code is QuantityErrorCode.EXCEEDS_CAPACITY
    assert plan.quantity_error.capacity == 20
    assert plan.effective_quantity == 20
    assert plan.drawing.status is ViewStatus.FIX_ERRORS
    assert plan.drawing.top.boxes == ()


def test_plan_box_too_large() -> None:
    box = BoxDimensions(length=300, width=300, height=300, unit="cm")
    plan = plan_load(box, get_container("40ft"))

    assert not plan.fits
    assert plan.best is None
    assert plan.effective_quantity == 0
    assert plan.drawing.status is ViewStatus.BOX_TOO_LARGE
    assert plan.drawing.top.view_width > 0
    assert "Box too large" in format_summary(plan)


def test_plan_too_large_with_manual_override() -> None:
    box = BoxDimensions(length=300, width=300, height=300, unit="cm")

    loose = plan_load(box, get_container("40ft"), manual_quantity=4)
    assert loose.quantity.source is QuantitySource.UNCONSTRAINED_OVERRIDE
    assert loose.effective_quantity == 4

    strict = plan_load(box, get_container("40ft"), manual_quantity=4, strict_override=True)
    assert strict.quantity_error.code is QuantityErrorCode.NO_FEASIBLE_ARRANGEMENT


def test_plan_invalid_box() -> None:
    box = BoxDimensions(length=0, width=5, height=5, unit="cm")
    plan = plan_load(box, get_container("20ft"))

    assert plan.arrangements == ()
    assert plan.cbm_per_box == 0.0
    assert plan.drawing.status is ViewStatus.READY
    assert all(view.boxes == () for view in plan.drawing.views())


@pytest.mark.parametrize(
    "efficiency, rating",
    [
        (100.0, EfficiencyRating.EXCELLENT),
        (85.0, EfficiencyRating.EXCELLENT),
        (84.9, EfficiencyRating.GOOD),
        (70.0, EfficiencyRating.GOOD),
        (50.0, EfficiencyRating.FAIR),
        (49.9, EfficiencyRating.POOR),
        (0.0, EfficiencyRating.POOR),
    ],
)
def test_efficiency_rating(efficiency, rating) -> None:
    assert efficiency_rating(efficiency) is rating


def test_format_summary_auto() -> None:
    box = BoxDimensions(length=1, width=1, height=1, unit="m")
    summary = format_summary(plan_load(box, get_container("20ft")))

    assert "Container: 20ft Standard (5.898 × 2.352 × 2.393 m)" in summary
    assert "Arrangement: 5L × 2W × 2H" in summary
    assert "Boxes: 20 (Auto Calculated)" in summary
    assert "Remaining space: L 0.898 m" in summary
    assert "Efficiency: 60.2% (Fair)" in summary


def test_format_summary_manual() -> None:
    box = BoxDimensions(length=1, width=1, height=1, unit="m")

    accepted = format_summary(plan_load(box, get_container("20ft"), manual_quantity=12))
    assert "Boxes: 12 (Manual Input)" in accepted
    assert "Capacity: 20" in accepted

    rejected = format_summary(plan_load(box, get_container("20ft"), manual_quantity=99))
    assert "Manual quantity rejected: Quantity exceeds container capacity (max: 20)" in rejected
