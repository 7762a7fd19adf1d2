"""Container loading calculator for one uniform box in one rectangular container."""

from load_calculator.config import ViewConfig, load_view_config
from load_calculator.containers import CONTAINER_PRESETS, custom_container, get_container, list_presets
from load_calculator.models import ArrangementResult, BoxDimensions, ContainerSpec, RemainingSpace
from load_calculator.planner import EfficiencyRating, LoadPlan, efficiency_rating, format_summary, plan_load
from load_calculator.projection import (
    ThreeViewDrawing,
    ViewBox,
    ViewKind,
    ViewProjection,
    ViewStatus,
    project_view,
    project_views,
    view_status,
)
from load_calculator.quantity import (
    EffectiveQuantity,
    QuantityError,
    QuantityErrorCode,
    QuantitySource,
    resolve_quantity,
    validate_manual_quantity,
)
from load_calculator.solver import best_arrangement, solve_arrangements, top_alternatives
from load_calculator.units import LinearUnit, convert, from_meters, to_cubic_meters, to_meters

__all__ = [
    "ArrangementResult",
    "BoxDimensions",
    "CONTAINER_PRESETS",
    "ContainerSpec",
    "EfficiencyRating",
    "EffectiveQuantity",
    "LinearUnit",
    "LoadPlan",
    "QuantityError",
    "QuantityErrorCode",
    "QuantitySource",
    "RemainingSpace",
    "ThreeViewDrawing",
    "ViewBox",
    "ViewConfig",
    "ViewKind",
    "ViewProjection",
    "ViewStatus",
    "best_arrangement",
    "convert",
    "custom_container",
    "efficiency_rating",
    "format_summary",
    "from_meters",
    "get_container",
    "list_presets",
    "load_view_config",
    "plan_load",
    "project_view",
    "project_views",
    "resolve_quantity",
    "solve_arrangements",
    "to_cubic_meters",
    "to_meters",
    "top_alternatives",
    "validate_manual_quantity",
    "view_status",
]
