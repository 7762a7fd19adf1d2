"""
Three-view technical drawing of a loaded container.

Each view fits two of the container's axes into the ViewConfig canvas,
keeping the aspect ratio, and lays the arrangement's grid of boxes over it:

    TOP   = length x width   (laid out from the top-left corner)
    FRONT = width  x height  (stacked up from the container floor)
    SIDE  = length x height  (stacked up from the container floor)

Counts come from the solver in meter space, while the drawing rounds in
pixel space. The two can disagree by one box, so every axis count is
clamped to what fits in pixels, and each rectangle is still bounds-checked
before it is emitted.
"""

from __future__ import annotations

import logging
import math
from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from load_calculator.config import DEFAULT_VIEW_CONFIG, ViewConfig
from load_calculator.models import ArrangementResult, BoxDimensions, ContainerSpec, positive_lengths

logger = logging.getLogger(__name__)

# Tolerance (px) for the bounds check; floor() and float products drift by ulps
_EDGE_EPS = 1e-9


class ViewKind(str, Enum):
    TOP = "top"
    FRONT = "front"
    SIDE = "side"

    @property
    def axes(self) -> Tuple[int, int]:
        """Container axis indices (0=length, 1=width, 2=height) drawn as (x, y)."""
        return _VIEW_AXES[self]

    @property
    def label(self) -> str:
        return _VIEW_LABELS[self]

    @property
    def grounded(self) -> bool:
        """Whether rows stack upward from the floor instead of down from the top."""
        return self is not ViewKind.TOP


_VIEW_AXES: dict[ViewKind, Tuple[int, int]] = {
    ViewKind.TOP: (0, 1),
    ViewKind.FRONT: (1, 2),
    ViewKind.SIDE: (0, 2),
}

_VIEW_LABELS: dict[ViewKind, str] = {
    ViewKind.TOP: "Top View (Length × Width)",
    ViewKind.FRONT: "Front View (Width × Height)",
    ViewKind.SIDE: "Side View (Length × Height)",
}


class ViewStatus(str, Enum):
    FIX_ERRORS = "Fix errors"
    READY = "Ready"
    BOX_TOO_LARGE = "Box Too Large"

    @property
    def heading(self) -> str:
        return {
            ViewStatus.FIX_ERRORS: "Input Validation Required",
            ViewStatus.READY: "Enter Box Dimensions",
            ViewStatus.BOX_TOO_LARGE: "Box Too Large",
        }[self]

    @property
    def message(self) -> str:
        return {
            ViewStatus.FIX_ERRORS: "Please correct the highlighted errors above",
            ViewStatus.READY: "Fill in box dimensions to see optimal arrangement",
            ViewStatus.BOX_TOO_LARGE: "Box dimensions exceed container capacity",
        }[self]


class ViewBox(BaseModel):
    """One visible unit cell, in canvas pixels."""

    model_config = ConfigDict(frozen=True)

    id: str
    x: float
    y: float
    width: float = Field(gt=0)
    height: float = Field(gt=0)
    color: str


class ViewProjection(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: ViewKind
    view_width: float = Field(ge=0, description="Drawn container width (px)")
    view_height: float = Field(ge=0, description="Drawn container height (px)")
    scale_x: float = Field(ge=0, description="Pixels per meter along the view's x axis")
    scale_y: float = Field(ge=0, description="Pixels per meter along the view's y axis")
    padding: float = Field(ge=0, description="Canvas origin offset (px)")
    primary_dimension: float = Field(description="Container extent along x (meters)")
    secondary_dimension: float = Field(description="Container extent along y (meters)")
    boxes: Tuple[ViewBox, ...] = ()


class ThreeViewDrawing(BaseModel):
    model_config = ConfigDict(frozen=True)

    top: ViewProjection
    front: ViewProjection
    side: ViewProjection
    status: Optional[ViewStatus] = None

    def views(self) -> list[ViewProjection]:
        return [self.top, self.front, self.side]


def _fit_canvas(primary: float, secondary: float, config: ViewConfig) -> Tuple[float, float]:
    aspect = primary / secondary
    if aspect > config.aspect_ratio:
        return config.max_view_width, config.max_view_width / aspect
    return config.max_view_height * aspect, config.max_view_height


def _cell_color(i: int, j: int) -> str:
    return f"hsl({210 + (i + j) % 3 * 15}, 70%, {60 + (i + j) % 2 * 8}%)"


def _grid_counts(arrangement: ArrangementResult) -> Tuple[int, int, int]:
    return arrangement.length_count, arrangement.width_count, arrangement.height_count


def project_view(
    container: ContainerSpec,
    box: BoxDimensions,
    arrangement: Optional[ArrangementResult],
    kind: ViewKind,
    *,
    config: Optional[ViewConfig] = None,
    has_validation_errors: bool = False,
) -> ViewProjection:
    """
    Scale one pair of container axes onto the canvas and grid the boxes over it.

    Never raises on degenerate geometry: a non-positive or non-finite
    container edge gives a zero-size view, and a missing arrangement, invalid
    box, or pending validation errors give the container outline with no
    boxes. Cells narrower than config.min_cell_px are not drawn either, which
    caps the grid at roughly one cell per canvas pixel.
    """
    config = config or DEFAULT_VIEW_CONFIG
    ax, ay = kind.axes
    dims = container.dims
    primary, secondary = dims[ax], dims[ay]

    if not positive_lengths((primary, secondary)):
        logger.debug("%s view: container extent (%s, %s) not drawable", kind.value, primary, secondary)
        return ViewProjection(
            kind=kind,
            view_width=0.0,
            view_height=0.0,
            scale_x=0.0,
            scale_y=0.0,
            padding=config.padding,
            primary_dimension=primary,
            secondary_dimension=secondary,
        )

    view_width, view_height = _fit_canvas(primary, secondary, config)
    scale_x = view_width / primary
    scale_y = view_height / secondary

    boxes: list[ViewBox] = []
    if arrangement is not None and not has_validation_errors and box.is_valid:
        edges = arrangement.orientation or box.as_meters()
        box_px_w = edges[ax] * scale_x
        box_px_h = edges[ay] * scale_y

        if box_px_w < config.min_cell_px or box_px_h < config.min_cell_px:
            logger.debug(
                "%s view: cells of %.3f x %.3f px are below %.3f px, not drawn",
                kind.value, box_px_w, box_px_h, config.min_cell_px,
            )
        elif box_px_w > 0 and box_px_h > 0:
            counts = _grid_counts(arrangement)
            count_x = min(counts[ax], math.floor(view_width / box_px_w))
            count_y = min(counts[ay], math.floor(view_height / box_px_h))

            pad = config.padding
            right = pad + view_width + _EDGE_EPS
            bottom = pad + view_height + _EDGE_EPS
            for i in range(count_x):
                for j in range(count_y):
                    x = pad + i * box_px_w
                    if kind.grounded:
                        y = pad + view_height - (j + 1) * box_px_h
                    else:
                        y = pad + j * box_px_h

                    if x + box_px_w > right or y + box_px_h > bottom or y < pad - _EDGE_EPS:
                        continue

                    boxes.append(ViewBox(
                        id=f"{kind.value}-{i}-{j}",
                        x=x,
                        y=y,
                        width=box_px_w,
                        height=box_px_h,
                        color=_cell_color(i, j),
                    ))

    return ViewProjection(
        kind=kind,
        view_width=view_width,
        view_height=view_height,
        scale_x=scale_x,
        scale_y=scale_y,
        padding=config.padding,
        primary_dimension=primary,
        secondary_dimension=secondary,
        boxes=tuple(boxes),
    )


def view_status(
    box: BoxDimensions,
    arrangement: Optional[ArrangementResult],
    has_validation_errors: bool = False,
) -> Optional[ViewStatus]:
    """Overlay shown on the drawing, or None when the boxes themselves say it all."""
    if has_validation_errors:
        return ViewStatus.FIX_ERRORS
    if not box.is_valid:
        return ViewStatus.READY
    if arrangement is None or arrangement.total_boxes == 0:
        return ViewStatus.BOX_TOO_LARGE
    return None


def project_views(
    container: ContainerSpec,
    box: BoxDimensions,
    arrangement: Optional[ArrangementResult],
    *,
    config: Optional[ViewConfig] = None,
    has_validation_errors: bool = False,
) -> ThreeViewDrawing:
    kw = dict(config=config, has_validation_errors=has_validation_errors)
    return ThreeViewDrawing(
        top=project_view(container, box, arrangement, ViewKind.TOP, **kw),
        front=project_view(container, box, arrangement, ViewKind.FRONT, **kw),
        side=project_view(container, box, arrangement, ViewKind.SIDE, **kw),
        status=view_status(box, arrangement, has_validation_errors),
    )
