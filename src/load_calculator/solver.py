"""Uniform-box arrangement solver: grid counts for the 6 axis-aligned orientations."""

from __future__ import annotations

import logging
import math
from typing import Optional

from load_calculator.models import ArrangementResult, BoxDimensions, ContainerSpec, RemainingSpace, positive_lengths

logger = logging.getLogger(__name__)

# Index triples into (L, W, H) of the box, assigned to the container's
# (length, width, height) axes. Position in this tuple is the rotation code.
ORIENTATIONS: tuple[tuple[int, int, int], ...] = (
    (0, 1, 2),  # L, W, H
    (0, 2, 1),  # L, H, W
    (1, 0, 2),  # W, L, H
    (1, 2, 0),  # W, H, L
    (2, 0, 1),  # H, L, W
    (2, 1, 0),  # H, W, L
)


def rotations_6(dims: tuple[float, float, float]) -> list[tuple[float, float, float, int]]:
    """
    Return the 6 oriented edge triples plus their rotation code 0..5.

    Cubic or square-faced boxes produce repeated triples; they are kept so
    every rotation code is always present.
    """
    out: list[tuple[float, float, float, int]] = []
    for code, (a, b, c) in enumerate(ORIENTATIONS):
        out.append((dims[a], dims[b], dims[c], code))
    return out


def _arrange(
    oriented: tuple[float, float, float],
    code: int,
    container: ContainerSpec,
    box_volume: float,
) -> Optional[ArrangementResult]:
    l, w, h = oriented
    CL, CW, CH = container.dims

    length_count = math.floor(CL / l)
    width_count = math.floor(CW / w)
    height_count = math.floor(CH / h)

    if length_count <= 0 or width_count <= 0 or height_count <= 0:
        logger.debug(
            "orientation %d %s discarded: counts (%d, %d, %d)",
            code, oriented, length_count, width_count, height_count,
        )
        return None

    total_boxes = length_count * width_count * height_count
    used_volume = total_boxes * box_volume
    efficiency = 100.0 * used_volume / container.volume

    return ArrangementResult(
        length_count=length_count,
        width_count=width_count,
        height_count=height_count,
        total_boxes=total_boxes,
        efficiency=min(100.0, max(0.0, efficiency)),
        remaining_space=RemainingSpace(
            length=max(0.0, CL - length_count * l),
            width=max(0.0, CW - width_count * w),
            height=max(0.0, CH - height_count * h),
        ),
        orientation=(l, w, h),
        orientation_code=code,
    )


def solve_arrangements(box: BoxDimensions, container: ContainerSpec) -> list[ArrangementResult]:
    """
    Evaluate every orientation of `box` in `container`.

    Returns all feasible arrangements sorted by total_boxes (desc), ties by
    efficiency (desc); index 0 is the best. An empty list means either a
    non-positive dimension or a box that fits in no orientation.
    """
    dims = box.as_meters()

    if not positive_lengths(dims) or not container.is_valid:
        logger.debug("rejecting non-positive or non-finite input: box=%s container=%s", dims, container.dims)
        return []

    box_volume = dims[0] * dims[1] * dims[2]

    arrangements: list[ArrangementResult] = []
    for l, w, h, code in rotations_6(dims):
        result = _arrange((l, w, h), code, container, box_volume)
        if result is not None:
            arrangements.append(result)

    if not arrangements:
        logger.debug("box %s does not fit %s in any orientation", dims, container.name)

    # Stable sort keeps enumeration order among exact ties
    arrangements.sort(key=lambda a: (-a.total_boxes, -a.efficiency))
    return arrangements


def best_arrangement(box: BoxDimensions, container: ContainerSpec) -> Optional[ArrangementResult]:
    arrangements = solve_arrangements(box, container)
    return arrangements[0] if arrangements else None


def top_alternatives(arrangements: list[ArrangementResult], limit: int = 3) -> list[ArrangementResult]:
    """The arrangements shown after the best one, in order."""
    if limit <= 0:
        return []
    return arrangements[1:1 + limit]
