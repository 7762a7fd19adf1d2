"""Drawing canvas settings, overridable from the environment."""

from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict, Field

ENV_MAX_WIDTH = "LC_VIEW_MAX_WIDTH"
ENV_MAX_HEIGHT = "LC_VIEW_MAX_HEIGHT"
ENV_PADDING = "LC_VIEW_PADDING"
ENV_MIN_CELL = "LC_VIEW_MIN_CELL_PX"


class ViewConfig(BaseModel):
    """Logical canvas budget shared by the three projections."""

    model_config = ConfigDict(frozen=True)

    max_view_width: float = Field(default=280.0, gt=0, description="Max drawn container width (px)")
    max_view_height: float = Field(default=200.0, gt=0, description="Max drawn container height (px)")
    padding: float = Field(default=40.0, ge=0, description="Margin around the container outline (px)")
    min_cell_px: float = Field(default=1.0, ge=0, description="Smallest box edge (px) still drawn as a cell")

    @property
    def aspect_ratio(self) -> float:
        return self.max_view_width / self.max_view_height

    @property
    def total_width(self) -> float:
        return self.max_view_width + self.padding * 2

    @property
    def total_height(self) -> float:
        return self.max_view_height + self.padding * 2


DEFAULT_VIEW_CONFIG = ViewConfig()


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw.strip().replace(",", "."))
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


def load_view_config() -> ViewConfig:
    """Build a ViewConfig from LC_VIEW_* environment variables, falling back to defaults."""
    return ViewConfig(
        max_view_width=_env_float(ENV_MAX_WIDTH, DEFAULT_VIEW_CONFIG.max_view_width),
        max_view_height=_env_float(ENV_MAX_HEIGHT, DEFAULT_VIEW_CONFIG.max_view_height),
        padding=_env_float(ENV_PADDING, DEFAULT_VIEW_CONFIG.padding),
        min_cell_px=_env_float(ENV_MIN_CELL, DEFAULT_VIEW_CONFIG.min_cell_px),
    )
