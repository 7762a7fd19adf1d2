# src/load_calculator/containers.py
from __future__ import annotations

from load_calculator.models import ContainerSpec

# Internal usable dims (meters).
CONTAINER_PRESETS: dict[str, ContainerSpec] = {
    "20ft":    ContainerSpec(name="20ft Standard",   length=5.898,  width=2.352, height=2.393),
    "40ft":    ContainerSpec(name="40ft Standard",   length=12.032, width=2.352, height=2.393),
    "40ft-hc": ContainerSpec(name="40ft High Cube",  length=12.032, width=2.352, height=2.698),
    "45ft-hc": ContainerSpec(name="45ft High Cube",  length=13.556, width=2.352, height=2.698),
}

_ALIASES: dict[str, str] = {
    "20": "20ft",
    "40": "40ft",
    "40HC": "40ft-hc",
    "40FTHC": "40ft-hc",
    "45HC": "45ft-hc",
    "45FTHC": "45ft-hc",
}


def get_container(preset: str) -> ContainerSpec:
    key = preset.strip().lower()
    if key in CONTAINER_PRESETS:
        return CONTAINER_PRESETS[key]
    alias = key.upper().replace("-", "").replace(" ", "")
    if alias in _ALIASES:
        return CONTAINER_PRESETS[_ALIASES[alias]]
    raise ValueError(f"Unknown container preset '{preset}'. Valid: {sorted(CONTAINER_PRESETS.keys())}")


def custom_container(length: float, width: float, height: float, name: str = "Custom Container") -> ContainerSpec:
    return ContainerSpec(name=name, length=length, width=width, height=height)


def list_presets() -> list[tuple[str, ContainerSpec]]:
    """Presets in display order (smallest first)."""
    return list(CONTAINER_PRESETS.items())
