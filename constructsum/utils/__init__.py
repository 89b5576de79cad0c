# constructsum/utils/__init__.py
from __future__ import annotations
from .constants import (
    REGISTER_WIDTH, PRECISION,
    CONDUCTIVITY_WEIGHT, DENSITY_WEIGHT, SPECIFIC_HEAT_WEIGHT,
    RESISTANCE_WEIGHT, LAYER_WEIGHT,
)

__all__ = [
    "REGISTER_WIDTH", "PRECISION",
    "CONDUCTIVITY_WEIGHT", "DENSITY_WEIGHT", "SPECIFIC_HEAT_WEIGHT",
    "RESISTANCE_WEIGHT", "LAYER_WEIGHT",
]
