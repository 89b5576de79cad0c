# constructsum/utils/constants.py
from __future__ import annotations

import numpy as np

__all__ = [
    "REGISTER_WIDTH", "PRECISION",
    "CONDUCTIVITY_WEIGHT", "DENSITY_WEIGHT", "SPECIFIC_HEAT_WEIGHT",
    "RESISTANCE_WEIGHT", "LAYER_WEIGHT",
]

# Register geometry / fixed-point scaling
REGISTER_WIDTH = np.dtype(np.float64).itemsize * 8   # bits per register (64)
PRECISION      = 1e9                                 # decimal places kept: 9

# Checksum weights (prime offsets so swapped fields rarely sum alike)
CONDUCTIVITY_WEIGHT  = 7.0
DENSITY_WEIGHT       = 13.0
SPECIFIC_HEAT_WEIGHT = 29.0
RESISTANCE_WEIGHT    = 59.0
LAYER_WEIGHT         = 17.0    # multiplied by the 1-based layer index
