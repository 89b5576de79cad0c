# -*- coding: utf-8 -*-
"""
Material dataclass.

Fields:
  - conductivity:   thermal conductivity [W/m·K]
  - density:        density [kg/m^3]
  - specific_heat:  specific heat [J/kg·K]
  - name:           optional label (not part of equality or the checksum)
"""
from __future__ import annotations
from dataclasses import dataclass, field
import math

from constructsum.checksum.errors import InvalidInputError

Number = float

@dataclass(frozen=True, slots=True)
class Material:
    conductivity: Number
    density: Number
    specific_heat: Number
    name: str | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        for key in ("conductivity", "density", "specific_heat"):
            v = float(getattr(self, key))
            if not math.isfinite(v) or v < 0.0:
                raise InvalidInputError(f"material {key} must be finite and >= 0, got {v!r}")
            object.__setattr__(self, key, v)
