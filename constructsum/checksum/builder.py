# constructsum/checksum/builder.py
"""
Construction checksum.

Flattens a construction into weighted real values, scales each to a
fixed-point integer and sums them with the bit-plane adder.

Per material at 1-based layer L (in this order):
    conductivity  * w_k   * L * w_layer
    density       * w_rho * L * w_layer
    specific_heat * w_cp  * L * w_layer
then one trailing entry for the construction:
    resistance    * w_R          (0.0 for layered constructions)

The layer factor makes each field's contribution depend on its position, so
reversing a stack of value-equal materials changes the sum.
"""
from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
import operator
from typing import Any, List, Mapping

from ..models.construction import Construction, LayeredConstruction, ResistanceConstruction
from ..utils import constants as C
from ..utils import diagnostics as diag
from .bits import fixed_point_round, sum_as_bits
from .errors import InvalidInputError

__all__ = [
    "ChecksumWeights",
    "ChecksumSettings",
    "DEFAULT_SETTINGS",
    "checksum_inputs",
    "scaled_inputs",
    "checksum",
]


@dataclass(frozen=True, slots=True)
class ChecksumWeights:
    conductivity: float = C.CONDUCTIVITY_WEIGHT
    density: float = C.DENSITY_WEIGHT
    specific_heat: float = C.SPECIFIC_HEAT_WEIGHT
    resistance: float = C.RESISTANCE_WEIGHT
    layer: float = C.LAYER_WEIGHT


@dataclass(frozen=True, slots=True)
class ChecksumSettings:
    """
    Everything that shapes a checksum besides the construction itself.

    Attributes
    ----------
    weights : ChecksumWeights
        Per-field and per-layer multipliers.
    precision : float
        Fixed-point factor (power of ten).
    width : int
        Register width in bits.
    strict : bool
        Raise OverflowDetectedError instead of wrapping mod 2^width.
    """
    weights: ChecksumWeights = field(default_factory=ChecksumWeights)
    precision: float = C.PRECISION
    width: int = C.REGISTER_WIDTH
    strict: bool = False

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any] | None) -> "ChecksumSettings":
        """Build from a config mapping; unknown keys are rejected."""
        base = cls()
        if not raw:
            return base
        allowed = {"precision", "width", "strict", "weights"}
        unknown = set(raw) - allowed
        if unknown:
            raise ValueError(f"unknown settings keys: {sorted(unknown)}")
        w_raw = raw.get("weights") or {}
        w_unknown = set(w_raw) - {f.name for f in fields(ChecksumWeights)}
        if w_unknown:
            raise ValueError(f"unknown weight keys: {sorted(w_unknown)}")
        weights = replace(base.weights, **{k: float(v) for k, v in w_raw.items()})

        strict = raw.get("strict", base.strict)
        if not isinstance(strict, bool):
            raise ValueError("settings.strict must be a boolean")
        width = raw.get("width", base.width)
        if isinstance(width, bool):
            raise ValueError(f"settings.width must be an integer, got {width!r}")
        try:
            width = operator.index(width)
        except TypeError:
            raise ValueError(f"settings.width must be an integer, got {width!r}") from None
        if width <= 0:
            raise ValueError(f"settings.width must be positive, got {width}")

        return cls(
            weights=weights,
            precision=float(raw.get("precision", base.precision)),
            width=width,
            strict=strict,
        )


DEFAULT_SETTINGS = ChecksumSettings()


def checksum_inputs(
    construction: Construction,
    weights: ChecksumWeights = DEFAULT_SETTINGS.weights,
) -> List[float]:
    """Weighted real values fed to the adder, in emission order."""
    if not isinstance(construction, (LayeredConstruction, ResistanceConstruction)):
        raise InvalidInputError(f"not a construction: {type(construction).__name__}")

    out: List[float] = []
    for layer, m in enumerate(construction.materials, start=1):
        out.append(m.conductivity * weights.conductivity * layer * weights.layer)
        out.append(m.density * weights.density * layer * weights.layer)
        out.append(m.specific_heat * weights.specific_heat * layer * weights.layer)
    out.append(construction.resistance * weights.resistance)
    return out


def scaled_inputs(
    construction: Construction,
    settings: ChecksumSettings = DEFAULT_SETTINGS,
) -> List[int]:
    return [fixed_point_round(x, settings.precision)
            for x in checksum_inputs(construction, settings.weights)]


def checksum(
    construction: Construction,
    settings: ChecksumSettings = DEFAULT_SETTINGS,
    *,
    debug: bool = False,
) -> str:
    """
    Fixed-width bit-string fingerprint of a construction (MSB first).

    Equal-valued constructions always give equal strings; permuting the
    layers of a stack gives a different string in practice.
    """
    inputs = checksum_inputs(construction, settings.weights)
    scaled = [fixed_point_round(x, settings.precision) for x in inputs]
    if debug:
        diag.log_checksum_inputs(kind=construction.kind, inputs=inputs, scaled=scaled)
    return sum_as_bits(scaled, settings.width, strict=settings.strict, debug=debug)
