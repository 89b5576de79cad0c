# -*- coding: utf-8 -*-
"""
Construction variants.

A construction is either
  - LayeredConstruction:    ordered stack of Materials (layer 1 first), or
  - ResistanceConstruction: a single thermal resistance [m^2·K/W].

The two kinds are mutually exclusive; ``Construction`` is their union.
Both expose ``materials`` and ``resistance`` so consumers can read either
field without branching (a layered construction has resistance 0.0, a
resistance construction has no materials).
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import ClassVar, Iterable, Literal, Tuple, Union
import math

from constructsum.checksum.errors import InvalidInputError
from constructsum.models.material import Material

__all__ = [
    "LayeredConstruction", "ResistanceConstruction", "Construction", "NamedConstruction",
    "from_materials", "from_resistance",
]

KindT = Literal["layered", "resistance"]


@dataclass(frozen=True, slots=True)
class LayeredConstruction:
    materials: Tuple[Material, ...] = ()
    kind: ClassVar[KindT] = "layered"

    def __post_init__(self) -> None:
        mats = tuple(self.materials)
        for m in mats:
            if not isinstance(m, Material):
                raise InvalidInputError(f"layers must be Material instances, got {type(m).__name__}")
        object.__setattr__(self, "materials", mats)

    @property
    def resistance(self) -> float:
        return 0.0

    @property
    def n_layers(self) -> int:
        return len(self.materials)


@dataclass(frozen=True, slots=True)
class ResistanceConstruction:
    resistance: float = 0.0
    kind: ClassVar[KindT] = "resistance"

    def __post_init__(self) -> None:
        r = float(self.resistance)
        if not math.isfinite(r) or r < 0.0:
            raise InvalidInputError(f"resistance must be finite and >= 0, got {r!r}")
        object.__setattr__(self, "resistance", r)

    @property
    def materials(self) -> Tuple[Material, ...]:
        return ()

    @property
    def n_layers(self) -> int:
        return 0


Construction = Union[LayeredConstruction, ResistanceConstruction]


def from_materials(materials: Iterable[Material]) -> LayeredConstruction:
    return LayeredConstruction(materials=tuple(materials))


def from_resistance(resistance: float) -> ResistanceConstruction:
    return ResistanceConstruction(resistance=resistance)


@dataclass(frozen=True, slots=True)
class NamedConstruction:
    """A construction with the label it was declared under (run files, reports)."""
    name: str
    construction: Construction
