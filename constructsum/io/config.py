# constructsum/io/config.py
# -*- coding: utf-8 -*-
"""
YAML → ChecksumSettings, material library and named constructions.

Schema (minimal, example):

settings:            # optional; defaults from utils/constants.py
  precision: 1.0e9
  width: 64
  strict: false
  weights: { conductivity: 7, density: 13, specific_heat: 29, resistance: 59, layer: 17 }

materials:           # optional run-local library
  plaster: { conductivity: 0.5, density: 1300, specific_heat: 1000 }

constructions:
  - name: wall_a
    layers:
      - { material: brick }                 # run library first, then registry
      - { material: plaster }
      - { conductivity: 0.04, density: 30, specific_heat: 840 }   # inline
  - name: roof_simple
    resistance: 5.0
"""
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping

import yaml

from constructsum.checksum.builder import ChecksumSettings
from constructsum.materials.database import get_material
from constructsum.models.construction import (
    LayeredConstruction, NamedConstruction, ResistanceConstruction,
)
from constructsum.models.material import Material

_PROPS = ("conductivity", "density", "specific_heat")

@dataclass
class RunConfig:
    raw: dict
    path: Path

def load_config(path: Path) -> RunConfig:
    data = yaml.safe_load(Path(path).read_text())
    if not isinstance(data, dict):
        raise ValueError("Top-level YAML must be a mapping")
    _validate_minimum(data)
    return RunConfig(raw=data, path=Path(path))

def build_settings(cfg: RunConfig) -> ChecksumSettings:
    return ChecksumSettings.from_mapping(cfg.raw.get("settings"))

def _as_float(value: Any, where: str) -> float:
    if isinstance(value, bool):
        raise ValueError(f"{where} must be a number, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValueError(f"{where} must be a number, got {value!r}") from None

def material_from_row(row: Mapping[str, Any], name: str | None = None) -> Material:
    label = f"material {name or '<inline>'}"
    if not isinstance(row, Mapping):
        raise ValueError(f"{label} must be a mapping, got {row!r}")
    missing = [k for k in _PROPS if k not in row]
    if missing:
        raise ValueError(f"{label} missing keys: {missing}")
    return Material(
        conductivity=_as_float(row["conductivity"], f"{label}: conductivity"),
        density=_as_float(row["density"], f"{label}: density"),
        specific_heat=_as_float(row["specific_heat"], f"{label}: specific_heat"),
        name=name,
    )

def build_library(
    cfg: RunConfig, extra: Mapping[str, Material] | None = None
) -> Dict[str, Material]:
    """Run-local materials: ``extra`` (e.g. a CSV library) overridden by YAML entries."""
    lib: Dict[str, Material] = dict(extra or {})
    for name, row in (cfg.raw.get("materials") or {}).items():
        lib[str(name)] = material_from_row(row, name=str(name))
    return lib

def _resolve_layer(row: Any, lib: Mapping[str, Material], where: str) -> Material:
    if not isinstance(row, Mapping):
        raise ValueError(f"{where}: must be a mapping, got {row!r}")
    if "material" in row:
        ref = str(row["material"])
        return lib[ref] if ref in lib else get_material(ref)
    return material_from_row(row)

def build_constructions(
    cfg: RunConfig, library: Mapping[str, Material] | None = None
) -> list[NamedConstruction]:
    lib = build_library(cfg, library)
    out: list[NamedConstruction] = []
    seen: set[str] = set()
    for i, row in enumerate(cfg.raw["constructions"]):
        if not isinstance(row, Mapping):
            raise ValueError(f"construction {i + 1}: must be a mapping, got {row!r}")
        name = str(row.get("name", f"construction_{i + 1}"))
        if name in seen:
            raise ValueError(f"duplicate construction name: {name}")
        seen.add(name)

        has_layers = "layers" in row
        has_r = "resistance" in row
        if has_layers == has_r:
            raise ValueError(f"construction {name}: give exactly one of 'layers' or 'resistance'")

        if has_layers:
            rows = row["layers"] or []
            if not isinstance(rows, list):
                raise ValueError(f"construction {name}: layers must be a list")
            layers = [_resolve_layer(layer, lib, f"construction {name}: layer {j + 1}")
                      for j, layer in enumerate(rows)]
            c = LayeredConstruction(materials=tuple(layers))
        else:
            c = ResistanceConstruction(
                resistance=_as_float(row["resistance"], f"construction {name}: resistance")
            )
        out.append(NamedConstruction(name=name, construction=c))
    return out

def _validate_minimum(cfg: dict) -> None:
    if "constructions" not in cfg:
        raise ValueError("Missing top-level key: constructions")
    if not isinstance(cfg["constructions"], list):
        raise ValueError("constructions must be a list")
