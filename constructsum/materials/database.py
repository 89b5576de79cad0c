# constructsum/materials/database.py
"""
Building materials registry (extensible).

- SI units throughout: k [W/m·K], rho [kg/m^3], cp [J/kg·K].
- No 'credible' values here; round placeholder figures only.
- Run files and CSV libraries can add entries via register_material().

Public API (stable):
    get_material(name: str) -> Material
    list_materials() -> list[str]
    register_material(material: Material, *, overwrite: bool = False) -> None
"""

from __future__ import annotations
from typing import Dict

from constructsum.models.material import Material

__all__ = ["get_material", "list_materials", "register_material"]


# Minimal in-memory registry; real projects can extend via CSV/YAML ingest.
_REGISTRY: Dict[str, Material] = {
    "concrete":   Material(conductivity=1.80, density=2400.0, specific_heat=880.0, name="concrete"),
    "brick":      Material(conductivity=0.72, density=1920.0, specific_heat=840.0, name="brick"),
    "gypsum":     Material(conductivity=0.16, density=800.0,  specific_heat=1090.0, name="gypsum"),
    "mineral_wool": Material(conductivity=0.04, density=30.0, specific_heat=840.0, name="mineral_wool"),
    "softwood":   Material(conductivity=0.13, density=500.0,  specific_heat=1600.0, name="softwood"),
    "steel":      Material(conductivity=50.0, density=7800.0, specific_heat=450.0, name="steel"),
    "water":      Material(conductivity=0.60, density=1000.0, specific_heat=4180.0, name="water"),
}


def get_material(name: str) -> Material:
    """Look up a registered material by (case-sensitive) name."""
    try:
        return _REGISTRY[name]
    except KeyError:
        raise KeyError(f"unknown material {name!r}; known: {list_materials()}") from None


def list_materials() -> list[str]:
    return sorted(_REGISTRY)


def register_material(material: Material, *, overwrite: bool = False) -> None:
    if not material.name:
        raise ValueError("registered materials need a name")
    if material.name in _REGISTRY and not overwrite:
        raise ValueError(f"material {material.name!r} already registered")
    _REGISTRY[material.name] = material
