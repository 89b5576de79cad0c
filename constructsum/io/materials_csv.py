# -*- coding: utf-8 -*-
"""
Materials CSV ingest.

Expected columns (header, case-sensitive):
  name,conductivity,density,specific_heat

Example rows:
  brick,0.72,1920,840
  plaster,0.5,1300,1000

Units:
  conductivity [W/m·K], density [kg/m^3], specific_heat [J/kg·K]
"""
from __future__ import annotations
import csv
from pathlib import Path
from typing import Dict
from constructsum.models.material import Material

def load_materials(csv_path: Path) -> Dict[str, Material]:
    M: Dict[str, Material] = {}
    with open(csv_path, newline="") as f:
        for r in csv.DictReader(f):
            name = r['name'].strip()
            if name in M:
                raise ValueError(f"duplicate material in {csv_path}: {name}")
            M[name] = Material(
                conductivity=float(r['conductivity']),
                density=float(r['density']),
                specific_heat=float(r['specific_heat']),
                name=name,
            )
    if not M:
        raise ValueError("CSV contains no materials")
    return M
