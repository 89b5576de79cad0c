# -*- coding: utf-8 -*-
"""
Results IO helpers.

Write:
  * checksums.json  (name -> checksum, plus unique count)
  * checksums.csv   (full report table)

This keeps on-disk layout stable for diffing runs.
"""
from __future__ import annotations
import json
from pathlib import Path

import pandas as pd

def write_checksums(run_dir: Path, table: pd.DataFrame) -> Path:
    run_dir = Path(run_dir)
    run_dir.mkdir(parents=True, exist_ok=True)
    payload = {
        "checksums": dict(zip(table["name"], table["checksum"])),
        "unique": int(table["checksum"].nunique()),
    }
    with open(run_dir / "checksums.json", "w") as f:
        json.dump(payload, f, indent=2, sort_keys=True)
    out = run_dir / "checksums.csv"
    table.to_csv(out, index=False)
    return out
