# constructsum/postprocess/report.py
"""
Batch checksum report and collision audit.
"""
from __future__ import annotations

from typing import Iterable

import pandas as pd

from constructsum.checksum.bits import from_bits
from constructsum.checksum.builder import DEFAULT_SETTINGS, ChecksumSettings, checksum
from constructsum.models.construction import NamedConstruction

__all__ = ["checksum_table", "unique_count"]


def checksum_table(
    named: Iterable[NamedConstruction],
    settings: ChecksumSettings = DEFAULT_SETTINGS,
    *,
    debug: bool = False,
) -> pd.DataFrame:
    """
    One row per construction: name, kind, n_layers, checksum, value, duplicate.

    ``duplicate`` is True for every row whose checksum is shared with another row.
    """
    rows = []
    for nc in named:
        cs = checksum(nc.construction, settings, debug=debug)
        rows.append({
            "name": nc.name,
            "kind": nc.construction.kind,
            "n_layers": nc.construction.n_layers,
            "checksum": cs,
            "value": from_bits(cs),
        })
    df = pd.DataFrame(rows, columns=["name", "kind", "n_layers", "checksum", "value"])
    df["duplicate"] = df["checksum"].duplicated(keep=False)
    return df


def unique_count(checksums: Iterable[str]) -> int:
    return len(set(checksums))
