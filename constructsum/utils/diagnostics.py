"""
constructsum/utils/diagnostics.py

Targeted, low-noise diagnostics to understand where a checksum comes from.
Import and call these from the adder/builder when debug=True.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np


def _fmt_columns(counts: np.ndarray, name: str) -> str:
    if counts.size == 0:
        return f"{name}: (empty)"
    active = np.flatnonzero(counts)
    if active.size == 0:
        return f"{name}: all zero"
    return f"{name}: bits {int(active[0])}..{int(active[-1])} active, max={int(counts.max())}"


def log_addition_summary(
    *,
    n_addends: int,
    width: int,
    column_counts: np.ndarray,
    carries: np.ndarray,
    overflow_carry: int,
    prefix: str = "[diag]",
) -> None:
    """Print column-count and carry ranges for one bit-plane addition."""
    msg = [
        prefix,
        f"addends={n_addends} width={width}",
        _fmt_columns(np.asarray(column_counts), "columns"),
        f"max carry={int(np.max(carries)) if np.size(carries) else 0}",
    ]
    if overflow_carry:
        msg.append(f"wrapped (carry out={overflow_carry})")
    print(" | ".join(msg))


def log_checksum_inputs(
    *,
    kind: str,
    inputs: Sequence[float],
    scaled: Sequence[int],
    prefix: str = "[diag]",
) -> None:
    """
    One line per checksum input: weighted real value and its fixed-point integer.
    """
    print(f"{prefix} construction kind={kind} | inputs={len(inputs)}")
    for i, (x, q) in enumerate(zip(inputs, scaled)):
        print(f"{prefix}   [{i:02d}] {x:+.9e} -> {q}")
