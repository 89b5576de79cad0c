# constructsum/checksum/bits.py
"""
Fixed-width bit adder.

Sums unsigned integers as W-bit registers using bit-plane carry propagation:

  1. decompose every addend into its bits -> an (n, W) 0/1 matrix whose
     column j holds bit j (column 0 = LSB) of every addend;
  2. walk columns LSB -> MSB, adding the incoming carry to the column count:
        bit_j   = (count_j + carry_j) mod 2
        carry_j+1 = (count_j + carry_j) >> 1
     A carry may exceed 1 when many addends share a set bit; it simply
     folds into the next column.

Carry out of column W-1 is discarded, so the result is (sum) mod 2^W.

Public API (stable):
    fixed_point_round(value, precision) -> int
    to_bits(value, width) -> str
    from_bits(bits) -> int
    bit_planes(values, width) -> np.ndarray
    sum_as_bits(values, width, *, strict=False, debug=False) -> str
    add_floats(values, precision, width, *, strict=False, debug=False) -> str
"""

from __future__ import annotations

import math
import operator
from typing import Iterable, List, Sequence

import numpy as np

from ..utils.constants import REGISTER_WIDTH
from ..utils import diagnostics as diag
from .errors import InvalidInputError, OverflowDetectedError

__all__ = [
    "fixed_point_round",
    "to_bits",
    "from_bits",
    "bit_planes",
    "sum_as_bits",
    "add_floats",
]


# ---------------------------------------------------------------------
# Scalar helpers
# ---------------------------------------------------------------------


def fixed_point_round(value: float, precision: float) -> int:
    """
    Scale ``value`` by ``precision`` (a power of ten) and round half-up.

    Returns floor(value * precision + 0.5) as an unsigned Python int.

    Examples
    --------
    >>> fixed_point_round(1.0, 1)
    1
    >>> fixed_point_round(3.14159265358979, 10000)
    31416
    """
    x = float(value) * float(precision) + 0.5
    if not math.isfinite(x):
        raise InvalidInputError(f"cannot scale non-finite value {value!r} (precision={precision!r})")
    q = math.floor(x)
    if q < 0:
        raise InvalidInputError(f"scaled value must be non-negative, got {value!r} * {precision!r}")
    return q


def _check_width(width: int) -> int:
    try:
        w = operator.index(width)
    except TypeError:
        raise InvalidInputError(f"width must be an integer, got {width!r}") from None
    if w <= 0:
        raise InvalidInputError(f"width must be positive, got {w}")
    return w


def to_bits(value: int, width: int = REGISTER_WIDTH) -> str:
    """W-bit string of one unsigned integer (MSB first); higher bits are dropped."""
    w = _check_width(width)
    v = operator.index(value)
    if v < 0:
        raise InvalidInputError(f"value must be non-negative, got {v}")
    return format(v & ((1 << w) - 1), f"0{w}b")


def from_bits(bits: str) -> int:
    """Unsigned integer value of an MSB-first bit string."""
    if not bits or set(bits) - {"0", "1"}:
        raise InvalidInputError(f"not a bit string: {bits!r}")
    return int(bits, 2)


# ---------------------------------------------------------------------
# Bit-plane addition
# ---------------------------------------------------------------------


def _registers(values: Iterable[int], width: int, strict: bool) -> List[int]:
    """Validate addends and load them into W-bit registers (wrap or reject)."""
    mask = (1 << width) - 1
    regs: List[int] = []
    for v in values:
        try:
            v = operator.index(v)
        except TypeError:
            raise InvalidInputError(f"addends must be integers, got {v!r}") from None
        if v < 0:
            raise InvalidInputError(f"addends must be non-negative, got {v}")
        if v > mask:
            if strict:
                raise OverflowDetectedError(v, width)
            v &= mask
        regs.append(v)
    if not regs:
        raise InvalidInputError("at least one addend is required")
    return regs


def bit_planes(values: Sequence[int], width: int = REGISTER_WIDTH) -> np.ndarray:
    """
    Column-wise bit contributions of every addend.

    Returns
    -------
    planes : np.ndarray, shape (n, width), dtype uint8
        planes[k, j] is bit j of addend k (column 0 = LSB).
    """
    w = _check_width(width)
    regs = _registers(values, w, strict=False)
    planes = np.zeros((len(regs), w), dtype=np.uint8)
    for k, v in enumerate(regs):
        j = 0
        while v:
            planes[k, j] = v & 1
            v >>= 1
            j += 1
    return planes


def sum_as_bits(
    values: Sequence[int],
    width: int = REGISTER_WIDTH,
    *,
    strict: bool = False,
    debug: bool = False,
) -> str:
    """
    Sum unsigned integers as ``width``-bit registers.

    Parameters
    ----------
    values : sequence of int
        Non-empty; each addend is expected to fit ``width`` bits.
    width : int
        Register width W (default: bits of float64 = 64).
    strict : bool
        If False (default) oversized addends and the final sum wrap mod 2^W.
        If True, either condition raises OverflowDetectedError.
    debug : bool
        Print a one-line column/carry summary.

    Returns
    -------
    str
        Exactly W characters of '0'/'1', MSB first.
    """
    w = _check_width(width)
    regs = _registers(values, w, strict)

    # pass 1: per-column counts of set bits
    planes = bit_planes(regs, w)
    counts = planes.sum(axis=0, dtype=np.int64)

    # pass 2: resolve carries LSB -> MSB
    result = np.zeros(w, dtype=np.uint8)
    carries = np.zeros(w, dtype=np.int64)
    carry = 0
    for j in range(w):
        carries[j] = carry
        total = int(counts[j]) + carry
        result[j] = total & 1
        carry = total >> 1

    if debug:
        diag.log_addition_summary(
            n_addends=len(regs), width=w, column_counts=counts,
            carries=carries, overflow_carry=carry,
        )
    if carry and strict:
        raise OverflowDetectedError(sum(regs), w)

    return "".join("1" if b else "0" for b in result[::-1])


def add_floats(
    values: Iterable[float],
    precision: float,
    width: int = REGISTER_WIDTH,
    *,
    strict: bool = False,
    debug: bool = False,
) -> str:
    """
    Scale real values to fixed point at ``precision`` and sum them as bits.

    precision=1e0:  1.0 + 2.0 -> 0b01 + 0b10 = 0b11
    precision=1e1:  1.0 + 2.0 -> 0b01010 + 0b10100 = 0b11110
    """
    scaled = [fixed_point_round(v, precision) for v in values]
    return sum_as_bits(scaled, width, strict=strict, debug=debug)
