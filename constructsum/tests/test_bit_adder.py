# -*- coding: utf-8 -*-
"""
Bit-plane adder: W-bit sum mod 2^W, MSB-first string, order independent.
"""
import itertools

import numpy as np
import pytest

from constructsum.checksum.bits import (
    add_floats, bit_planes, from_bits, sum_as_bits, to_bits,
)
from constructsum.checksum.errors import InvalidInputError, OverflowDetectedError

W = 64
MAX = 2**W - 1


def test_one_plus_two():
    out = sum_as_bits([1, 2], 64)
    assert len(out) == 64
    assert out == "0" * 62 + "11"


def test_scaled_sum_of_six():
    out = sum_as_bits([100, 200, 300], 64)
    assert out == "1001011000".rjust(64, "0")
    assert from_bits(out) == 600


def test_single_input_identity():
    for x in (0, 1, 600, 6565740000000000, MAX):
        assert sum_as_bits([x], W) == format(x, "064b")


def test_wraparound_to_zero():
    assert sum_as_bits([MAX, 1], W) == "0" * W


def test_multi_bit_carries():
    # every column holds five set bits -> carries of 2 and more
    out = sum_as_bits([MAX] * 5, W)
    assert from_bits(out) == (5 * MAX) % 2**W


def test_commutativity():
    vals = [3, 2**63, 12345678901234567, 2**40 + 7, MAX]
    expected = sum_as_bits(vals, W)
    for perm in itertools.permutations(vals):
        assert sum_as_bits(list(perm), W) == expected
    assert from_bits(expected) == sum(vals) % 2**W


def test_matches_modular_addition_random():
    rng = np.random.default_rng(7)
    for _ in range(20):
        vals = [int(x) for x in rng.integers(0, 2**62, size=9)]
        assert sum_as_bits(vals, W) == to_bits(sum(vals), W)


def test_narrow_width():
    assert sum_as_bits([5, 6], 4) == "1011"
    assert sum_as_bits([15, 15], 4) == "1110"


def test_bit_planes_columns_are_lsb_first():
    planes = bit_planes([5, 2], 4)
    assert planes.dtype == np.uint8
    assert planes.tolist() == [[1, 0, 1, 0], [0, 1, 0, 0]]


def test_oversized_addend_wraps_unless_strict():
    assert sum_as_bits([2**W + 3], W) == to_bits(3, W)
    with pytest.raises(OverflowDetectedError):
        sum_as_bits([2**W + 3], W, strict=True)


def test_strict_rejects_sum_overflow():
    with pytest.raises(OverflowDetectedError) as exc:
        sum_as_bits([MAX, 1], W, strict=True)
    assert exc.value.width == W


@pytest.mark.parametrize("vals,width", [([], 64), ([-1], 64), ([1.5], 64), ([1], 0)])
def test_invalid_input(vals, width):
    with pytest.raises(InvalidInputError):
        sum_as_bits(vals, width)


def test_add_floats_precision():
    assert add_floats([1.0, 2.0], 1).endswith("011")
    assert add_floats([1.0, 2.0], 10) == "11110".rjust(64, "0")


def test_debug_summary(capsys):
    sum_as_bits([MAX, 1], W, debug=True)
    out = capsys.readouterr().out
    assert out.startswith("[diag]")
    assert "wrapped" in out


@pytest.mark.parametrize("bad", ["", "012", "0b11", " 1"])
def test_from_bits_rejects_non_bit_strings(bad):
    with pytest.raises(InvalidInputError):
        from_bits(bad)


def test_from_bits_reads_msb_first():
    assert from_bits("0011") == 3
    assert from_bits("1" + "0" * 63) == 2**63
