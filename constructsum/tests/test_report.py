# -*- coding: utf-8 -*-
"""
Checksum table flags collisions; bit-plane plot has one row per addend plus the sum.
"""
import matplotlib
matplotlib.use("Agg")

from constructsum.checksum.bits import from_bits
from constructsum.models.construction import NamedConstruction, from_materials, from_resistance
from constructsum.models.material import Material
from constructsum.postprocess.report import checksum_table, unique_count
from constructsum.postprocess.visualization import plot_bit_planes


def _named():
    m = Material(1.0, 2.0, 3.0)
    return [
        NamedConstruction("one", from_materials([m])),
        NamedConstruction("same", from_materials([Material(1.0, 2.0, 3.0)])),
        NamedConstruction("roof", from_resistance(5.0)),
    ]


def test_checksum_table_columns_and_duplicates():
    df = checksum_table(_named())
    assert list(df.columns) == ["name", "kind", "n_layers", "checksum", "value", "duplicate"]
    assert df["duplicate"].tolist() == [True, True, False]
    assert df["kind"].tolist() == ["layered", "layered", "resistance"]
    assert df["n_layers"].tolist() == [1, 1, 0]
    assert int(df.loc[2, "value"]) == from_bits(df.loc[2, "checksum"])
    assert unique_count(df["checksum"]) == 2


def test_empty_table():
    df = checksum_table([])
    assert df.empty
    assert unique_count([]) == 0


def test_plot_bit_planes():
    fig, ax = plot_bit_planes([5, 6], 4)
    img = ax.get_images()[0].get_array()
    assert img.shape == (3, 4)
    # MSB first: 5 = 0101, 6 = 0110, sum 11 = 1011 (drawn at double intensity)
    assert img[0].tolist() == [0, 1, 0, 1]
    assert img[1].tolist() == [0, 1, 1, 0]
    assert img[2].tolist() == [2, 0, 2, 2]
    assert [t.get_text() for t in ax.get_yticklabels()] == ["x0", "x1", "sum"]
    matplotlib.pyplot.close(fig)
