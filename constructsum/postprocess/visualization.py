# constructsum/postprocess/visualization.py
"""
Plot of a bit-plane addition: addend bits above, resulting sum row below.
"""

from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np
import matplotlib.pyplot as plt

from constructsum.checksum.bits import bit_planes, sum_as_bits
from constructsum.utils.constants import REGISTER_WIDTH

__all__ = ["plot_bit_planes"]


def plot_bit_planes(
    values: Sequence[int],
    width: int = REGISTER_WIDTH,
    *,
    ax: plt.Axes | None = None,
    title: str | None = "Bit-plane addition",
) -> Tuple[plt.Figure, plt.Axes]:
    """
    Draw each addend as a row of W cells (MSB left) and the W-bit sum as the last row.

    Parameters
    ----------
    values : sequence of int
        Unsigned addends.
    width : int
        Register width W.
    ax : matplotlib Axes, optional
        If provided, plot into this axes; otherwise create a new figure.
    title : str, optional
        Title for the plot.

    Returns
    -------
    fig, ax : matplotlib Figure and Axes
    """
    planes = bit_planes(values, width)[:, ::-1]            # MSB first, like the string
    total = np.frombuffer(sum_as_bits(values, width).encode(), dtype=np.uint8) - ord("0")
    grid = np.vstack([planes, total[None, :]]).astype(np.float64)
    grid[-1] *= 2.0                                         # sum row in its own colour

    if ax is None:
        fig, ax = plt.subplots(
            figsize=(max(4.0, 0.12 * width), 0.35 * grid.shape[0] + 1.0),
            constrained_layout=True,
        )
    else:
        fig = ax.figure

    ax.imshow(grid, cmap="Blues", vmin=0.0, vmax=2.0, aspect="auto", interpolation="nearest")
    ax.axhline(planes.shape[0] - 0.5, color="black", linewidth=1.2)

    ax.set_yticks(range(grid.shape[0]))
    ax.set_yticklabels([f"x{k}" for k in range(planes.shape[0])] + ["sum"])
    step = max(1, width // 8)
    ticks = list(range(0, width, step))
    ax.set_xticks(ticks)
    ax.set_xticklabels([str(width - 1 - t) for t in ticks])
    ax.set_xlabel("bit position")
    if title:
        ax.set_title(title)

    return fig, ax
