"""Matplotlib rendering of a K-map with its group overlays."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

import matplotlib.pyplot as plt
import numpy as np

from .kmap_engine import (
    gray_codes,
    grid_dimensions,
    map_count,
    map_dimensions,
    minterm_index,
    resolve_rectangles,
)

COLOR_PALETTE = [
    "#ef4444", "#3b82f6", "#22c55e", "#f59e0b",
    "#ec4899", "#06b6d4", "#a855f7", "#84cc16",
]

FIGURE_SIZES = {2: (3.2, 3.2), 3: (5.2, 3.4), 4: (5.2, 5.2), 5: (5.2, 5.2)}


def axis_labels(nvars: int):
    """Return (map, rows, cols) variable names following the position bit split.

    The map selector takes the most significant bit, rows the next
    ``row_bits`` variables and columns the rest.
    """
    row_bits, _ = grid_dimensions(nvars)
    names = [f"x_{i}" for i in range(nvars)]
    map_bits = map_count(nvars) - 1
    rows = names[map_bits : map_bits + row_bits]
    cols = names[map_bits + row_bits :]
    return ", ".join(names[:map_bits]), ", ".join(rows), ", ".join(cols)


def draw_kmap(
    nvars: int,
    minterms: Iterable[int],
    dontcares: Iterable[int] = (),
    groups: Optional[Sequence[Iterable[int]]] = None,
    map_index: Optional[int] = None,
    ax=None,
):
    """Draw one K-map and return its figure.

    For 5 variables ``map_index`` picks the half (0 or 1) to draw.
    """
    row_bits, col_bits = grid_dimensions(nvars)
    nrows, ncols = map_dimensions(nvars)
    if nvars == 5 and map_index is None:
        map_index = 0

    if ax is None:
        fig, ax = plt.subplots(figsize=FIGURE_SIZES.get(nvars, (4.2, 4.2)))
    else:
        fig = ax.figure

    ax.set_xlim(-0.6, ncols)
    ax.set_ylim(-0.6, nrows)
    ax.set_xticks(np.arange(0, ncols + 1))
    ax.set_yticks(np.arange(0, nrows + 1))
    ax.set_xticklabels([])
    ax.set_yticklabels([])
    ax.grid(True, color="#888", linewidth=1)
    ax.invert_yaxis()
    ax.set_facecolor("#fafafa")

    map_label, row_label, col_label = axis_labels(nvars)
    title = f"rows: {row_label}   cols: {col_label}"
    if map_label:
        title = f"{map_label} = {map_index}\n" + title
    ax.set_title(title, fontsize=9, color="#333")

    row_codes = gray_codes(row_bits)
    col_codes = gray_codes(col_bits)
    for j, code in enumerate(col_codes):
        ax.text(j + 0.5, -0.25, code, ha="center", va="center", fontsize=10, color="#333")
    for i, code in enumerate(row_codes):
        ax.text(-0.25, i + 0.5, code, ha="right", va="center", fontsize=10, color="#333")

    ones = set(minterms)
    dcs = set(dontcares)
    for r, row_code in enumerate(row_codes):
        for c, col_code in enumerate(col_codes):
            idx = minterm_index(row_code, col_code, map_index)
            if idx in ones:
                val, color = "1", "#1f3c88"
            elif idx in dcs:
                val, color = "X", "#ff8c32"
            else:
                val, color = "0", "#9aa7b7"
            ax.text(c + 0.5, r + 0.5, val, color=color,
                    fontsize=13, ha="center", va="center", weight="bold")
            ax.text(c + 0.05, r + 0.9, str(idx), color="#777", fontsize=8, alpha=0.7)

    # Wrapped tiles start outside the grid and must not spill over the labels.
    grid_box = plt.Rectangle((0, 0), ncols, nrows, transform=ax.transData)
    for rect in resolve_rectangles(groups or [], row_bits, col_bits, map_index):
        color = COLOR_PALETTE[rect.group % len(COLOR_PALETTE)]
        inset = 0.06 + (rect.group % 3) * 0.035
        patch = ax.add_patch(
            plt.Rectangle(
                (rect.c0 + inset, rect.r0 + inset),
                max(0.12, rect.cols - inset * 2),
                max(0.12, rect.rows - inset * 2),
                fill=True,
                facecolor=color,
                alpha=0.25,
                edgecolor=color,
                lw=2.5,
            )
        )
        patch.set_clip_path(grid_box)
    return fig


__all__ = ["COLOR_PALETTE", "axis_labels", "draw_kmap"]
