"""Karnaugh map indexing and group geometry helpers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, List, Optional, Sequence, Set, Tuple

logger = logging.getLogger(__name__)

# (row_bits, col_bits) per variable count; 5 variables use two 4x4 maps
# selected by the most significant bit.
GRID_BITS = {2: (1, 1), 3: (1, 2), 4: (2, 2), 5: (2, 2)}


@dataclass(frozen=True)
class GroupRect:
    """One drawable tile of a grouped rectangle on the K-map.

    A group that wraps past the last row or column is emitted as several
    tiles sharing ``group`` and ``cells``; ``r0``/``c0`` may then be
    negative so the tile starts outside the grid.
    """

    group: int
    r0: int
    rows: int
    c0: int
    cols: int
    cells: FrozenSet[Tuple[int, int]]

    @property
    def area(self) -> int:
        return self.rows * self.cols


def gray_codes(bits: int) -> List[str]:
    """Reflected binary Gray code of ``bits`` width, as strings."""
    if bits <= 0:
        return [""]
    prev = gray_codes(bits - 1)
    return ["0" + code for code in prev] + ["1" + code for code in reversed(prev)]


def grid_dimensions(nvars: int) -> Tuple[int, int]:
    """Return (row_bits, col_bits) for the variable count."""
    if nvars not in GRID_BITS:
        raise ValueError("K-map available for 2-5 variables.")
    return GRID_BITS[nvars]


def map_dimensions(nvars: int) -> Tuple[int, int]:
    """Return (rows, cols) for K-map based on variable count."""
    row_bits, col_bits = grid_dimensions(nvars)
    return 1 << row_bits, 1 << col_bits


def map_count(nvars: int) -> int:
    """Number of maps drawn for the variable count."""
    return 2 if nvars == 5 else 1


def minterm_index(row_code: str, col_code: str, map_index: Optional[int] = None) -> int:
    """Position of the cell at the given Gray-coded row and column."""
    prefix = "" if map_index is None else str(map_index & 1)
    return int(prefix + row_code + col_code, 2)


def cell_coordinates(
    row_bits: int, col_bits: int, map_index: Optional[int] = None
) -> Dict[int, Tuple[int, int]]:
    """Map every position on one map to its (row, col) grid cell."""
    coords: Dict[int, Tuple[int, int]] = {}
    for r, row_code in enumerate(gray_codes(row_bits)):
        for c, col_code in enumerate(gray_codes(col_bits)):
            coords[minterm_index(row_code, col_code, map_index)] = (r, c)
    return coords


def rect_cells(
    r0: int, rows: int, c0: int, cols: int, nrows: int, ncols: int
) -> Set[Tuple[int, int]]:
    """Return the set of cells covered by a rectangle (with wrap-around)."""
    cells: Set[Tuple[int, int]] = set()
    for dr in range(rows):
        for dc in range(cols):
            r = (r0 + dr) % nrows
            c = (c0 + dc) % ncols
            cells.add((r, c))
    return cells


def _in_cyclic_interval(value: int, start: int, length: int, size: int) -> bool:
    return (value - start + size) % size < length


def minimal_cyclic_interval(indices: Iterable[int], size: int) -> Tuple[int, int]:
    """Smallest cyclic window ``(start, length)`` containing every index.

    Lengths are tried from 1 upwards and, for each, starts from 0; the first
    window that fits wins.
    """
    unique = sorted(set(indices))
    if not unique:
        return 0, 0
    if len(unique) == size:
        return 0, size

    for length in range(1, size + 1):
        for start in range(size):
            if all(_in_cyclic_interval(v, start, length, size) for v in unique):
                return start, length
    return 0, size


def resolve_rectangles(
    groups: Sequence[Iterable[int]],
    row_bits: int,
    col_bits: int,
    map_index: Optional[int] = None,
) -> List[GroupRect]:
    """Translate position groups into drawable rectangles for one map.

    Positions that are not on the selected map are ignored. Tiles are
    ordered by descending area, then by group index, so larger groups are
    drawn first.
    """
    nrows, ncols = 1 << row_bits, 1 << col_bits
    coords = cell_coordinates(row_bits, col_bits, map_index)

    rects: List[GroupRect] = []
    for group_id, group in enumerate(groups):
        cells = {coords[m] for m in group if m in coords}
        if not cells:
            continue

        r0, rows = minimal_cyclic_interval((r for r, _ in cells), nrows)
        c0, cols = minimal_cyclic_interval((c for _, c in cells), ncols)
        row_offsets = [0, -nrows] if r0 + rows > nrows else [0]
        col_offsets = [0, -ncols] if c0 + cols > ncols else [0]

        for dy in row_offsets:
            for dx in col_offsets:
                rects.append(
                    GroupRect(
                        group=group_id,
                        r0=r0 + dy,
                        rows=rows,
                        c0=c0 + dx,
                        cols=cols,
                        cells=frozenset(cells),
                    )
                )

    rects.sort(key=lambda g: (-g.area, g.group))
    logger.debug("%d groups resolved into %d tiles", len(groups), len(rects))
    return rects


__all__ = [
    "GroupRect",
    "GRID_BITS",
    "cell_coordinates",
    "gray_codes",
    "grid_dimensions",
    "map_count",
    "map_dimensions",
    "minimal_cyclic_interval",
    "minterm_index",
    "rect_cells",
    "resolve_rectangles",
]
