import random

import pytest

from kmap_solver.kmap_engine import (
    cell_coordinates,
    gray_codes,
    grid_dimensions,
    map_count,
    map_dimensions,
    minimal_cyclic_interval,
    minterm_index,
    rect_cells,
    resolve_rectangles,
)
from kmap_solver.logic import minimize


def test_gray_codes():
    assert gray_codes(0) == [""]
    assert gray_codes(1) == ["0", "1"]
    assert gray_codes(2) == ["00", "01", "11", "10"]
    codes = gray_codes(3)
    for a, b in zip(codes, codes[1:] + codes[:1]):
        assert sum(x != y for x, y in zip(a, b)) == 1


def test_grid_dimensions():
    assert grid_dimensions(2) == (1, 1)
    assert grid_dimensions(3) == (1, 2)
    assert grid_dimensions(4) == (2, 2)
    assert grid_dimensions(5) == (2, 2)
    assert map_dimensions(3) == (2, 4)
    assert map_count(5) == 2
    assert map_count(4) == 1
    with pytest.raises(ValueError):
        grid_dimensions(6)


def test_minterm_index():
    assert minterm_index("11", "10") == 14
    assert minterm_index("11", "10", 0) == 14
    assert minterm_index("11", "10", 1) == 30


def test_cell_coordinates():
    coords = cell_coordinates(2, 2)
    assert coords[0] == (0, 0)
    assert coords[2] == (0, 3)
    assert coords[3] == (0, 2)
    assert coords[8] == (3, 0)
    assert set(cell_coordinates(2, 2, 1)) == set(range(16, 32))


def test_minimal_cyclic_interval():
    assert minimal_cyclic_interval([], 4) == (0, 0)
    assert minimal_cyclic_interval([2], 4) == (2, 1)
    assert minimal_cyclic_interval([1, 2], 4) == (1, 2)
    assert minimal_cyclic_interval([0, 3], 4) == (3, 2)
    assert minimal_cyclic_interval([3, 0, 3], 4) == (3, 2)
    assert minimal_cyclic_interval([0, 1, 2, 3], 4) == (0, 4)
    assert minimal_cyclic_interval([0, 1], 2) == (0, 2)


def test_rect_cells_wraps():
    assert rect_cells(3, 2, 0, 1, 4, 4) == {(3, 0), (0, 0)}


def test_single_rectangle():
    rects = resolve_rectangles([[1, 3]], 1, 1)
    assert len(rects) == 1
    rect = rects[0]
    assert (rect.group, rect.r0, rect.rows, rect.c0, rect.cols) == (0, 0, 2, 1, 1)
    assert rect.cells == frozenset({(0, 1), (1, 1)})


def test_corners_split_into_four_tiles():
    rects = resolve_rectangles([[0, 2, 8, 10]], 2, 2)
    assert [(r.r0, r.c0) for r in rects] == [(3, 3), (3, -1), (-1, 3), (-1, -1)]
    assert all(r.rows == 2 and r.cols == 2 for r in rects)
    assert all(r.cells == rects[0].cells for r in rects)


def test_row_wrap_only():
    # positions 0 and 8 share column 0, rows 0 and 3
    rects = resolve_rectangles([[0, 8]], 2, 2)
    assert [(r.r0, r.rows, r.c0, r.cols) for r in rects] == [(3, 2, 0, 1), (-1, 2, 0, 1)]


def test_larger_groups_come_first():
    rects = resolve_rectangles([[5], [0, 1, 2, 3], [4, 5]], 2, 2)
    assert [r.group for r in rects] == [1, 2, 0]
    assert [r.area for r in rects] == [4, 2, 1]


def test_equal_areas_keep_group_order():
    rects = resolve_rectangles([[12, 13], [0, 1]], 2, 2)
    assert [r.group for r in rects] == [0, 1]


def test_five_variable_maps():
    groups = [[16, 17], [0, 16]]
    first = resolve_rectangles(groups, 2, 2, 0)
    second = resolve_rectangles(groups, 2, 2, 1)
    assert [r.group for r in first] == [1]
    assert [r.group for r in second] == [0, 1]


def test_empty_groups():
    assert resolve_rectangles([], 2, 2) == []
    assert resolve_rectangles([[]], 2, 2) == []


@pytest.mark.parametrize("nvars", [2, 3, 4, 5])
def test_engine_groups_resolve_exactly(nvars):
    rng = random.Random(nvars)
    row_bits, col_bits = grid_dimensions(nvars)
    nrows, ncols = map_dimensions(nvars)
    maps = [0, 1] if nvars == 5 else [None]
    for _ in range(60):
        ones = {m for m in range(1 << nvars) if rng.random() < 0.5}
        dcs = {m for m in range(1 << nvars) if m not in ones and rng.random() < 0.2}
        for form in ("sop", "pos"):
            groups = minimize(nvars, ones, dcs, form).groups
            for map_index in maps:
                coords = cell_coordinates(row_bits, col_bits, map_index)
                for rect in resolve_rectangles(groups, row_bits, col_bits, map_index):
                    expected = {coords[m] for m in groups[rect.group] if m in coords}
                    drawn = rect_cells(rect.r0, rect.rows, rect.c0, rect.cols, nrows, ncols)
                    assert drawn == expected == set(rect.cells)
                    assert rect.area == len(expected)
