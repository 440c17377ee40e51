import matplotlib.pyplot as plt

from kmap_solver.kmap_engine import cell_coordinates
from kmap_solver.logic import minimize
from kmap_solver.plotting import axis_labels, draw_kmap


def test_draw_corner_group():
    fig = draw_kmap(4, [0, 2, 8, 10], [], [[0, 2, 8, 10]])
    ax = fig.axes[0]
    assert len(ax.patches) == 4
    values = [t.get_text() for t in ax.texts]
    assert "X" not in values
    assert "10" in values
    plt.close(fig)


def test_draw_five_variable_halves():
    result = minimize(5, {16, 17, 20, 21}, {3})
    fig, axes = plt.subplots(1, 2)
    draw_kmap(5, {16, 17, 20, 21}, {3}, result.groups, map_index=0, ax=axes[0])
    draw_kmap(5, {16, 17, 20, 21}, {3}, result.groups, map_index=1, ax=axes[1])
    assert len(axes[0].patches) == 0
    assert len(axes[1].patches) == 1
    assert "X" in [t.get_text() for t in axes[0].texts]
    plt.close(fig)


def test_draw_without_groups():
    fig = draw_kmap(2, [1], [])
    assert len(fig.axes[0].patches) == 0
    plt.close(fig)


def test_axis_labels_follow_bit_split():
    assert axis_labels(2) == ("", "x_0", "x_1")
    assert axis_labels(3) == ("", "x_0", "x_1, x_2")
    assert axis_labels(4) == ("", "x_0, x_1", "x_2, x_3")
    assert axis_labels(5) == ("x_0", "x_1, x_2", "x_3, x_4")


def test_titles_name_the_row_and_map_variables():
    fig = draw_kmap(4, [8], [])
    assert fig.axes[0].get_title() == "rows: x_0, x_1   cols: x_2, x_3"
    plt.close(fig)

    # position 8 sets x_0 and sits on the last row
    assert cell_coordinates(2, 2)[8] == (3, 0)

    fig = draw_kmap(5, [16], [], map_index=1)
    assert fig.axes[0].get_title() == "x_0 = 1\nrows: x_1, x_2   cols: x_3, x_4"
    plt.close(fig)
