# tests/test_solver_core.py
from sudoku_engine.solver_core import (
    houses,
    rc_to_key,
    to_cr,
    to_index,
    unit_cells_box,
    unit_cells_col,
    unit_cells_row,
    which_box,
)


def test_index_round_trip_corners():
    assert to_index(9, 0, 0) == 0
    assert to_index(9, 8, 8) == 80
    assert to_cr(9, 10) == (1, 1)
    assert to_cr(6, 35) == (5, 5)


def test_keys_are_one_based():
    assert rc_to_key(4, 7) == "r4c7"


def test_nine_by_nine_boxes():
    assert unit_cells_box(9, 0) == (0, 1, 2, 9, 10, 11, 18, 19, 20)
    assert unit_cells_box(9, 8)[-1] == 80
    assert which_box(9, 4, 4) == 4
    assert which_box(9, 7, 2) == 2


def test_six_by_six_boxes_are_three_wide_two_tall():
    assert unit_cells_box(6, 1) == (3, 4, 5, 9, 10, 11)
    assert which_box(6, 3, 1) == 1
    assert which_box(6, 0, 2) == 2
    assert which_box(6, 5, 5) == 5


def test_every_house_has_dimension_cells():
    for dim in (3, 6, 9, 12):
        hs = houses(dim)
        assert len(hs) == 3 * dim
        assert all(len(h) == dim for h in hs)
        # each family partitions the grid
        for family in (hs[:dim], hs[dim:2 * dim], hs[2 * dim:]):
            assert sorted(i for h in family for i in h) == list(range(dim * dim))


def test_rows_and_cols():
    assert unit_cells_row(9, 1) == tuple(range(9, 18))
    assert unit_cells_col(9, 2) == tuple(range(2, 81, 9))
