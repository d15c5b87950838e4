import logging

import pytest

from tetris_board import Board, project_shadow
from tetris_piece import Kind, Piece


def fill_row(board, y, skip=()):
    for x in range(board.width):
        if x not in skip:
            board.set(x, y, True)


def test_dimensions():
    b = Board()
    assert (b.width, b.height) == (10, 16)
    assert b.count() == 0


def test_out_of_range_set_is_dropped_and_logged(caplog):
    b = Board()
    with caplog.at_level(logging.ERROR, logger="tetris_board"):
        b.set(10, 0, True)
        b.set(0, 16, True)
    assert b.count() == 0
    assert len(caplog.records) == 2


def test_edge_cells_are_valid():
    b = Board()
    b.set(9, 15, True)
    assert b.get(9, 15)
    assert list(b.occupied_cells()) == [(9, 15)]


def test_stamp_and_retract_pair_up():
    b = Board()
    p = Piece(Kind.L, 1, 2, 3)
    b.place(p)
    assert b.count() == p.size()
    b.retract(p)
    assert b.count() == 0


def test_space_open_checks_walls_floor_and_blocks():
    b = Board()
    assert b.is_space_open(Piece(Kind.I, 0, 6, 0))
    assert not b.is_space_open(Piece(Kind.I, 0, 7, 0))
    assert not b.is_space_open(Piece(Kind.I, 1, 0, 13))
    assert b.is_space_open(Piece(Kind.I, 1, 0, 12))
    b.set(1, 1, True)
    assert not b.is_space_open(Piece(Kind.O, 0, 0, 0))
    # empty matrix slots may overlap occupied cells
    assert b.is_space_open(Piece(Kind.T, 0, 1, 1))


def test_blocked_left_at_column_zero():
    b = Board()
    p = Piece(Kind.O, 0, 0, 5)
    assert b.is_blocked_left(p)
    assert not b.is_blocked_right(p)


def test_blocked_right_at_last_column():
    b = Board()
    p = Piece(Kind.I, 1, 9, 5)
    assert b.is_blocked_right(p)
    assert not b.is_blocked_left(p)


def test_blocked_by_single_overhanging_row():
    b = Board()
    # T pointing down: top row spans x=3..5, bottom row only x=4
    p = Piece(Kind.T, 2, 3, 5)
    b.set(2, 6, True)
    assert not b.is_blocked_left(p)
    b.set(3, 6, True)
    assert b.is_blocked_left(p)
    b.set(6, 6, True)
    assert not b.is_blocked_right(p)
    b.set(5, 6, True)
    assert b.is_blocked_right(p)


def test_at_bottom_on_floor_and_on_blocks():
    b = Board()
    assert b.is_at_bottom(Piece(Kind.O, 0, 0, 14))
    assert not b.is_at_bottom(Piece(Kind.O, 0, 0, 13))
    b.set(1, 15, True)
    assert b.is_at_bottom(Piece(Kind.O, 0, 0, 13))


def test_at_bottom_uses_lowest_cell_per_column():
    b = Board()
    # S: top row x=1..2, bottom row x=0..1; column 2 rests on y+1
    p = Piece(Kind.S, 0, 0, 5)
    b.set(2, 6, True)
    assert b.is_at_bottom(p)


def test_at_bottom_ignores_own_stamp():
    b = Board()
    p = Piece(Kind.J, 1, 4, 2)
    b.place(p)
    assert not b.is_at_bottom(p)


def test_clear_full_rows_compacts_and_is_idempotent():
    b = Board()
    fill_row(b, 15)
    fill_row(b, 13)
    b.set(2, 14, True)
    b.set(7, 12, True)
    assert b.clear_full_rows() == 2
    assert sorted(b.occupied_cells()) == [(2, 15), (7, 14)]
    assert b.clear_full_rows() == 0


def test_clear_full_rows_is_not_capped():
    b = Board()
    for y in range(10, 16):
        fill_row(b, y)
    assert b.clear_full_rows() == 6
    assert b.count() == 0


def test_clear_full_rows_ignores_partial_rows():
    b = Board()
    fill_row(b, 15, skip=(4,))
    assert b.clear_full_rows() == 0
    assert b.count() == 9


def test_str_dump():
    b = Board()
    b.set(0, 0, True)
    lines = str(b).splitlines()
    assert len(lines) == 16
    assert lines[0] == "X........."
    assert lines[1] == ".........."


def test_shadow_of_horizontal_i_hits_floor():
    b = Board()
    p = Piece(Kind.I, 0, 3, 0)
    s = project_shadow(b, p)
    assert (s.x, s.y) == (3, 15)
    assert (p.x, p.y) == (3, 0)
    assert b.count() == 0


def test_shadow_rests_on_stack_and_ignores_own_stamp():
    b = Board()
    fill_row(b, 15, skip=(0,))
    p = Piece(Kind.O, 0, 4, 0)
    b.place(p)
    before = str(b)
    s = project_shadow(b, p)
    assert s.y == 13
    assert str(b) == before


@pytest.mark.parametrize("kind", list(Kind))
def test_shadow_is_a_legal_resting_spot(kind):
    b = Board()
    fill_row(b, 15, skip=(0, 5))
    p = Piece.spawn(kind)
    s = project_shadow(b, p)
    assert b.is_space_open(s)
    assert b.is_at_bottom(s)
