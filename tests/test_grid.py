import random

from wrapsnake.config import COLS, ROWS, UP, DOWN, LEFT, RIGHT
from wrapsnake.grid import Occupancy, is_opposite, random_cell, wrap


def test_wrap_right_edge_to_left():
    assert wrap((COLS - 1, 4), RIGHT) == (0, 4)


def test_wrap_left_edge_to_right():
    assert wrap((0, 4), LEFT) == (COLS - 1, 4)


def test_wrap_vertical_edges():
    assert wrap((3, 0), UP) == (3, ROWS - 1)
    assert wrap((3, ROWS - 1), DOWN) == (3, 0)


def test_wrap_interior_is_plain_step():
    assert wrap((9, 9), RIGHT) == (10, 9)


def test_is_opposite():
    assert is_opposite(UP, DOWN)
    assert is_opposite(LEFT, RIGHT)
    assert not is_opposite(UP, LEFT)
    assert not is_opposite(UP, UP)


def test_random_cell_stays_on_board():
    rng = random.Random(0)
    for _ in range(500):
        x, y = random_cell(rng)
        assert 0 <= x < COLS and 0 <= y < ROWS


def test_occupancy_tracks_cells():
    occ = Occupancy([(1, 2), (3, 4)])
    assert (1, 2) in occ
    assert (2, 1) not in occ
    assert len(occ) == 2
    assert occ.free_cells() == COLS * ROWS - 2

    occ.add((1, 2))  # already there
    assert len(occ) == 2

    occ.discard((1, 2))
    assert (1, 2) not in occ
    assert (3, 4) in occ
    assert len(occ) == 1
