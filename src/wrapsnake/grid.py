# grid.py
from __future__ import annotations
import random
from typing import Iterable, Tuple

import numpy as np  # type: ignore

from .config import COLS, ROWS

Cell = Tuple[int, int]
Direction = Tuple[int, int]


# ---------- Geometry ----------
def wrap(cell: Cell, direction: Direction) -> Cell:
    """Step one cell in `direction`, re-entering from the opposite edge."""
    x, y = cell
    dx, dy = direction
    return ((x + dx + COLS) % COLS, (y + dy + ROWS) % ROWS)

def is_opposite(a: Direction, b: Direction) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]

def random_cell(rng: random.Random) -> Cell:
    return (rng.randrange(COLS), rng.randrange(ROWS))


# ---------- Occupancy ----------
class Occupancy:
    """
    Boolean COLS x ROWS grid answering "is this cell taken?" in O(1).

    Indexed as grid[y, x] so it lines up with the board when printed.
    Stays in lockstep with a list of cells: callers `add` and `discard`
    exactly the cells they push onto / pop off their list.
    """

    def __init__(self, cells: Iterable[Cell] = ()):
        self.grid = np.zeros((ROWS, COLS), dtype=bool)
        self.count = 0
        for cell in cells:
            self.add(cell)

    def __contains__(self, cell: Cell) -> bool:
        x, y = cell
        return bool(self.grid[y, x])

    def __len__(self) -> int:
        return self.count

    def add(self, cell: Cell) -> None:
        x, y = cell
        if not self.grid[y, x]:
            self.grid[y, x] = True
            self.count += 1

    def discard(self, cell: Cell) -> None:
        x, y = cell
        if self.grid[y, x]:
            self.grid[y, x] = False
            self.count -= 1

    def free_cells(self) -> int:
        return COLS * ROWS - self.count
