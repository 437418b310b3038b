"""
TicTacToe board rules and state.

Board representation: numpy int8 array of length 9, row-major
  - 0: empty
  - +1: human (Z)
  - -1: opponent (K)

Cells only ever go from empty to a side, never back.
"""

from enum import IntEnum
from typing import List, Optional

import numpy as np

# Winning lines, checked in this order (rows, columns, diagonals)
WIN_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # columns
    (0, 4, 8), (2, 4, 6),              # diagonals
)

N_CELLS = 9


class Cell(IntEnum):
    EMPTY = 0
    HUMAN = +1
    OPPONENT = -1


SYMBOLS = {Cell.HUMAN: "Z", Cell.OPPONENT: "K"}


class Board:
    """Fixed 9-cell grid. `apply` is the only way to change it."""

    def __init__(self):
        self.cells = np.zeros(N_CELLS, dtype=np.int8)

    def apply(self, position: int, side: Cell) -> bool:
        """Mark `position` for `side` if it is on the board and empty."""
        if side not in (Cell.HUMAN, Cell.OPPONENT):
            return False
        if not isinstance(position, (int, np.integer)) or isinstance(position, bool):
            return False
        if not 0 <= position < N_CELLS or self.cells[position] != Cell.EMPTY:
            return False
        self.cells[position] = side
        return True

    def winner(self) -> Optional[Cell]:
        """Side holding the first complete line, or None."""
        for a, b, c in WIN_LINES:
            s = int(self.cells[a]) + int(self.cells[b]) + int(self.cells[c])
            if s == 3:
                return Cell.HUMAN
            if s == -3:
                return Cell.OPPONENT
        return None

    def empty_cells(self) -> List[int]:
        """Indices of empty cells, ascending."""
        return [int(i) for i in np.flatnonzero(self.cells == Cell.EMPTY)]

    def is_full(self) -> bool:
        return not (self.cells == Cell.EMPTY).any()

    def cell(self, position: int) -> Cell:
        return Cell(int(self.cells[position]))

    def render(self) -> str:
        """Text grid: empty cells show their index."""
        rows = []
        for r in range(3):
            row = []
            for c in range(3):
                i = r * 3 + c
                row.append(SYMBOLS.get(self.cell(i), str(i)))
            rows.append("|".join(row))
        return "\n-+-+-\n".join(rows)

    def __repr__(self) -> str:
        return f"Board({self.cells.tolist()})"
