"""
board.py - Board representation for the 5x5 grid

This module implements the Cell and Board classes. The board stores marks in a
numpy grid; each Cell is a fixed view onto one position of that grid, so cells
keep their identity across resets.
"""

import numpy as np
from typing import List

from fourgrid.debug import debug
from fourgrid.errors import BoundsError, OccupiedError
from fourgrid.utils import GRID_SIZE, Mark, is_valid_position, render_mark


class Cell:
    """A single position on the board together with its current mark."""

    __slots__ = ('row', 'col', '_grid')

    def __init__(self, grid: np.ndarray, row: int, col: int):
        self._grid = grid
        self.row = row
        self.col = col

    @property
    def mark(self) -> Mark:
        return Mark(int(self._grid[self.row, self.col]))

    @property
    def position(self):
        return (self.row, self.col)

    def is_empty(self) -> bool:
        return bool(self._grid[self.row, self.col] == Mark.EMPTY.value)

    def __str__(self) -> str:
        return render_cell(self)

    def __repr__(self) -> str:
        return f"Cell(row={self.row}, col={self.col}, mark={self.mark.name})"


def render_cell(cell: Cell) -> str:
    """Render a cell as its bracketed mark, e.g. '[x]'."""
    return render_mark(cell.mark)


class Board:
    """
    The 5x5 game board.

    Marks are written through set(), which never overwrites a claimed cell.
    """

    def __init__(self):
        """Initialize an empty board."""
        debug.debug("Initializing new Board", "board")
        self.grid = np.zeros((GRID_SIZE, GRID_SIZE), dtype=int)
        self._cells = [[Cell(self.grid, row, col) for col in range(GRID_SIZE)]
                       for row in range(GRID_SIZE)]

    def reset(self):
        """Reset every cell to empty, keeping the same Cell objects."""
        debug.debug("Resetting board", "board")
        self.grid.fill(Mark.EMPTY.value)

    def copy(self) -> 'Board':
        """
        Create a copy of the current board.

        Returns:
            A new Board with the same marks and its own cells
        """
        new_board = Board()
        new_board.grid[:, :] = self.grid
        return new_board

    def get(self, row: int, col: int) -> Cell:
        """
        Get the cell at a position.

        Raises:
            BoundsError: If row or col is outside the grid
        """
        if not is_valid_position(row, col):
            debug.debug(f"Out of bounds access at ({row}, {col})", "board")
            raise BoundsError(row, col)
        return self._cells[row][col]

    def set(self, row: int, col: int, mark: Mark) -> Cell:
        """
        Claim the cell at a position for a player.

        Args:
            row: Row index
            col: Column index
            mark: Player mark to write (Mark.ONE or Mark.TWO)

        Returns:
            The claimed cell

        Raises:
            BoundsError: If the position is outside the grid
            OccupiedError: If the cell already holds a mark
        """
        if mark == Mark.EMPTY:
            raise ValueError("set() requires a player mark; use reset() to clear the board")

        cell = self.get(row, col)
        if not cell.is_empty():
            debug.debug(f"Cell ({row}, {col}) already holds {cell.mark.name}", "board")
            raise OccupiedError(row, col)

        debug.trace(f"Placing {mark.name} at ({row}, {col})", "board")
        self.grid[row, col] = mark.value
        return cell

    def is_empty(self, row: int, col: int) -> bool:
        return self.get(row, col).is_empty()

    def empty_count(self) -> int:
        return int(np.sum(self.grid == Mark.EMPTY.value))

    def is_full(self) -> bool:
        return self.empty_count() == 0

    def cells(self) -> List[Cell]:
        """All cells in row-major order."""
        return [cell for row in self._cells for cell in row]

    def get_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            Copy of the 5x5 grid of mark values
        """
        return self.grid.copy()

    def render(self) -> str:
        """
        Render the board as text with row and column headers.

        Returns:
            String representation of the board
        """
        lines = ["   " + "  ".join(str(col) for col in range(GRID_SIZE))]
        for row in range(GRID_SIZE):
            lines.append(f"{row} " + "".join(render_cell(cell) for cell in self._cells[row]))
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()
