"""
utils.py - Constants, enumerations and helpers shared across the game

This module provides the fixed grid constants, the mark and outcome
enumerations, and small position and rendering helpers.
"""

from enum import Enum, auto
from typing import Tuple

# Game constants
GRID_SIZE = 5
CONNECT_N = 4  # Number of marks in a row to win
MAX_TURNS = GRID_SIZE * GRID_SIZE


class Mark(Enum):
    """Enumeration representing player marks and empty cells."""
    EMPTY = 0
    ONE = 1    # First player
    TWO = 2    # Second player

    def other(self) -> 'Mark':
        """Get the other player's mark."""
        if self == Mark.ONE:
            return Mark.TWO
        elif self == Mark.TWO:
            return Mark.ONE
        return Mark.EMPTY

    @property
    def symbol(self) -> str:
        return MARK_SYMBOLS[self]

    def __str__(self):
        return self.symbol


MARK_SYMBOLS = {
    Mark.EMPTY: " ",
    Mark.ONE: "x",
    Mark.TWO: "o",
}

PLAYER_MARKS = (Mark.ONE, Mark.TWO)


class Outcome(Enum):
    """Result of evaluating a board for a four-in-a-row."""
    NO_WINNER = auto()
    PLAYER_ONE = auto()
    PLAYER_TWO = auto()

    @classmethod
    def for_mark(cls, mark: Mark) -> 'Outcome':
        if mark == Mark.ONE:
            return cls.PLAYER_ONE
        elif mark == Mark.TWO:
            return cls.PLAYER_TWO
        return cls.NO_WINNER

    @property
    def mark(self) -> Mark:
        """Winning mark, or Mark.EMPTY when there is no winner."""
        if self == Outcome.PLAYER_ONE:
            return Mark.ONE
        elif self == Outcome.PLAYER_TWO:
            return Mark.TWO
        return Mark.EMPTY


class GameStatus(Enum):
    """State of a game session."""
    IN_PROGRESS = auto()
    WON = auto()
    DRAW = auto()

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self != GameStatus.IN_PROGRESS


class LineFamily(Enum):
    """The scan patterns checked for a four-in-a-row."""
    ROW = auto()
    COLUMN = auto()
    MAIN_DIAGONAL = auto()  # (0, 0) to (4, 4)
    ANTI_DIAGONAL = auto()  # (0, 4) to (4, 0)


class Command(Enum):
    """Non-move requests a player can type at the prompt."""
    QUIT = "q"
    RESTART = "r"


def is_valid_position(row: int, col: int) -> bool:
    """
    Check if a position is within the grid boundaries.

    Args:
        row: Row index
        col: Column index

    Returns:
        True if position is valid, False otherwise
    """
    return 0 <= row < GRID_SIZE and 0 <= col < GRID_SIZE


def line_positions(family: LineFamily, index: int = 0) -> Tuple[Tuple[int, int], ...]:
    """
    Get the positions of one scanned line, in scan order.

    Args:
        family: The line family to walk
        index: Row or column index; ignored for the two diagonals

    Returns:
        Tuple of (row, col) positions
    """
    if family == LineFamily.ROW:
        return tuple((index, col) for col in range(GRID_SIZE))
    if family == LineFamily.COLUMN:
        return tuple((row, index) for row in range(GRID_SIZE))
    if family == LineFamily.MAIN_DIAGONAL:
        return tuple((i, i) for i in range(GRID_SIZE))
    return tuple((i, GRID_SIZE - 1 - i) for i in range(GRID_SIZE))


def render_mark(mark: Mark) -> str:
    """Render a mark bracketed, e.g. '[x]' or '[ ]'."""
    return f"[{mark.symbol}]"
