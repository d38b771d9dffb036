"""
errors.py - Exceptions raised by the game

BoundsError, OccupiedError and ParseError are recoverable: the turn
controller reports them and asks the same player again.
"""

from fourgrid.utils import GRID_SIZE


class GameError(Exception):
    """Base class for all game errors."""


class BoundsError(GameError, ValueError):
    """A coordinate lies outside the grid."""

    def __init__(self, row: int, col: int):
        self.row = row
        self.col = col
        super().__init__(f"Invalid row or column given, must be between 0 and {GRID_SIZE}")


class OccupiedError(GameError, ValueError):
    """The target cell has already been claimed."""

    def __init__(self, row: int, col: int):
        self.row = row
        self.col = col
        super().__init__("Invalid move: choose a space that hasn't been chosen")


class ParseError(GameError, ValueError):
    """Input text could not be read as a row and a column."""

    def __init__(self, text: str, reason: str):
        self.text = text
        super().__init__(reason)


class GameOverError(GameError):
    """A move was attempted after the game finished."""


class InputClosedError(GameError):
    """The input stream ended before the game did."""
