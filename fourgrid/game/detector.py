"""
detector.py - Four-in-a-row detection

This module scans a Board for four contiguous equal marks. Four line families
are checked: every row, every column, the main diagonal and the anti-diagonal.
Only those two full-length diagonals are inspected; shorter diagonals such as
(0, 1)-(3, 4) never produce a win.

Player one's lines are scanned completely before player two's, so the result
is deterministic even for boards that could not arise in play.
"""

from typing import Iterator, List, Optional, Sequence, Tuple

from fourgrid.debug import debug
from fourgrid.game.board import Board
from fourgrid.utils import (CONNECT_N, GRID_SIZE, PLAYER_MARKS, LineFamily, Mark,
                            Outcome, line_positions)

Position = Tuple[int, int]


def scanned_lines() -> Iterator[Tuple[LineFamily, Tuple[Position, ...]]]:
    """Yield every checked line in scan order."""
    for family in (LineFamily.ROW, LineFamily.COLUMN):
        for index in range(GRID_SIZE):
            yield family, line_positions(family, index)
    yield LineFamily.MAIN_DIAGONAL, line_positions(LineFamily.MAIN_DIAGONAL)
    yield LineFamily.ANTI_DIAGONAL, line_positions(LineFamily.ANTI_DIAGONAL)


def _find_run(values: Sequence[int], mark: Mark) -> Optional[int]:
    """
    Walk one line keeping a running contiguous count.

    Returns:
        Index where the count first reaches CONNECT_N, or None
    """
    count = 0
    for i, value in enumerate(values):
        if value == mark.value:
            count += 1
            if count == CONNECT_N:
                return i
        else:
            count = 0
    return None


def _first_win(board: Board, mark: Mark) -> Optional[List[Position]]:
    for family, positions in scanned_lines():
        values = [board.grid[row, col] for row, col in positions]
        end = _find_run(values, mark)
        if end is not None:
            debug.debug(f"{mark.name} has four along {family.name} ending at {positions[end]}",
                        "detector")
            return list(positions[end - CONNECT_N + 1:end + 1])
    return None


def four_connected(board: Board, mark: Mark) -> bool:
    """
    Check whether a mark has four in a row on any checked line.

    Args:
        board: The board to scan
        mark: Player mark to look for

    Returns:
        True if the mark has a contiguous line of four
    """
    return _first_win(board, mark) is not None


def evaluate(board: Board) -> Outcome:
    """
    Determine whether either player has won.

    Args:
        board: The board to scan

    Returns:
        Outcome.PLAYER_ONE, Outcome.PLAYER_TWO or Outcome.NO_WINNER
    """
    debug.start_timer("win_check")
    outcome = Outcome.NO_WINNER
    for mark in PLAYER_MARKS:
        if four_connected(board, mark):
            outcome = Outcome.for_mark(mark)
            break
    debug.end_timer("win_check", "detector")
    return outcome


def winning_line(board: Board) -> List[Position]:
    """
    Get the positions of the first winning run, in scan order.

    Returns:
        Four (row, col) positions, or an empty list if nobody has won
    """
    for mark in PLAYER_MARKS:
        positions = _first_win(board, mark)
        if positions:
            return positions
    return []
