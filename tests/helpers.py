"""Scripted players and board helpers for the game tests."""

import io

from fourgrid.interfaces.cli import ConsoleIO
from fourgrid.utils import Mark

# Full board with no four-in-a-row on any checked line.
#   x x o o x
#   o o x x o
#   x x o o x
#   o o x x o
#   x x o o x
DRAW_PATTERN = [
    "xxoox",
    "ooxxo",
    "xxoox",
    "ooxxo",
    "xxoox",
]

# Full board where x's last move (4, 3) completes the bottom row.
LAST_MOVE_WIN_PATTERN = [
    "oxoox",
    "ooxxo",
    "xxoox",
    "ooxxo",
    "xxxxo",
]


def pattern_moves(pattern, last=None):
    """Alternating x/o moves that fill the board as in pattern, x moving first.

    If last is given it becomes x's final move.
    """
    xs = [(r, c) for r, line in enumerate(pattern) for c, ch in enumerate(line) if ch == "x"]
    os_ = [(r, c) for r, line in enumerate(pattern) for c, ch in enumerate(line) if ch == "o"]
    if last is not None:
        xs.remove(last)
        xs.append(last)
    moves = []
    for i, x_move in enumerate(xs):
        moves.append(x_move)
        if i < len(os_):
            moves.append(os_[i])
    return moves


def draw_moves():
    return pattern_moves(DRAW_PATTERN)


def scripted_input(lines):
    """input() replacement that replays lines, then raises EOFError."""
    remaining = list(lines)

    def fake_input(prompt):
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return fake_input


class ScriptedIO(ConsoleIO):
    """Console adapter fed from fixed lines that records what it is shown."""

    def __init__(self, lines, separator=" "):
        super().__init__(separator=separator, input_func=scripted_input(lines),
                         output=io.StringIO())
        self.prompts = []
        self.turns = []
        self.errors = []
        self.messages = []
        self.results = []

    def read_move(self, mark):
        self.prompts.append(mark)
        return super().read_move(mark)

    def show_turn(self, mark, board):
        self.turns.append((mark, board.render()))

    def show_error(self, error):
        self.errors.append(error)

    def show_message(self, text):
        self.messages.append(text)

    def show_result(self, status, winner, board):
        self.results.append((status, winner))


def place(board, positions, mark=Mark.ONE):
    for row, col in positions:
        board.set(row, col, mark)
    return board
