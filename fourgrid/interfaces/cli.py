"""
cli.py - Command-line interface for playing four-in-a-row

This module provides the console adapter that reads moves and renders the
board, the move parser, and the argument handling for the `fourgrid` command.
"""

import argparse
import sys
from typing import Callable, List, Optional, TextIO, Tuple, Union

from fourgrid.debug import debug, DebugLevel
from fourgrid.errors import InputClosedError, ParseError
from fourgrid.game.board import Board
from fourgrid.game.detector import winning_line
from fourgrid.game.rules import GameSession
from fourgrid.utils import GRID_SIZE, Command, GameStatus, Mark

SEPARATORS = {
    'space': ' ',
    'comma': ',',
}


def parse_move(text: str, separator: str = ' ') -> Tuple[int, int]:
    """
    Turn a line of input into a (row, col) pair.

    Only the shape of the input is checked here; range checks are left
    to the board.

    Args:
        text: Raw input, e.g. "0 1" or "0,1"
        separator: Text expected between row and column

    Returns:
        Tuple of (row, col)

    Raises:
        ParseError: If the text is not two integers around the separator
    """
    stripped = text.strip()
    if separator not in stripped:
        raise ParseError(text, f"Command must contain a {separator!r} between row and column")

    if separator.isspace():
        chunks = stripped.split()
    else:
        chunks = [chunk.strip() for chunk in stripped.split(separator)]
    if len(chunks) != 2:
        raise ParseError(text, f"Expected a row and a column, got {len(chunks)} values")

    coords = []
    for chunk in chunks:
        try:
            coords.append(int(chunk))
        except ValueError:
            raise ParseError(text, f"{chunk!r} is not a whole number") from None
    return coords[0], coords[1]


class ConsoleIO:
    """Reads moves from the terminal and prints the game to it."""

    def __init__(self, separator: str = ' ',
                 input_func: Callable[[str], str] = input,
                 output: Optional[TextIO] = None):
        self.separator = separator
        self._input = input_func
        self._output = output

    def _print(self, *args) -> None:
        print(*args, file=self._output or sys.stdout)

    def prompt(self, mark: Mark) -> str:
        return f"Player '{mark}', enter row{self.separator}col (q to quit, r to restart): "

    def read_move(self, mark: Mark) -> Union[Tuple[int, int], Command]:
        """
        Read one line and interpret it as a move or a command.

        Raises:
            ParseError: If the line is not a valid move
            InputClosedError: If input has ended
        """
        try:
            text = self._input(self.prompt(mark))
        except (EOFError, KeyboardInterrupt):
            raise InputClosedError("Input closed") from None

        debug.trace(f"Read {text!r}", "cli")
        command = text.strip().lower()
        for candidate in Command:
            if command == candidate.value:
                return candidate
        return parse_move(text, self.separator)

    def show_turn(self, mark: Mark, board: Board) -> None:
        self._print(f"Current player: '{mark}'\n")
        self._print(board.render())
        self._print()

    def show_error(self, error: Exception) -> None:
        self._print(error)

    def show_message(self, text: str) -> None:
        self._print(text)

    def show_result(self, status: GameStatus, winner: Mark, board: Board) -> None:
        if status == GameStatus.DRAW:
            self._print("\n\nGame Over: It's a draw!")
        else:
            self._print(f"\n\nGame Over:\nPlayer '{winner}' has won!")
            line = winning_line(board)
            if line:
                self._print("Winning line: " + " ".join(f"({r}, {c})" for r, c in line))
            self._print()
        self._print(board.render())
        self._print()


class SimpleCLI:
    """Command-line entry point for a two-player game."""

    def __init__(self, io: Optional[ConsoleIO] = None):
        self.session = GameSession()
        self.io = io
        self.args = None

    def parse_args(self, argv: Optional[List[str]] = None) -> argparse.Namespace:
        """Parse command-line arguments and configure logging."""
        parser = argparse.ArgumentParser(
            prog='fourgrid',
            description=f'Two-player four-in-a-row on a {GRID_SIZE}x{GRID_SIZE} grid')
        parser.add_argument('--separator', choices=sorted(SEPARATORS), default=None,
                            help='Text between row and column when entering a move (default: space)')
        parser.add_argument('--debug', action='store_true', help='Enable debug logging')
        parser.add_argument('--debug-level', default='warning',
                            choices=[level.name.lower() for level in DebugLevel],
                            help='Logging level (default: warning)')
        parser.add_argument('--log-file', type=str, default=None,
                            help='Also write log records to this file')

        self.args = parser.parse_args(argv)

        if self.args.debug:
            debug.configure(level=DebugLevel.DEBUG)
        else:
            debug.set_from_string(self.args.debug_level)
        if self.args.log_file:
            debug.configure(log_file=self.args.log_file)

        if self.io is None:
            self.io = ConsoleIO(separator=SEPARATORS[self.args.separator or 'space'])
        elif self.args.separator:
            self.io.separator = SEPARATORS[self.args.separator]
        return self.args

    def run(self, argv: Optional[List[str]] = None) -> int:
        """
        Play one game.

        Returns:
            Process exit status
        """
        if not self.args:
            self.parse_args(argv)

        self.io.show_message(f"Four in a row on a {GRID_SIZE}x{GRID_SIZE} grid. "
                             f"Enter moves as row{self.io.separator}col.")

        try:
            self.session.play(self.io)
        except InputClosedError:
            debug.warning("Input closed before the game finished", "cli")
            self.io.show_message("\nInput closed, exiting.")
            return 1

        return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    cli = SimpleCLI()
    return cli.run(argv)


if __name__ == "__main__":
    sys.exit(main())
