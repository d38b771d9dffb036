"""
rules.py - Turn control for a game session

This module provides GameSession, the state machine that alternates players,
enforces move legality and decides when the game is won or drawn.

A session talks to the player through an I/O adapter with these methods:
    read_move(mark)     -> (row, col) or a Command; may raise ParseError
                           or InputClosedError
    show_turn(mark, board)
    show_error(error)
    show_message(text)
    show_result(status, winner, board)
fourgrid.interfaces.cli.ConsoleIO is the terminal implementation.
"""

from typing import List, Optional, Tuple, Union

from fourgrid.debug import debug
from fourgrid.errors import BoundsError, GameOverError, OccupiedError, ParseError
from fourgrid.game.board import Board
from fourgrid.game.detector import evaluate
from fourgrid.utils import MAX_TURNS, Command, GameStatus, Mark, Outcome


class GameSession:
    """
    One game of four-in-a-row.

    Owns the board and the game state. Turns start at 1 and increase by one
    for every legal move; illegal attempts leave the state untouched.
    """

    def __init__(self, board: Optional[Board] = None):
        debug.debug("Initializing GameSession", "game")
        self.board = board if board is not None else Board()
        self.reset()

    def reset(self) -> None:
        """Reset the board and state for a new game."""
        debug.debug("Resetting game", "game")
        self.board.reset()
        self.turn = 1
        self.active_mark = Mark.ONE
        self.status = GameStatus.IN_PROGRESS
        self.winner = Mark.EMPTY
        self.moves_made: List[Tuple[int, int]] = []

    @property
    def is_game_over(self) -> bool:
        return self.status.is_game_over()

    def apply_move(self, row: int, col: int) -> GameStatus:
        """
        Place the active player's mark and advance the game.

        Args:
            row: Row index
            col: Column index

        Returns:
            The status after the move

        Raises:
            GameOverError: If the game has already finished
            BoundsError: If the position is outside the grid
            OccupiedError: If the cell is already claimed
        """
        if self.is_game_over:
            raise GameOverError(f"Game is over ({self.status.name})")

        mark = self.active_mark
        self.board.set(row, col, mark)
        self.moves_made.append((row, col))
        debug.debug(f"Turn {self.turn}: {mark.name} plays ({row}, {col})", "game")

        self.turn += 1
        self.active_mark = mark.other()

        outcome = evaluate(self.board)
        if outcome != Outcome.NO_WINNER:
            self.status = GameStatus.WON
            self.winner = outcome.mark
            debug.info(f"Player {self.winner.name} wins after move at ({row}, {col})", "game")
        elif self.turn > MAX_TURNS:
            self.status = GameStatus.DRAW
            debug.info("Game ends in a draw", "game")

        return self.status

    def take_turn(self, io) -> Union[GameStatus, Command]:
        """
        Read moves from the adapter until one is legal, then apply it.

        Parse, bounds and occupancy errors are reported through the adapter
        and the same player is asked again.

        Returns:
            The status after the applied move, or the Command the player typed
        """
        while True:
            try:
                move = io.read_move(self.active_mark)
            except ParseError as e:
                debug.debug(f"Rejected input {e.text!r}: {e}", "game")
                io.show_error(e)
                continue

            if isinstance(move, Command):
                return move

            try:
                return self.apply_move(*move)
            except (BoundsError, OccupiedError) as e:
                debug.debug(f"Rejected move {move}: {e}", "game")
                io.show_error(e)

    def play(self, io) -> GameStatus:
        """
        Run the game loop until a win, a draw or a quit request.

        Returns:
            The final status; IN_PROGRESS if the player quit
        """
        while not self.is_game_over:
            io.show_turn(self.active_mark, self.board)
            result = self.take_turn(io)

            if result == Command.QUIT:
                debug.info(f"Game quit on turn {self.turn}", "game")
                return self.status
            if result == Command.RESTART:
                self.reset()
                io.show_message("Game restarted.")

        io.show_result(self.status, self.winner, self.board)
        return self.status
