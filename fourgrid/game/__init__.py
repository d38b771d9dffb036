"""
fourgrid.game - Core game mechanics

This package contains the board representation, the win detector and
the turn controller that drives a game session.
"""

from fourgrid.game.board import Board, Cell
from fourgrid.game.detector import evaluate, four_connected, winning_line
from fourgrid.game.rules import GameSession

__all__ = ['Board', 'Cell', 'evaluate', 'four_connected', 'winning_line', 'GameSession']
