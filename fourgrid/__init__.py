"""
fourgrid - Four-in-a-row on a 5x5 grid, played in the terminal

This package provides the board representation, win detection, turn control
and a console interface for a two-player game where the first player to line
up four marks wins.
"""

# Version number
__version__ = '0.1.0'
