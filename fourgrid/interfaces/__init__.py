"""
fourgrid.interfaces - User interfaces for the game

This package contains the console adapter that reads moves and renders
the board in the terminal.
"""

# Don't import anything here to avoid circular imports
__all__ = []
