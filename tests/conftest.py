"""Shared fixtures for the game tests."""

import pytest

from fourgrid.debug import debug, DebugLevel
from fourgrid.game.board import Board
from fourgrid.game.rules import GameSession


@pytest.fixture(autouse=True)
def quiet_logging():
    debug.configure(level=DebugLevel.WARNING, components=[])
    yield
    debug.configure(level=DebugLevel.WARNING, components=[])


@pytest.fixture
def board():
    return Board()


@pytest.fixture
def session():
    return GameSession()
