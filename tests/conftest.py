"""
Pytest fixtures for Join Dots tests.
"""

import asyncio

import pytest

from joindots.debug import debug, DebugLevel
from joindots.game.board import Board
from joindots.game.session import GameSession
from joindots.utils import GameConfig, Player

# Column order that fills the standard board without any four in a row.
# Finished columns alternate colours from the bottom; columns 0, 1, 4 and 5
# start with red, columns 2, 3 and 6 with yellow.
DRAW_SEQUENCE = [0] * 6 + [1, 6, 6, 1] * 3 + [4, 2, 2, 4] * 3 + [5, 3, 3, 5] * 3


@pytest.fixture(autouse=True)
def quiet_logging():
    """Keep engine logging out of test output and restore defaults afterwards."""
    debug.configure(level=DebugLevel.NONE, enabled=True, components=[])
    yield
    debug.configure(level=DebugLevel.WARNING, enabled=True, components=[])


@pytest.fixture
def board() -> Board:
    """Empty standard board."""
    return Board()


@pytest.fixture
def drop():
    """Drop a piece into a board column the way the session does."""
    def _drop(board: Board, column: int, player: Player) -> int:
        row = board.resolve_landing(column)
        board.place(row, column, player)
        return row
    return _drop


@pytest.fixture
def session() -> GameSession:
    """Standard session with no drop delay."""
    return GameSession(GameConfig(drop_delay=0.0))


@pytest.fixture
def play():
    """Apply a list of moves to a session and return their results."""
    def _play(session: GameSession, columns):
        async def run():
            return [await session.apply_move(col) for col in columns]
        return asyncio.run(run())
    return _play


@pytest.fixture
def draw_sequence():
    return list(DRAW_SEQUENCE)
