"""
session.py - Turn sequencing and game state for Join Dots

This module provides GameSession, the state machine that alternates turns,
applies validated moves and moves to a terminal state on a win or a draw.

A move takes time to land: apply_move() is a coroutine that resolves the
landing row, waits for the drop delay, then commits the piece. While it is
waiting the session is busy and refuses further moves, but reads such as
preview_landing() keep reporting the board as it was before the drop.
"""

import asyncio
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from joindots.debug import debug
from joindots.game.board import Board
from joindots.game.rules import WinResult, check_draw, check_win
from joindots.utils import Coord, GameConfig, GameStatus, MoveRejection, Player

STARTING_PLAYER = Player.RED


@dataclass(frozen=True)
class Placement:
    """Where a move landed, and whose piece it was."""
    row: int
    col: int
    player: Player

    @property
    def position(self) -> Coord:
        return (self.row, self.col)


@dataclass(frozen=True)
class GameState:
    """Outcome of the game so far: in progress, won or drawn."""
    status: GameStatus
    winner: Optional[Player] = None
    winning_cells: Tuple[Coord, ...] = ()

    @classmethod
    def in_progress(cls) -> 'GameState':
        return cls(GameStatus.IN_PROGRESS)

    @classmethod
    def won(cls, win: WinResult) -> 'GameState':
        return cls(GameStatus.WON, winner=win.player, winning_cells=win.cells)

    @classmethod
    def drawn(cls) -> 'GameState':
        return cls(GameStatus.DRAWN)

    def is_game_over(self) -> bool:
        return self.status.is_game_over()


@dataclass(frozen=True)
class MoveResult:
    """
    Result of a move request.

    Accepted moves carry the placement and the state after it. Rejected
    moves carry the reason and the unchanged state.
    """
    success: bool
    state: GameState
    placement: Optional[Placement] = None
    rejection: Optional[MoveRejection] = None

    @classmethod
    def accepted(cls, placement: Placement, state: GameState) -> 'MoveResult':
        return cls(success=True, state=state, placement=placement)

    @classmethod
    def rejected(cls, rejection: MoveRejection, state: GameState) -> 'MoveResult':
        return cls(success=False, state=state, rejection=rejection)

    @property
    def error(self) -> Optional[str]:
        return self.rejection.message if self.rejection else None


class GameSession:
    """
    A single game between RED and YELLOW.

    The board is owned by the session; callers read it through the
    accessors and change it only through apply_move() and reset().
    """

    def __init__(self, config: Optional[GameConfig] = None):
        """
        Initialize a new game.

        Args:
            config: Board size, run length and drop delay (defaults if None)
        """
        self.config = config or GameConfig()
        self._board = Board(self.config.rows, self.config.cols)
        self._generation = 0
        self._start()

    def _start(self) -> None:
        self._board.reset()
        self._current_player = STARTING_PLAYER
        self._state = GameState.in_progress()
        self._last_move: Optional[Placement] = None
        self._pending: Optional[Placement] = None
        self._move_count = 0

    def reset(self) -> 'GameSession':
        """
        Start over with an empty board and RED to move.

        Allowed in any state. A move still dropping when reset() is called
        belongs to the discarded game and is never committed.
        """
        debug.debug("Resetting session", "session")
        self._generation += 1
        self._start()
        return self

    # -- read accessors -------------------------------------------------

    @property
    def current_player(self) -> Player:
        return self._current_player

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def status(self) -> GameStatus:
        return self._state.status

    @property
    def last_move(self) -> Optional[Placement]:
        return self._last_move

    @property
    def pending(self) -> Optional[Placement]:
        """The piece currently dropping, if any."""
        return self._pending

    @property
    def is_busy(self) -> bool:
        return self._pending is not None

    @property
    def move_count(self) -> int:
        return self._move_count

    @property
    def rows(self) -> int:
        return self.config.rows

    @property
    def cols(self) -> int:
        return self.config.cols

    def get_cell(self, row: int, col: int) -> Player:
        return self._board.get_cell(row, col)

    def get_board(self) -> np.ndarray:
        """Copy of the grid as Player values."""
        return self._board.get_state()

    def is_winning_cell(self, row: int, col: int) -> bool:
        return (row, col) in self._state.winning_cells

    def is_last_move(self, row: int, col: int) -> bool:
        return self._last_move is not None and self._last_move.position == (row, col)

    def valid_moves(self) -> List[int]:
        """Columns that would accept a piece right now."""
        if self._state.is_game_over():
            return []
        return self._board.valid_columns()

    def preview_landing(self, column: int) -> Optional[int]:
        """
        Get the row a piece would land on, without dropping it.

        Returns:
            The landing row, or None if the game is over, the column is out
            of range or the column is full
        """
        if self._state.is_game_over() or not self._board.in_bounds(column):
            return None
        return self._board.resolve_landing(column)

    def render(self) -> str:
        return self._board.render(self._state.winning_cells)

    def __str__(self) -> str:
        return self.render()

    # -- moves ----------------------------------------------------------

    def _validate(self, column: int) -> Optional[MoveRejection]:
        if self._state.is_game_over():
            return MoveRejection.GAME_ALREADY_OVER
        if self.is_busy:
            return MoveRejection.MOVE_IN_PROGRESS
        if not self._board.in_bounds(column):
            return MoveRejection.INVALID_COLUMN
        if self._board.column_is_full(column):
            return MoveRejection.COLUMN_FULL
        return None

    async def apply_move(self, column: int) -> MoveResult:
        """
        Drop the current player's piece into a column.

        The request is validated and the landing row resolved immediately;
        the piece is written once the drop delay has passed. Invalid
        requests are refused without touching the session.

        Args:
            column: The column to drop into (0-indexed)

        Returns:
            MoveResult with the placement and the new state, or the rejection
        """
        rejection = self._validate(column)
        if rejection is not None:
            debug.debug(f"Rejected move in column {column}: {rejection.name}", "session")
            return MoveResult.rejected(rejection, self._state)

        column = int(column)
        row = self._board.resolve_landing(column)
        placement = Placement(row, column, self._current_player)
        generation = self._generation
        self._pending = placement
        debug.debug(f"{placement.player} dropping into column {column}, lands on row {row}", "session")

        # A started drop always lands, even if the awaiting task is cancelled
        try:
            await asyncio.sleep(self.config.drop_delay)
        finally:
            committed = generation == self._generation
            if committed:
                self._commit(placement)

        if not committed:
            debug.debug(f"Dropped {placement} discarded by reset", "session")
            return MoveResult.rejected(MoveRejection.GAME_ALREADY_OVER, self._state)

        return MoveResult.accepted(placement, self._state)

    def _commit(self, placement: Placement) -> None:
        self._board.place(placement.row, placement.col, placement.player)
        self._last_move = placement
        self._pending = None
        self._move_count += 1

        win = check_win(self._board, placement.row, placement.col,
                        placement.player, self.config.connect_n)
        if win is not None:
            self._state = GameState.won(win)
            debug.info(f"{win.player} wins with {list(win.cells)}", "session")
        elif check_draw(self._board):
            self._state = GameState.drawn()
            debug.info(f"Game drawn after {self._move_count} moves", "session")
        else:
            self._current_player = self._current_player.other()
            debug.trace(f"{self._current_player} to move", "session")


# Functional interface for presentation layers

def new_session(config: Optional[GameConfig] = None) -> GameSession:
    """Create a session: empty board, RED to move, game in progress."""
    return GameSession(config)


async def apply_move(session: GameSession, column: int) -> MoveResult:
    return await session.apply_move(column)


def preview_landing(session: GameSession, column: int) -> Optional[int]:
    return session.preview_landing(column)


def reset(session: GameSession) -> GameSession:
    return session.reset()


def get_cell(session: GameSession, row: int, col: int) -> Player:
    return session.get_cell(row, col)


def get_current_player(session: GameSession) -> Player:
    return session.current_player


def get_state(session: GameSession) -> GameState:
    return session.state


def get_last_move(session: GameSession) -> Optional[Placement]:
    return session.last_move
