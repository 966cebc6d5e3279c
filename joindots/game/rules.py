"""
rules.py - Win and draw detection for Join Dots

The rule engine is a set of pure functions over a Board. Nothing here
mutates the board or keeps state between calls.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from joindots.debug import debug
from joindots.game.board import Board
from joindots.utils import CONNECT_N, DIRECTION_VECTORS, Coord, Player, is_valid_position


@dataclass(frozen=True)
class WinResult:
    """The winning player and the run of cells that won, in board order."""
    player: Player
    cells: Tuple[Coord, ...]

    def __contains__(self, cell) -> bool:
        return tuple(cell) in self.cells


def _walk(board: Board, row: int, col: int, dr: int, dc: int,
          player: Player, max_steps: int) -> List[Coord]:
    """Collect consecutive cells owned by player, stepping away from (row, col)."""
    found = []
    for step in range(1, max_steps + 1):
        r, c = row + dr * step, col + dc * step
        if not is_valid_position(r, c, board.rows, board.cols):
            break
        if board.grid[r, c] != player.value:
            break
        found.append((r, c))
    return found


def check_win(board: Board, last_row: int, last_col: int, player: Player,
              connect_n: int = CONNECT_N) -> Optional[WinResult]:
    """
    Check whether the piece at (last_row, last_col) completed a run.

    Only lines through the last placed piece are examined, since any new
    win has to include it. For each direction the positive side is walked
    first, then the negative side; the run is reported from its negative
    end toward its positive end and cut to the first connect_n cells.

    Args:
        board: Board after the piece was placed
        last_row: Row of the piece just placed
        last_col: Column of the piece just placed
        player: Owner of that piece
        connect_n: Run length needed to win

    Returns:
        WinResult with exactly connect_n cells, or None if no run was made
    """
    if player == Player.EMPTY:
        return None

    for direction, (dr, dc) in DIRECTION_VECTORS.items():
        forward = _walk(board, last_row, last_col, dr, dc, player, connect_n - 1)
        backward = _walk(board, last_row, last_col, -dr, -dc, player, connect_n - 1)

        if 1 + len(forward) + len(backward) >= connect_n:
            run = list(reversed(backward)) + [(last_row, last_col)] + forward
            debug.trace(f"{direction.name} run of {len(run)} for {player}", "rules")
            return WinResult(player=player, cells=tuple(run[:connect_n]))

    return None


def check_draw(board: Board) -> bool:
    """
    Check whether no further move is possible.

    Only meaningful after check_win() found nothing for the same move: a
    board that fills up with a winning move is a win.
    """
    return board.is_top_row_full()
