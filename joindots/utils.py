"""
utils.py - Constants, enumerations and helpers for the Join Dots engine

This module holds the board dimensions, the cell/player enumeration, the
game status and rejection enumerations, the game configuration and a few
helpers shared by the board, the rule engine and the interfaces.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, Optional, Tuple

import numpy as np

# Game constants
ROWS = 6
COLS = 7
CONNECT_N = 4      # Number of pieces in a row to win
DROP_DELAY = 0.4   # Seconds a dropped piece takes to land

Coord = Tuple[int, int]  # (row, col)


class Player(Enum):
    """Enumeration representing players and cell states."""
    EMPTY = 0
    RED = 1      # Always moves first
    YELLOW = 2

    def other(self) -> 'Player':
        """Get the other player."""
        if self == Player.RED:
            return Player.YELLOW
        elif self == Player.YELLOW:
            return Player.RED
        return Player.EMPTY

    @property
    def symbol(self) -> str:
        return {Player.EMPTY: ".", Player.RED: "R", Player.YELLOW: "Y"}[self]

    def __str__(self):
        return self.name.capitalize()


class GameStatus(Enum):
    """Enumeration representing the lifecycle of a game."""
    IN_PROGRESS = auto()
    WON = auto()
    DRAWN = auto()

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self != GameStatus.IN_PROGRESS


class MoveRejection(Enum):
    """Reasons a requested move is refused. Rejections never change the session."""
    INVALID_COLUMN = "column is out of range"
    COLUMN_FULL = "column is full"
    GAME_ALREADY_OVER = "game is already over"
    MOVE_IN_PROGRESS = "a piece is still dropping"

    @property
    def message(self) -> str:
        return self.value


class Direction(Enum):
    """Enumeration representing directions for win checking."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_DOWN = auto()  # Top-left to bottom-right
    DIAGONAL_UP = auto()    # Top-right to bottom-left


# Direction vectors (row, col), checked in this order
DIRECTION_VECTORS = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_DOWN: (1, 1),
    Direction.DIAGONAL_UP: (1, -1),
}


@dataclass(frozen=True)
class GameConfig:
    """
    Board geometry and timing for a game session.

    The defaults reproduce the standard 6x7 board with a run length of 4
    and the 0.4 second drop delay.
    """
    rows: int = ROWS
    cols: int = COLS
    connect_n: int = CONNECT_N
    drop_delay: float = DROP_DELAY

    def __post_init__(self):
        if self.rows < 1 or self.cols < 1:
            raise ValueError(f"Board must have at least one row and column, got {self.rows}x{self.cols}")
        if self.connect_n < 2:
            raise ValueError(f"connect_n must be at least 2, got {self.connect_n}")
        if self.connect_n > max(self.rows, self.cols):
            raise ValueError(
                f"connect_n {self.connect_n} cannot fit on a {self.rows}x{self.cols} board")
        if self.drop_delay < 0:
            raise ValueError(f"drop_delay must not be negative, got {self.drop_delay}")

    @property
    def cells(self) -> int:
        return self.rows * self.cols


def is_valid_position(row: int, col: int, rows: int = ROWS, cols: int = COLS) -> bool:
    """
    Check if a position is within the board boundaries.

    Args:
        row: Row index
        col: Column index
        rows: Number of rows on the board
        cols: Number of columns on the board

    Returns:
        True if position is valid, False otherwise
    """
    return 0 <= row < rows and 0 <= col < cols


def render_board_ascii(grid: np.ndarray, highlight: Optional[Iterable[Coord]] = None) -> str:
    """
    Render a board grid as text.

    Args:
        grid: 2D array of Player values, row 0 at the top
        highlight: Cells to mark with '*' (usually the winning run)

    Returns:
        Multi-line string with column numbers underneath
    """
    rows, cols = grid.shape
    marked = set(highlight or ())
    border = "+" + "-" * (cols * 2 + 1) + "+"

    lines = [border]
    for row in range(rows):
        cells = []
        for col in range(cols):
            symbol = Player(int(grid[row, col])).symbol
            if (row, col) in marked:
                symbol = "*"
            cells.append(symbol)
        lines.append("| " + " ".join(cells) + " |")
    lines.append(border)
    lines.append("  " + " ".join(str(col % 10) for col in range(cols)))

    return "\n".join(lines)
