"""
board.py - Board representation and gravity rule for Join Dots

This module implements the Board class, which owns the grid of cell states
and decides where a dropped piece lands. Only the board writes cells, so
every column keeps its pieces stacked from the bottom with no gaps.
"""

from typing import List, Optional

import numpy as np

from joindots.debug import debug
from joindots.utils import ROWS, COLS, Player, is_valid_position, render_board_ascii


class Board:
    """
    A rows x cols grid of cells, row 0 at the top.

    Pieces are only added through place(), and only at the row that
    resolve_landing() reports for the column.
    """

    def __init__(self, rows: int = ROWS, cols: int = COLS):
        """Initialize an empty board."""
        self.rows = rows
        self.cols = cols
        debug.debug(f"Initializing new {rows}x{cols} Board", "board")
        self.reset()

    def reset(self) -> None:
        """Remove every piece from the board."""
        self.grid = np.full((self.rows, self.cols), Player.EMPTY.value, dtype=np.int8)

    def in_bounds(self, column) -> bool:
        """True if column is an integer index of an existing column."""
        if isinstance(column, (bool, np.bool_)) or not isinstance(column, (int, np.integer)):
            return False
        return 0 <= column < self.cols

    def _check_column(self, column) -> None:
        if not self.in_bounds(column):
            raise IndexError(f"Column {column!r} is outside a board with {self.cols} columns")

    def get_cell(self, row: int, col: int) -> Player:
        """
        Get the state of a single cell.

        Raises:
            IndexError: If the position is off the board
        """
        if not is_valid_position(row, col, self.rows, self.cols):
            raise IndexError(f"Cell ({row}, {col}) is outside a {self.rows}x{self.cols} board")
        return Player(int(self.grid[row, col]))

    def column_is_full(self, column: int) -> bool:
        """True if the top cell of the column is occupied."""
        self._check_column(column)
        return self.grid[0, column] != Player.EMPTY.value

    def resolve_landing(self, column: int) -> Optional[int]:
        """
        Find the row a piece dropped in this column would land on.

        Args:
            column: The column to drop into (0-indexed)

        Returns:
            The lowest empty row of the column, or None if the column is full

        Raises:
            IndexError: If the column is off the board
        """
        self._check_column(column)
        for row in range(self.rows - 1, -1, -1):
            if self.grid[row, column] == Player.EMPTY.value:
                return row
        return None

    def place(self, row: int, column: int, player: Player) -> None:
        """
        Write a piece into the grid.

        Args:
            row: Landing row previously obtained from resolve_landing()
            column: The column of the piece
            player: RED or YELLOW

        Raises:
            ValueError: If the piece would float or overwrite another piece
        """
        if player == Player.EMPTY:
            raise ValueError("Cannot place an empty piece")
        if not self.in_bounds(column):
            raise ValueError(f"Column {column} out of range")

        landing = self.resolve_landing(column)
        if landing is None or landing != row:
            raise ValueError(
                f"Row {row} is not the landing row of column {column} (expected {landing})")

        debug.trace(f"Placing {player} at ({row}, {column})", "board")
        self.grid[row, column] = player.value

    def is_top_row_full(self) -> bool:
        """True if every cell in row 0 is occupied."""
        return bool(np.all(self.grid[0] != Player.EMPTY.value))

    def valid_columns(self) -> List[int]:
        """
        Get the columns that can still take a piece.

        Returns:
            List of column indices in ascending order
        """
        return [col for col in range(self.cols) if not self.column_is_full(col)]

    def column_height(self, column: int) -> int:
        """Number of pieces stacked in a column."""
        return int(np.count_nonzero(self.grid[:, column] != Player.EMPTY.value))

    def get_state(self) -> np.ndarray:
        """
        Get a snapshot of the grid.

        Returns:
            A copy of the grid; changing it does not affect the board
        """
        return self.grid.copy()

    def render(self, highlight=None) -> str:
        """Render the board as text."""
        return render_board_ascii(self.grid, highlight)

    def __str__(self) -> str:
        return self.render()
