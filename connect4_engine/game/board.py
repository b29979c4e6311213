"""
board.py - Grid representation for Connect Four

This module implements the Grid class: pure positional bookkeeping for the
board with no game rules. Cells are stored in a numpy matrix with row 0 at the
bottom, and a per-column fill height is cached so the landing row of a dropped
coin is found without scanning.
"""

import numpy as np
from typing import Optional, Tuple

from connect4_engine.debug import debug
from connect4_engine.errors import ColumnFull, OutOfRange
from connect4_engine.utils import (ROWS, COLS, EMPTY, Player, CellState, Coordinate,
                                   validate_dimensions, cell_to_player, render_board_ascii)


class Grid:
    """
    Represents the Connect Four cell matrix.

    Occupied cells of a column are always contiguous from the bottom row up.
    `place` and `reset` are the only mutators.
    """

    def __init__(self, rows: int = ROWS, cols: int = COLS):
        """
        Initialize an empty grid.

        Args:
            rows: Number of rows (>= 4)
            cols: Number of columns (>= 4)
        """
        self.rows, self.cols = validate_dimensions(rows, cols)
        debug.debug(f"Initializing new Grid ({self.rows}x{self.cols})", "grid")
        self._cells = np.zeros((self.rows, self.cols), dtype=np.int8)
        self._heights = np.zeros(self.cols, dtype=np.int32)

    @property
    def capacity(self) -> int:
        """Total number of cells."""
        return self.rows * self.cols

    def reset(self) -> None:
        """Clear all cells and the fill-height cache."""
        debug.debug("Resetting grid", "grid")
        self._cells.fill(EMPTY)
        self._heights.fill(0)

    def _check_column(self, column: int) -> None:
        if not 0 <= column < self.cols:
            raise OutOfRange(f"Column {column} out of range [0, {self.cols})")

    def in_bounds(self, row: int, column: int) -> bool:
        """Check if a position is within the grid boundaries."""
        return 0 <= row < self.rows and 0 <= column < self.cols

    def column_height(self, column: int) -> int:
        """Number of coins in a column."""
        self._check_column(column)
        return int(self._heights[column])

    def is_column_full(self, column: int) -> bool:
        """
        Check if the top cell of a column is occupied.

        Raises:
            OutOfRange: If the column is outside the grid
        """
        return self.column_height(column) >= self.rows

    def is_full(self) -> bool:
        """Check if every cell is occupied."""
        return bool(np.all(self._heights >= self.rows))

    def landing_row(self, column: int) -> Optional[int]:
        """
        Get the row a coin dropped into `column` would come to rest in.

        Returns:
            The lowest empty row index, or None if the column is full
        """
        height = self.column_height(column)
        return None if height >= self.rows else height

    def place(self, player: Player, column: int) -> Coordinate:
        """
        Drop a coin for `player` into `column`.

        Args:
            player: Owner of the coin
            column: Column to drop into (0-indexed)

        Returns:
            (row, column) where the coin landed

        Raises:
            OutOfRange: If the column is outside the grid
            ColumnFull: If the column has no empty cell
        """
        row = self.landing_row(column)
        if row is None:
            raise ColumnFull(column)

        self._cells[row, column] = player.value
        self._heights[column] += 1
        debug.trace(f"Placed {player} coin at ({row}, {column})", "grid")
        return row, column

    def cell_at(self, row: int, column: int) -> CellState:
        """
        Look up the owner of a cell.

        Returns:
            The owning Player, or None if the cell is empty

        Raises:
            OutOfRange: If the position is outside the grid
        """
        if not self.in_bounds(row, column):
            raise OutOfRange(f"Cell ({row}, {column}) outside {self.rows}x{self.cols} grid")
        return cell_to_player(self._cells[row, column])

    def get_state(self) -> np.ndarray:
        """
        Get a copy of the cell matrix.

        Returns:
            2D numpy array (row 0 is the bottom row) of 0 / player values
        """
        return self._cells.copy()

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.cols

    def render(self) -> str:
        """Render the grid as ASCII art, top row first."""
        return render_board_ascii(self._cells)

    def __str__(self) -> str:
        return self.render()
