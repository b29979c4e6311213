"""
utils.py - Constants, enumerations and helper functions for the Connect Four engine

Rows are indexed from the bottom of the board: row 0 is where the first coin
dropped into an empty column comes to rest.
"""

from enum import Enum, auto
from typing import Dict, Optional, Tuple

import numpy as np

from connect4_engine.errors import InvalidDimensions

# Game constants
ROWS = 6
COLS = 7
CONNECT_N = 4  # Number of pieces in a row to win
MIN_DIMENSION = CONNECT_N  # Smallest board on which a win is possible

EMPTY = 0  # Value of an empty cell in the grid matrix


class Player(Enum):
    """The two players. Values are the integers stored in the grid matrix."""
    BLUE = 1
    RED = 2

    def other(self) -> 'Player':
        """Get the other player."""
        return Player.RED if self == Player.BLUE else Player.BLUE

    @property
    def symbol(self) -> str:
        """Single-character symbol used in ASCII rendering."""
        return "B" if self == Player.BLUE else "R"

    @classmethod
    def from_name(cls, name: str) -> 'Player':
        """Look up a player by case-insensitive name ('blue' / 'red')."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown player: {name!r}") from None

    def __str__(self):
        return self.name.capitalize()


# A cell is either empty (None) or owned by a player
CellState = Optional[Player]
Coordinate = Tuple[int, int]


class Direction(Enum):
    """Enumeration of the four axes scanned for a connect-four."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_UP = auto()  # Bottom-left to top-right
    DIAGONAL_DOWN = auto()  # Top-left to bottom-right


# Direction vectors (row, col) for each axis, with row increasing upward
DIRECTION_VECTORS: Dict[Direction, Coordinate] = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_UP: (1, 1),
    Direction.DIAGONAL_DOWN: (-1, 1)
}


def validate_dimensions(rows: int, cols: int) -> Tuple[int, int]:
    """
    Check that board dimensions allow a win.

    Args:
        rows: Number of rows
        cols: Number of columns

    Returns:
        The validated (rows, cols) pair

    Raises:
        InvalidDimensions: If either dimension is not an integer >= MIN_DIMENSION
    """
    for name, value in (("rows", rows), ("columns", cols)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise InvalidDimensions(f"{name} must be an integer, got {value!r}")
        if value < MIN_DIMENSION:
            raise InvalidDimensions(f"{name} must be at least {MIN_DIMENSION}, got {value}")
    return int(rows), int(cols)


def cell_to_player(value: int) -> CellState:
    """Convert a raw grid value to a cell state."""
    if value == EMPTY:
        return None
    return Player(int(value))


def render_board_ascii(grid: np.ndarray) -> str:
    """
    Render a grid matrix as ASCII art, top row first.

    Args:
        grid: Matrix of cell values with row 0 at the bottom

    Returns:
        ASCII representation of the board
    """
    rows, cols = grid.shape
    border = "|" + "-" * (cols * 2 - 1) + "|"
    result = [border]

    for row in range(rows - 1, -1, -1):
        cells = []
        for col in range(cols):
            owner = cell_to_player(grid[row, col])
            cells.append(owner.symbol if owner else ".")
        result.append("|" + " ".join(cells) + "|")

    result.append(border)
    result.append("|" + " ".join(str(i % 10) for i in range(cols)) + "|")

    return "\n".join(result)
