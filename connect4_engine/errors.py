"""
errors.py - Exceptions raised by the Connect Four engine

Every error rejects the requested operation and leaves the engine state unchanged.
"""


class EngineError(Exception):
    """Base class for all engine errors."""


class OutOfRange(EngineError, IndexError):
    """A row or column index lies outside the grid."""


class ColumnFull(EngineError):
    """A coin was dropped into a column with no empty cell left."""

    def __init__(self, column: int):
        super().__init__(f"Column {column} is full")
        self.column = column


class GameAlreadyOver(EngineError):
    """A move was attempted after the game reached a terminal status."""


class InvalidDimensions(EngineError, ValueError):
    """Board dimensions do not allow a connect-four."""
