"""Shared fixtures and move sequences for the engine tests."""

import pytest

from connect4_engine.game.rules import GameEngine
from connect4_engine.utils import Player

# Blue completes (0,0)-(0,3); Red stacks above without a run
HORIZONTAL_WIN = [0, 0, 1, 1, 2, 2, 3]
# Blue stacks column 3 while Red stacks column 0
VERTICAL_WIN = [3, 0, 3, 0, 3, 0, 3]
# Blue completes (0,0), (1,1), (2,2), (3,3)
DIAGONAL_UP_WIN = [0, 1, 1, 2, 3, 2, 2, 3, 4, 3, 3]
# Mirror image: Blue completes (0,6), (1,5), (2,4), (3,3)
DIAGONAL_DOWN_WIN = [6 - col for col in DIAGONAL_UP_WIN]
# Blue fills (0,0)-(0,4) with the middle coin last
RUN_OF_FIVE = [0, 0, 1, 1, 3, 3, 4, 4, 2]
# Fills the 6x7 board with column colour patterns X X Y Y X X Y, no run of four
TIE_GAME = ([0] * 6
            + [1] + [6] * 6 + [1] * 5
            + [4] + [2] * 6 + [4] * 5
            + [5] + [3] * 6 + [5] * 5)


def play(engine, columns):
    """Apply a list of moves, returning the last MoveResult."""
    result = None
    for column in columns:
        result = engine.apply_move(column)
    return result


@pytest.fixture
def engine():
    return GameEngine(first_player=Player.BLUE)
