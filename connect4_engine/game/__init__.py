"""
connect4_engine.game - Core game mechanics for Connect Four

This package contains the grid representation, the turn/result state
machine and a gymnasium environment built on top of it.
"""

from connect4_engine.game.board import Grid
from connect4_engine.game.rules import (ConnectFourEnv, GameEngine, GameResult,
                                        GameStatus, MoveResult)

__all__ = ['Grid', 'GameEngine', 'GameResult', 'GameStatus', 'MoveResult', 'ConnectFourEnv']
