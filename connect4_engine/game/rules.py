"""
rules.py - Game state management and Gymnasium environment for Connect Four

This module provides:
1. GameEngine, the turn/result state machine that owns a Grid, validates and
   applies moves and detects wins and ties
2. A gymnasium-compatible environment that drives a GameEngine
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict, List, Optional, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from connect4_engine.debug import debug
from connect4_engine.errors import EngineError, GameAlreadyOver, OutOfRange
from connect4_engine.game.board import Grid
from connect4_engine.utils import (ROWS, COLS, CONNECT_N, DIRECTION_VECTORS,
                                   Player, Coordinate)


class GameResult(Enum):
    """Enumeration representing the game outcome."""
    IN_PROGRESS = auto()
    WON = auto()
    TIED = auto()

    def is_game_over(self) -> bool:
        """Check if the result is terminal."""
        return self != GameResult.IN_PROGRESS


@dataclass(frozen=True)
class GameStatus:
    """Snapshot of the game outcome."""

    result: GameResult = GameResult.IN_PROGRESS
    winner: Optional[Player] = None
    winning_cells: Tuple[Coordinate, ...] = ()

    @classmethod
    def in_progress(cls) -> "GameStatus":
        return cls()

    @classmethod
    def won(cls, winner: Player, winning_cells: List[Coordinate]) -> "GameStatus":
        return cls(GameResult.WON, winner, tuple(winning_cells))

    @classmethod
    def tied(cls) -> "GameStatus":
        return cls(GameResult.TIED)

    def is_game_over(self) -> bool:
        return self.result.is_game_over()

    def __str__(self) -> str:
        if self.result == GameResult.WON:
            return f"Won by {self.winner}"
        if self.result == GameResult.TIED:
            return "Tied"
        return "In progress"


@dataclass(frozen=True)
class MoveResult:
    """Outcome of a successful move, used by the caller to update its view."""

    row: int
    column: int
    player: Player
    status: GameStatus
    next_player: Optional[Player] = None  # Only set while the game continues

    @property
    def coordinate(self) -> Coordinate:
        return self.row, self.column

    @property
    def is_game_over(self) -> bool:
        return self.status.is_game_over()


class GameEngine:
    """
    Connect Four turn/result state machine.

    The engine owns its Grid; callers request moves through `apply_move` and
    react to the returned MoveResult. Illegal moves raise an EngineError and
    leave the state untouched.
    """

    def __init__(self, rows: int = ROWS, cols: int = COLS, first_player: Player = Player.BLUE):
        """
        Initialize a new game.

        Args:
            rows: Number of grid rows
            cols: Number of grid columns
            first_player: Player who moves first
        """
        debug.debug("Initializing GameEngine", "engine")
        self._grid = Grid(rows, cols)
        self._active_player = first_player
        self._status = GameStatus.in_progress()
        self._move_count = 0
        self.last_move: Optional[Coordinate] = None
        self.start_new_game(first_player)

    def start_new_game(self, first_player: Player) -> None:
        """Reset the grid, move count and status and hand the turn to `first_player`."""
        debug.info(f"Starting new game, {first_player} moves first", "engine")
        self._grid.reset()
        self._move_count = 0
        self._status = GameStatus.in_progress()
        self._active_player = Player(first_player)
        self.last_move = None

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def rows(self) -> int:
        return self._grid.rows

    @property
    def columns(self) -> int:
        return self._grid.cols

    @property
    def active_player(self) -> Player:
        return self._active_player

    @property
    def status(self) -> GameStatus:
        return self._status

    current_status = status

    @property
    def move_count(self) -> int:
        return self._move_count

    @property
    def winner(self) -> Optional[Player]:
        return self._status.winner

    def is_game_over(self) -> bool:
        return self._status.is_game_over()

    def is_move_legal(self, column: int) -> bool:
        """
        Check whether a coin could be dropped into `column` right now.

        Never raises: out-of-range columns are simply not legal.
        """
        if self.is_game_over():
            return False
        try:
            return not self._grid.is_column_full(column)
        except OutOfRange:
            return False

    def legal_moves(self) -> List[int]:
        """List the columns that currently accept a coin."""
        if self.is_game_over():
            return []
        return [col for col in range(self.columns) if not self._grid.is_column_full(col)]

    def apply_move(self, column: int) -> MoveResult:
        """
        Drop a coin for the active player into `column`.

        Args:
            column: Column to drop into (0-indexed)

        Returns:
            MoveResult with the landing coordinate and the status after the move

        Raises:
            GameAlreadyOver: If the game has already been won or tied
            OutOfRange: If the column is outside the grid
            ColumnFull: If the column has no empty cell
        """
        player = self._active_player
        debug.debug(f"Attempting move in column {column} for {player}", "engine")

        if self.is_game_over():
            debug.debug(f"Rejected move in column {column}: game is over ({self._status})", "engine")
            raise GameAlreadyOver(f"Game is over: {self._status}")

        try:
            row, col = self._grid.place(player, column)
        except EngineError as e:
            debug.debug(f"Rejected move in column {column}: {e}", "engine")
            raise

        self._move_count += 1
        self.last_move = (row, col)

        debug.start_timer("win_check")
        winning_cells = self._find_winning_cells(row, col, player)
        debug.end_timer("win_check", "engine")

        if winning_cells:
            self._status = GameStatus.won(player, winning_cells)
            debug.info(f"{player} wins after move at {self.last_move}: {winning_cells}", "engine")
            return MoveResult(row, col, player, self._status)

        if self._move_count == self._grid.capacity:
            self._status = GameStatus.tied()
            debug.info("Game ends in a tie", "engine")
            return MoveResult(row, col, player, self._status)

        self._active_player = player.other()
        debug.debug(f"Switching to {self._active_player}", "engine")
        return MoveResult(row, col, player, self._status, next_player=self._active_player)

    def _find_winning_cells(self, row: int, col: int, player: Player) -> List[Coordinate]:
        """
        Collect the connect-four runs through the coin just placed at (row, col).

        Each axis is walked outward in both directions from the placed coin.
        Every axis with a run of at least CONNECT_N contributes its whole run.

        Returns:
            Sorted list of winning (row, col) positions, empty if no win
        """
        winning = set()

        for direction, (dr, dc) in DIRECTION_VECTORS.items():
            positions = [(row, col)]

            # Check in the positive direction
            r, c = row + dr, col + dc
            while self._grid.in_bounds(r, c) and self._grid.cell_at(r, c) == player:
                positions.append((r, c))
                r += dr
                c += dc

            # Check in the negative direction
            r, c = row - dr, col - dc
            while self._grid.in_bounds(r, c) and self._grid.cell_at(r, c) == player:
                positions.append((r, c))
                r -= dr
                c -= dc

            if len(positions) >= CONNECT_N:
                debug.trace(f"{direction.name} run of {len(positions)} through ({row}, {col})", "engine")
                winning.update(positions)

        return sorted(winning)

    def render(self) -> str:
        """Render the grid as a string."""
        return self._grid.render()

    def __str__(self) -> str:
        return self.render()


class ConnectFourEnv(gym.Env):
    """
    Connect Four environment following the Gymnasium interface.

    Both players act through the same `step` call; rewards are given from the
    point of view of the player who just moved.
    """

    metadata = {'render_modes': ['ascii', 'human'], 'render_fps': 4}

    def __init__(self, render_mode: Optional[str] = None, rows: int = ROWS, cols: int = COLS,
                 first_player: Player = Player.BLUE):
        """
        Initialize the Connect Four environment.

        Args:
            render_mode: Mode for rendering the environment
            rows: Number of grid rows
            cols: Number of grid columns
            first_player: Player who moves first after every reset
        """
        debug.debug("Initializing ConnectFourEnv", "env")

        if render_mode is not None and render_mode not in self.metadata['render_modes']:
            raise ValueError(f"Unsupported render mode: {render_mode}")

        self.engine = GameEngine(rows, cols, first_player)
        self.first_player = first_player
        self.render_mode = render_mode

        self.action_space = spaces.Discrete(self.engine.columns)
        # Observation space: rows x cols grid with 3 possible values (0, 1, 2)
        self.observation_space = spaces.Box(
            low=0, high=2, shape=(self.engine.rows, self.engine.columns), dtype=np.int8
        )

        self.reward_win = 1.0
        self.reward_draw = 0.1
        self.reward_invalid_move = -0.5
        self.reward_step = -0.01

    def reset(self, seed: Optional[int] = None, options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict]:
        """
        Reset the environment to initial state.

        Args:
            seed: Random seed for reproducibility
            options: May hold 'first_player' to override who starts

        Returns:
            Initial observation and info dictionary
        """
        super().reset(seed=seed)

        first_player = (options or {}).get('first_player', self.first_player)
        self.engine.start_new_game(first_player)

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict]:
        """
        Take a step in the environment by dropping a coin for the active player.

        Args:
            action: Column to place a piece (0-indexed)

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        debug.debug(f"Environment step with action {action}", "env")

        try:
            move = self.engine.apply_move(int(action))
        except EngineError as e:
            debug.warning(f"Invalid action {action}: {e}", "env")
            info = self._get_info()
            info['invalid_move'] = True
            info['error'] = str(e)
            return self._get_observation(), self.reward_invalid_move, False, True, info

        reward = self.reward_step
        terminated = move.is_game_over
        if move.status.result == GameResult.WON:
            reward = self.reward_win
        elif move.status.result == GameResult.TIED:
            reward = self.reward_draw

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), reward, terminated, False, self._get_info()

    def render(self) -> Optional[str]:
        """
        Render the current state of the environment.

        Returns:
            ASCII board for 'ascii' mode, None otherwise
        """
        if self.render_mode == "ascii":
            return self.engine.render()
        if self.render_mode == "human":
            print(self.engine.render())
        return None

    def _get_observation(self) -> np.ndarray:
        return self.engine.grid.get_state()

    def _get_info(self) -> Dict:
        """
        Get additional information about the current state.

        Returns:
            Dictionary with info about the current state
        """
        legal_moves = self.engine.legal_moves()
        status = self.engine.status

        return {
            'legal_moves': legal_moves,
            'num_legal_moves': len(legal_moves),
            'active_player': self.engine.active_player.value,
            'game_result': status.result.name,
            'move_count': self.engine.move_count,
            'winning_cells': list(status.winning_cells),
            'last_move': self.engine.last_move
        }
