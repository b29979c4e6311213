"""
cli.py - Command-line interface for the Connect Four engine

This module provides a terminal front end that drives the GameEngine: a
hot-seat game for two players, a replay of a comma-separated move list and a
benchmark of random games.
"""

import argparse
import random
import sys
import time
from typing import List, Optional, TextIO

from connect4_engine.debug import debug, DebugLevel
from connect4_engine.errors import EngineError, InvalidDimensions
from connect4_engine.game.rules import GameEngine, GameResult, MoveResult
from connect4_engine.utils import ROWS, COLS, Player

QUIT = -1
RESTART = -2


def parse_moves(moves_str: str) -> List[int]:
    """
    Parse a comma-separated list of column indices.

    Raises:
        ValueError: If an entry is not an integer
    """
    return [int(token) for token in moves_str.split(',') if token.strip()]


def describe_outcome(engine: GameEngine) -> str:
    """Human-readable summary of a finished or running game."""
    status = engine.status
    if status.result == GameResult.WON:
        cells = ", ".join(f"({r},{c})" for r, c in status.winning_cells)
        return f"{status.winner} wins! Winning coins: {cells}"
    if status.result == GameResult.TIED:
        return "It's a tie!"
    return f"Game in progress, {engine.active_player} to move."


class SimpleCLI:
    """Simple command-line interface for playing and exercising the engine."""

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        """Initialize the CLI."""
        self.engine: Optional[GameEngine] = None
        self.args = None
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout

    def _print(self, message: str = "") -> None:
        print(message, file=self.stdout)

    @staticmethod
    def build_parser() -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(description='Connect Four CLI')
        parser.add_argument('--debug', action='store_true', help='Enable debug logging')
        parser.add_argument('--debug-level', default='warning',
                            choices=[level.name.lower() for level in DebugLevel],
                            help='Logging level')
        parser.add_argument('--log-file', type=str, default=None, help='Also log to this file')

        # Main commands
        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        def add_board_args(sub):
            sub.add_argument('--rows', type=int, default=ROWS, help='Number of rows')
            sub.add_argument('--columns', type=int, default=COLS, help='Number of columns')
            sub.add_argument('--first', choices=['blue', 'red'], default='blue',
                             help='Player who moves first')

        # Play command
        play_parser = subparsers.add_parser('play', help='Play a hot-seat game for two players')
        add_board_args(play_parser)

        # Replay command
        replay_parser = subparsers.add_parser('replay', help='Apply a list of moves and show the result')
        add_board_args(replay_parser)
        replay_parser.add_argument('--moves', type=str, required=True,
                                   help='Comma-separated column indices, e.g. 3,3,4,4')

        # Benchmark command
        benchmark_parser = subparsers.add_parser('benchmark', help='Benchmark random games')
        add_board_args(benchmark_parser)
        benchmark_parser.add_argument('--games', type=int, default=1000,
                                      help='Number of games to play')
        benchmark_parser.add_argument('--seed', type=int, default=None, help='Random seed')

        return parser

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        """Parse command-line arguments and configure logging."""
        self.args = self.build_parser().parse_args(argv)

        if self.args.debug:
            debug.configure(level=DebugLevel.DEBUG)
        else:
            debug.set_from_string(self.args.debug_level)

        if self.args.log_file:
            debug.configure(log_file=self.args.log_file)

    def _create_engine(self) -> GameEngine:
        return GameEngine(self.args.rows, self.args.columns, Player.from_name(self.args.first))

    def run(self, argv: Optional[List[str]] = None) -> int:
        """
        Run the CLI based on the parsed arguments.

        Returns:
            Process exit code
        """
        if not self.args:
            self.parse_args(argv)

        commands = {
            'play': self.play_game,
            'replay': self.replay,
            'benchmark': self.benchmark,
        }
        command = commands.get(self.args.command)
        if command is None:
            self._print("Please specify a command. Use --help for options.")
            return 1

        try:
            self.engine = self._create_engine()
        except InvalidDimensions as e:
            self._print(f"Invalid board: {e}")
            return 1

        return command()

    def play_game(self) -> int:
        """Play a hot-seat game in the terminal."""
        engine = self.engine
        self._print("Starting a new Connect Four game!")
        self._print(f"Enter a column number (0-{engine.columns - 1}) to drop a coin.")
        self._print("Other commands: 'q' to quit, 'r' to restart.")
        self._print(engine.render())

        while not engine.is_game_over():
            move = self.get_human_move(engine.active_player)

            if move is None:
                continue
            if move == QUIT:
                self._print("Quitting game.")
                return 0
            if move == RESTART:
                engine.start_new_game(Player.from_name(self.args.first))
                self._print("Game restarted.")
                self._print(engine.render())
                continue

            try:
                result = engine.apply_move(move)
            except EngineError as e:
                self._print(f"Move rejected: {e}")
                continue

            self._print(engine.render())
            self._report_move(result)

        self._print("Game over!")
        self._print(describe_outcome(engine))
        return 0

    def _report_move(self, result: MoveResult) -> None:
        if result.next_player is not None:
            self._print(f"{result.player} dropped into ({result.row}, {result.column}). "
                        f"{result.next_player} to move.")

    def get_human_move(self, player: Player) -> Optional[int]:
        """
        Get a move from the player at the terminal.

        Returns:
            Column index, a special command code, or None if the input was invalid
        """
        self.stdout.write(f"{player} to move (columns 0-{self.engine.columns - 1}, q/r): ")
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return QUIT  # End of input

        user_input = line.strip().lower()
        if user_input == 'q':
            return QUIT
        if user_input == 'r':
            return RESTART

        try:
            return int(user_input)
        except ValueError:
            self._print("Invalid input. Please enter a column number or command.")
            return None

    def replay(self) -> int:
        """Apply the given moves in order and report the result."""
        engine = self.engine
        try:
            moves = parse_moves(self.args.moves)
        except ValueError as e:
            self._print(f"Error parsing moves: {e}")
            return 1

        for index, column in enumerate(moves):
            try:
                engine.apply_move(column)
            except EngineError as e:
                self._print(engine.render())
                self._print(f"Move {index + 1} (column {column}) rejected: {e}")
                return 1

        self._print(engine.render())
        self._print(f"Moves played: {engine.move_count}")
        self._print(describe_outcome(engine))
        return 0

    def benchmark(self) -> int:
        """Play random legal games and report timing and result counts."""
        engine = self.engine
        rng = random.Random(self.args.seed)
        results = {Player.BLUE: 0, Player.RED: 0, None: 0}
        total_moves = 0

        self._print(f"Benchmarking {self.args.games} random games...")
        start_time = time.perf_counter()

        for _ in range(self.args.games):
            engine.start_new_game(Player.from_name(self.args.first))
            while not engine.is_game_over():
                engine.apply_move(rng.choice(engine.legal_moves()))
            total_moves += engine.move_count
            results[engine.winner] += 1

        elapsed = time.perf_counter() - start_time
        games = max(self.args.games, 1)

        self._print(f"Total time: {elapsed:.4f} seconds")
        self._print(f"Average time per game: {elapsed / games * 1000:.4f} ms")
        self._print(f"Average moves per game: {total_moves / games:.2f}")
        self._print(f"Blue wins: {results[Player.BLUE]}, Red wins: {results[Player.RED]}, "
                    f"Ties: {results[None]}")
        debug.info(f"Benchmark finished in {elapsed:.4f}s", "cli")
        return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    return SimpleCLI().run(argv)


if __name__ == "__main__":
    sys.exit(main())
