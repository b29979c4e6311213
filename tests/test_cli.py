"""Tests for the command-line interface."""

import io

import pytest

from conftest import TIE_GAME, VERTICAL_WIN
from connect4_engine.interfaces.cli import SimpleCLI, parse_moves


def run_cli(argv, stdin_text=""):
    out = io.StringIO()
    cli = SimpleCLI(stdin=io.StringIO(stdin_text), stdout=out)
    code = cli.run(argv)
    return code, out.getvalue(), cli


def moves_arg(moves):
    return ",".join(str(m) for m in moves)


class TestParseMoves:
    def test_parse(self):
        assert parse_moves("3, 3,4,") == [3, 3, 4]

    def test_parse_invalid(self):
        with pytest.raises(ValueError):
            parse_moves("3,x")


class TestReplay:
    def test_win(self):
        code, output, cli = run_cli(["replay", "--moves", moves_arg(VERTICAL_WIN)])
        assert code == 0
        assert "Blue wins!" in output
        assert "(0,3), (1,3), (2,3), (3,3)" in output
        assert cli.engine.move_count == 7

    def test_tie(self):
        code, output, _ = run_cli(["replay", "--moves", moves_arg(TIE_GAME)])
        assert code == 0
        assert "It's a tie!" in output

    def test_in_progress(self):
        code, output, _ = run_cli(["replay", "--moves", "3", "--first", "red"])
        assert code == 0
        assert "Blue to move" in output

    def test_rejected_move(self):
        code, output, cli = run_cli(["replay", "--moves", moves_arg([0] * 7)])
        assert code == 1
        assert "Move 7 (column 0) rejected" in output
        assert cli.engine.move_count == 6

    def test_move_after_win(self):
        code, output, _ = run_cli(["replay", "--moves", moves_arg(VERTICAL_WIN + [1])])
        assert code == 1
        assert "Game is over" in output

    def test_bad_moves_string(self):
        code, output, _ = run_cli(["replay", "--moves", "1,a"])
        assert code == 1
        assert "Error parsing moves" in output

    def test_invalid_board(self):
        code, output, _ = run_cli(["replay", "--rows", "3", "--moves", "1"])
        assert code == 1
        assert "Invalid board" in output


class TestPlay:
    def test_hot_seat_game(self):
        stdin = "\n".join(str(m) for m in VERTICAL_WIN) + "\n"
        code, output, _ = run_cli(["play"], stdin)
        assert code == 0
        assert "Game over!" in output
        assert "Blue wins!" in output

    def test_rejected_input_then_quit(self):
        code, output, cli = run_cli(["play"], "x\n9\n2\nq\n")
        assert code == 0
        assert "Invalid input" in output
        assert "Move rejected" in output
        assert "Quitting game." in output
        assert cli.engine.move_count == 1

    def test_restart(self):
        code, output, cli = run_cli(["play", "--first", "red"], "2\nr\n")
        assert code == 0
        assert "Game restarted." in output
        assert cli.engine.move_count == 0

    def test_end_of_input_quits(self):
        code, output, _ = run_cli(["play"], "")
        assert code == 0
        assert "Quitting game." in output


class TestBenchmark:
    def test_benchmark(self):
        code, output, _ = run_cli(["benchmark", "--games", "5", "--seed", "1"])
        assert code == 0
        assert "Average moves per game" in output
        assert "Ties:" in output


def test_missing_command():
    code, output, _ = run_cli([])
    assert code == 1
    assert "Please specify a command" in output
