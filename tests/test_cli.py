"""Tests for the command-line driver."""

import random
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from bitconnect.game.rules import GameEngine
from bitconnect.interfaces.cli import main, parse_moves, random_playout, SimpleCLI


def test_parse_moves():
    assert parse_moves("4,4,3") == [3, 3, 2]
    assert parse_moves(" 1, 7 ") == [0, 6]
    with pytest.raises(ValueError):
        parse_moves("a,b")


def test_random_playout_leaves_root_untouched():
    root = GameEngine()
    final = random_playout(root, random.Random(3))
    assert final.is_terminal()
    assert root.moves == 0
    assert root.board.occupied == 0


class TestReplay:
    def test_replay_win(self, capsys):
        assert main(["replay", "--moves", "1,2,1,2,1,2,1"]) == 0
        out = capsys.readouterr().out
        assert "X wins!" in out
        assert " 1 2 3 4 5 6 7" in out

    def test_replay_unfinished(self, capsys):
        assert main(["replay", "--moves", "4,4"]) == 0
        assert "Game unfinished." in capsys.readouterr().out

    def test_replay_full_column(self, capsys):
        assert main(["replay", "--moves", "1,1,1,1,1,1,1"]) == 1
        assert "Move 7: column 1 is not playable." in capsys.readouterr().out

    def test_replay_out_of_range(self, capsys):
        assert main(["replay", "--moves", "8"]) == 1
        assert "column 8 is not playable" in capsys.readouterr().out

    def test_replay_after_game_over(self, capsys):
        assert main(["replay", "--moves", "1,2,1,2,1,2,1,3"]) == 1
        assert "Move 8: game already over." in capsys.readouterr().out

    def test_replay_bad_input(self, capsys):
        assert main(["replay", "--moves", "x"]) == 1
        assert "Invalid move list" in capsys.readouterr().out


def test_benchmark(capsys):
    assert main(["benchmark", "--games", "20", "--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert "Games: 20" in out
    assert "draws:" in out


def test_no_command(capsys):
    assert main([]) == 1
    assert "Please specify a command" in capsys.readouterr().out


def test_play_quit(monkeypatch, capsys):
    inputs = iter(["4", "9", "q"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(inputs))
    assert main(["play"]) == 0
    out = capsys.readouterr().out
    assert "Column must be between 1 and 7." in out
    assert "Quitting game." in out


def test_play_to_win(monkeypatch, capsys):
    inputs = iter(["1", "2", "1", "2", "1", "2", "1"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(inputs))
    cli = SimpleCLI(["play"])
    assert cli.run() == 0
    assert cli.game.is_terminal()
    assert "X wins!" in capsys.readouterr().out
