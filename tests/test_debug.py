"""Tests for the logging manager."""

import logging
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from bitconnect.debug import debug, DebugLevel, DebugManager
from bitconnect.game.rules import GameEngine


@pytest.fixture
def debug_level():
    yield debug
    debug.configure(level=DebugLevel.INFO, enabled=True, components=[])


def test_engine_logs_win(debug_level, caplog):
    debug.configure(level=DebugLevel.DEBUG)
    with caplog.at_level(logging.DEBUG, logger="bitconnect"):
        game = GameEngine()
        for column in [0, 1, 0, 1, 0, 1, 0]:
            game.play(column)
    assert "[engine] Player ONE wins with column 0 on move 7" in caplog.text


def test_component_filter(debug_level, caplog):
    debug.configure(level=DebugLevel.INFO, components=["cli"])
    with caplog.at_level(logging.INFO, logger="bitconnect"):
        debug.info("shown", "cli")
        debug.info("hidden", "env")
    assert "[cli] shown" in caplog.text
    assert "hidden" not in caplog.text


def test_level_filter(debug_level):
    debug.configure(level=DebugLevel.WARNING)
    assert debug.is_enabled_for(DebugLevel.ERROR)
    assert not debug.is_enabled_for(DebugLevel.INFO)
    debug.configure(level=DebugLevel.NONE)
    assert not debug.is_enabled_for(DebugLevel.ERROR)


def test_set_from_string(debug_level):
    assert debug.set_from_string("trace")
    assert debug.level == DebugLevel.TRACE
    assert not debug.set_from_string("loud")
    assert debug.level == DebugLevel.TRACE


def test_timers(debug_level):
    debug.start_timer("t")
    assert debug.end_timer("t") >= 0.0
    assert debug.end_timer("t") is None


def test_single_console_handler():
    before = len(logging.getLogger("bitconnect").handlers)
    DebugManager()
    assert len(logging.getLogger("bitconnect").handlers) == before


def test_log_file(debug_level, tmp_path):
    path = tmp_path / "engine.log"
    debug.configure(log_file=str(path))
    debug.warning("written to file", "test")
    debug.configure(log_file="")
    assert "[test] written to file" in path.read_text()
