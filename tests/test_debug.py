"""Tests for the debug/logging manager."""

import logging

import pytest

from connect4_engine.debug import DebugLevel, DebugManager


@pytest.fixture
def manager(caplog):
    caplog.set_level(logging.DEBUG, logger="connect4_engine.test")
    return DebugManager("connect4_engine.test")


class TestDebugManager:
    def test_level_filtering(self, manager, caplog):
        manager.configure(level=DebugLevel.INFO)
        manager.info("shown", "engine")
        manager.debug("hidden", "engine")
        messages = [r.getMessage() for r in caplog.records]
        assert "[engine] shown" in messages
        assert not any("hidden" in m for m in messages)

    def test_component_filtering(self, manager, caplog):
        manager.configure(level=DebugLevel.DEBUG, components=["grid"])
        manager.debug("grid message", "grid")
        manager.debug("engine message", "engine")
        messages = [r.getMessage() for r in caplog.records]
        assert "[grid] grid message" in messages
        assert not any("engine message" in m for m in messages)

    def test_trace(self, manager, caplog):
        manager.configure(level=DebugLevel.TRACE)
        manager.trace("detail")
        assert "TRACE: detail" in [r.getMessage() for r in caplog.records]

    def test_disabled(self, manager, caplog):
        manager.configure(level=DebugLevel.DEBUG, enabled=False)
        manager.error("nothing")
        assert not caplog.records

    def test_set_from_string(self, manager):
        assert manager.set_from_string("debug")
        assert manager.level == DebugLevel.DEBUG
        assert not manager.set_from_string("loud")
        assert manager.level == DebugLevel.DEBUG

    def test_timer(self, manager):
        manager.start_timer("op")
        elapsed = manager.end_timer("op")
        assert elapsed is not None and elapsed >= 0
        assert manager.end_timer("op") is None

    def test_log_file(self, manager, tmp_path):
        log_file = tmp_path / "engine.log"
        manager.configure(level=DebugLevel.INFO, log_file=str(log_file))
        manager.info("to file")
        manager.configure(log_file="")
        assert "to file" in log_file.read_text()
