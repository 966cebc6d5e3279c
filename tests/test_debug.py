"""
Tests for the logging manager.
"""

import logging

from joindots.debug import DebugLevel, DebugManager, debug

COLS_OUT_OF_RANGE = 99


def messages(caplog):
    return [record.getMessage() for record in caplog.records if record.name == "joindots"]


class TestFiltering:

    def test_level_filter(self, caplog):
        debug.configure(level=DebugLevel.INFO)
        debug.info("shown", "session")
        debug.debug("hidden", "session")
        assert messages(caplog) == ["[session] shown"]

    def test_trace_prefix(self, caplog):
        debug.configure(level=DebugLevel.TRACE)
        debug.trace("deep", "board")
        assert messages(caplog) == ["TRACE: [board] deep"]

    def test_component_filter(self, caplog):
        debug.configure(level=DebugLevel.DEBUG, components=["rules"])
        debug.debug("kept", "rules")
        debug.debug("dropped", "board")
        assert messages(caplog) == ["[rules] kept"]

    def test_disabled(self, caplog):
        debug.configure(level=DebugLevel.DEBUG, enabled=False)
        debug.error("nothing")
        assert messages(caplog) == []

    def test_none_level_silences_errors(self, caplog):
        debug.configure(level=DebugLevel.NONE)
        debug.error("nothing")
        assert messages(caplog) == []


class TestEngineLogging:

    def test_win_logged(self, caplog, session, play):
        debug.configure(level=DebugLevel.INFO)
        play(session, [0, 6, 1, 6, 2, 6, 3])
        assert any("Red wins" in m for m in messages(caplog))

    def test_rejection_logged(self, caplog, session, play):
        debug.configure(level=DebugLevel.DEBUG, components=["session"])
        play(session, [COLS_OUT_OF_RANGE])
        assert any("INVALID_COLUMN" in m for m in messages(caplog))


class TestSettings:

    def test_set_from_string(self):
        assert debug.set_from_string("debug")
        assert debug.level == DebugLevel.DEBUG
        assert not debug.set_from_string("loud")
        assert debug.level == DebugLevel.DEBUG

    def test_timer(self):
        manager = DebugManager("joindots.test")
        manager.start_timer("t")
        elapsed = manager.end_timer("t")
        assert elapsed is not None and elapsed >= 0
        assert manager.end_timer("t") is None

    def test_single_console_handler(self):
        DebugManager()
        DebugManager()
        logger = logging.getLogger("joindots")
        consoles = [h for h in logger.handlers if getattr(h, "_joindots_console", False)]
        assert len(consoles) == 1

    def test_log_file(self, tmp_path):
        path = tmp_path / "engine.log"
        debug.configure(level=DebugLevel.INFO, log_file=str(path))
        try:
            debug.info("to file", "cli")
        finally:
            debug.configure(log_file="")
        assert "[cli] to file" in path.read_text()
