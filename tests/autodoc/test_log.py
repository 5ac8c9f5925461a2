"""
Tests for autodoc logging.
"""

import logging
from io import StringIO

import pytest

from autodoc.exceptions import ConfigError
from autodoc.log import (
    ColorManager,
    LogConstants,
    LogFormatter,
    Logger,
    create_logger,
    resolve_level,
)


@pytest.mark.unit
class TestResolveLevel:
    """Tests for resolve_level()."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("debug", logging.DEBUG),
            ("INFO", logging.INFO),
            ("warning", logging.WARNING),
            ("error", logging.ERROR),
            ("critical", logging.CRITICAL),
            ("false", False),
            ("15", 15),
            (20, 20),
            (False, False),
        ],
    )
    def test_valid(self, name, expected):
        assert resolve_level(name) == expected

    def test_invalid(self):
        with pytest.raises(ConfigError, match="Invalid log level"):
            resolve_level("verbose")


@pytest.mark.unit
class TestLogFormatter:
    """Tests for LogFormatter and the Logger extra handling."""

    def _logger(self, colors: bool = False) -> tuple[Logger, StringIO]:
        stream = StringIO()
        return create_logger("autodoc", "debug", stream=stream, colors=colors), stream

    def test_extra_fields_sorted(self):
        lg, stream = self._logger()
        lg.info("spliced table", extra={"table": "inputs", "result": "replaced"})

        line = stream.getvalue().strip()
        assert line.endswith(
            "[I] spliced table [result:replaced] [table:inputs] [autodoc]"
        )
        assert line.startswith("[")

    def test_extra_not_merged_into_record(self):
        lg = Logger("x")
        record = lg.makeRecord(
            "x", logging.INFO, "f.py", 1, "msg", (), None, extra={"path": "a"}
        )
        assert getattr(record, LogConstants.EXTRA_ATTR) == {"path": "a"}
        assert not hasattr(record, "path")

    def test_no_extra(self):
        lg, stream = self._logger()
        lg.warning("plain")
        assert stream.getvalue().strip().endswith("[W] plain [autodoc]")

    def test_exception_value_shown_as_class_name(self):
        lg, stream = self._logger()
        lg.error("failed", extra={"error": ValueError("boom")})
        assert "[error:ValueError]" in stream.getvalue()

    def test_colors(self):
        lg, stream = self._logger(colors=True)
        lg.info("colored", extra={"k": "v"})
        output = stream.getvalue()
        assert ColorManager.COLORS[logging.INFO] in output
        assert ColorManager.FIELD in output
        assert LogConstants.RESET in output

    def test_no_colors(self):
        lg, stream = self._logger(colors=False)
        lg.info("plain", extra={"k": "v"})
        assert "\x1b[" not in stream.getvalue()

    def test_exception_traceback_appended(self):
        lg, stream = self._logger()
        try:
            raise RuntimeError("bad")
        except RuntimeError:
            lg.exception("caught")
        assert "Traceback" in stream.getvalue()
        assert "RuntimeError: bad" in stream.getvalue()

    def test_formatter_standalone(self):
        record = logging.LogRecord("n", logging.DEBUG, "f.py", 1, "hi %s", ("x",), None)
        assert LogFormatter(colors=False).format(record).endswith("[D] hi x [n]")


@pytest.mark.unit
class TestCreateLogger:
    """Tests for create_logger()."""

    def test_level_filtering(self):
        stream = StringIO()
        lg = create_logger("autodoc", "warning", stream=stream, colors=False)
        lg.info("hidden")
        lg.warning("shown")
        assert "hidden" not in stream.getvalue()
        assert "shown" in stream.getvalue()

    def test_disabled(self):
        stream = StringIO()
        lg = create_logger("autodoc", "false", stream=stream)
        lg.critical("nothing")
        assert lg.disabled
        assert stream.getvalue() == ""

    def test_not_propagated(self):
        lg = create_logger("autodoc", "info", stream=StringIO())
        assert lg.propagate is False

    def test_colors_auto_detected_off_for_non_tty(self):
        lg = create_logger("autodoc", "info", stream=StringIO())
        assert lg.handlers[0].formatter.colors is False

    def test_force_color(self, monkeypatch):
        """Test color detection follows the console's NO_COLOR/FORCE_COLOR rules."""
        monkeypatch.delenv("NO_COLOR")
        monkeypatch.setenv("FORCE_COLOR", "1")
        lg = create_logger("autodoc", "info", stream=StringIO())
        assert lg.handlers[0].formatter.colors is True

    def test_invalid_level(self):
        with pytest.raises(ConfigError):
            create_logger("autodoc", "loud")
