"""Tests for the ansi and logging helpers."""

import logging
import os
from io import StringIO
from unittest.mock import patch

from fishcomplete.ansi import RESET, LogStyles, OutputStyles, colorize, make_style, should_colorize
from fishcomplete.debug import is_debug, set_debug
from fishcomplete.logging_setup import LogObjects, ScreenLogFormatter, get_logger, init_logger


def test_colorize():
    assert colorize("hello", "31") == "\x1b[31mhello\x1b[0m"
    assert colorize("hello", "31", "1") == "\x1b[31;1mhello\x1b[0m"
    assert colorize("hello") == "hello"
    assert colorize("dir/", *OutputStyles.DIRECTORY) == "\x1b[34;1mdir/\x1b[0m"


def test_make_style():
    assert make_style(*LogStyles.WARNING) == ("\x1b[33;2m", RESET)
    assert make_style() == ("", RESET)


def test_should_colorize_respects_no_color():
    with patch.dict(os.environ, {"NO_COLOR": "1"}, clear=False):
        assert should_colorize() is False


def test_should_colorize_respects_force_color():
    with patch.dict(os.environ, {"FORCE_COLOR": "1"}, clear=False):
        os.environ.pop("NO_COLOR", None)
        assert should_colorize(StringIO()) is True


def test_should_colorize_not_a_tty():
    with patch.dict(os.environ, {}, clear=False):
        os.environ.pop("NO_COLOR", None)
        os.environ.pop("FORCE_COLOR", None)
        assert should_colorize(StringIO()) is False


def test_debug_state():
    previous = is_debug()
    try:
        set_debug(False)
        assert get_logger("quiet").level == logging.WARNING
        set_debug(True)
        assert get_logger("loud").level == logging.DEBUG
    finally:
        set_debug(previous)


def test_get_logger_naming():
    assert get_logger("pipeline").name == "fishcomplete.pipeline"
    assert get_logger().name == "fishcomplete"
    assert get_logger("fishcomplete.x").name == "fishcomplete.x"


def test_get_logger_shares_handlers():
    logger = get_logger("handlers")
    assert not logger.propagate
    for handler in LogObjects.handlers:
        assert handler in logger.handlers
    get_logger("handlers")
    assert len(logger.handlers) == len(set(logger.handlers))


def test_screen_formatter_plain():
    with patch.dict(os.environ, {"NO_COLOR": "1"}, clear=False):
        formatter = ScreenLogFormatter()
    record = logging.LogRecord("fishcomplete", logging.WARNING, __file__, 1, "fish missing", None, None)
    assert "fish missing" in formatter.format(record)
    assert "\x1b[" not in formatter.format(record)


def test_init_logger_replaces_handlers(tmp_path):
    first = tmp_path / "first.log"
    second = tmp_path / "second.log"
    try:
        init_logger(str(first), force_debug=True)
        logger = get_logger("reinit")
        init_logger(str(second), force_debug=True)
        assert logger.handlers == LogObjects.handlers

        logger.warning("once")
        assert second.read_text().count("once") == 1
        assert "once" not in first.read_text()
    finally:
        init_logger("/dev/null", force_debug=True)
