"""Logging setup and utilities."""

import logging

from .ansi import LogStyles, make_style, should_colorize
from .debug import is_debug, set_debug

__all__ = [
    "LogObjects",
    "get_logger",
    "init_logger",
]


class LogObjects:
    """Handlers shared by every logger of the package."""

    handlers: list[logging.Handler] = []


class ScreenLogFormatter(logging.Formatter):
    """Formatter adding colors based on the log level."""

    def __init__(self) -> None:
        super().__init__()
        log_format = r"%(name)15s - %(message)s // %(filename)s:%(lineno)d" if is_debug() else r"fishcomplete: %(message)s"
        if should_colorize():
            styles = {
                logging.WARNING: make_style(*LogStyles.WARNING),
                logging.ERROR: make_style(*LogStyles.ERROR),
                logging.CRITICAL: make_style(*LogStyles.CRITICAL),
            }
        else:
            styles = {}

        self._formatters = {}
        for level in (logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR, logging.CRITICAL):
            prefix, suffix = styles.get(level, ("", ""))
            self._formatters[level] = logging.Formatter(prefix + log_format + suffix)

    def format(self, record: logging.LogRecord) -> str:
        formatter = self._formatters.get(record.levelno, self._formatters[logging.WARNING])
        return formatter.format(record)


def init_logger(filename: str | None = None, force_debug: bool = False) -> None:
    """Initialize the logging system.

    Args:
        filename: Optional filename to log to
        force_debug: If True, force debug level
    """
    if force_debug:
        set_debug(True)

    previous_handlers = list(LogObjects.handlers)
    LogObjects.handlers.clear()
    if filename:
        file_handler = logging.FileHandler(filename)
        file_handler.setFormatter(logging.Formatter(fmt=r"%(asctime)s [%(levelname)s] %(name)s :: %(message)s :: %(filename)s:%(lineno)d"))
        LogObjects.handlers.append(file_handler)
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(ScreenLogFormatter())
    LogObjects.handlers.append(stream_handler)

    # loggers created before this call switch to the new handlers
    for name, logger in logging.root.manager.loggerDict.items():
        if isinstance(logger, logging.Logger) and (name == "fishcomplete" or name.startswith("fishcomplete.")):
            for handler in previous_handlers:
                logger.removeHandler(handler)
            for handler in LogObjects.handlers:
                logger.addHandler(handler)
    for handler in previous_handlers:
        handler.close()


def get_logger(name: str = "fishcomplete", level: int | None = None) -> logging.Logger:
    """Return a named logger.

    Args:
        name: logger's name, nested under "fishcomplete"
        level: logger's level (auto if not set)

    Returns:
        The logger instance
    """
    if name != "fishcomplete" and not name.startswith("fishcomplete."):
        name = f"fishcomplete.{name}"
    logger = logging.getLogger(name)
    if level is None:
        logger.setLevel(logging.DEBUG if is_debug() else logging.WARNING)
    else:
        logger.setLevel(level)
    logger.propagate = False
    for handler in LogObjects.handlers:
        if handler not in logger.handlers:
            logger.addHandler(handler)
    return logger
