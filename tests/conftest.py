" generic fixtures "
import logging

import pytest

from fishcomplete.config import Settings


def pytest_configure():
    "Runs once before all"
    from fishcomplete.logging_setup import init_logger

    init_logger("/dev/null", force_debug=True)


@pytest.fixture
def test_logger():
    """Provide a silent logger for tests."""
    logger = logging.getLogger("test_fishcomplete")
    logger.handlers.clear()
    logger.addHandler(logging.NullHandler())
    logger.propagate = False
    return logger


@pytest.fixture
def settings():
    "Settings with both executables known"
    return Settings(command_path="/usr/bin/fish", bash_path="/bin/bash")


@pytest.fixture
def in_empty_dir(tmp_path, monkeypatch):
    "Run from an empty directory, so candidates are not taken for files"
    monkeypatch.chdir(tmp_path)
    return tmp_path
