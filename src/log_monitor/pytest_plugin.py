"""pytest fixture exposing a :class:`LogMonitor` per test.

Enable it from a ``conftest.py`` with::

    pytest_plugins = ["log_monitor.pytest_plugin"]
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from log_monitor.logging_config import LoggingConfig
from log_monitor.monitor import LogMonitor
from log_monitor.types import Severity

LEVEL_INI = "log_monitor_level"


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addini(
        LEVEL_INI,
        help="Minimum severity captured by the log_monitor fixture (default: DEBUG).",
        default="DEBUG",
    )


@pytest.fixture
def log_monitor(request: pytest.FixtureRequest) -> Iterator[LogMonitor]:
    """Capture root logger output for the duration of one test."""

    config = LoggingConfig()
    state = config.snapshot()
    level = Severity.parse(request.config.getini(LEVEL_INI))
    try:
        yield LogMonitor(level, logging_config=config)
    finally:
        config.restore(state)
