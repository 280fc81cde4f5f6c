"""Shared fixtures for the log monitor test suite."""

from __future__ import annotations

import pytest

from log_monitor.logging_config import LoggingConfig

pytest_plugins = ["pytester", "log_monitor.pytest_plugin"]


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """Undo root logger rewiring done by monitors created inside a test."""

    config = LoggingConfig()
    state = config.snapshot()
    yield
    config.restore(state)
