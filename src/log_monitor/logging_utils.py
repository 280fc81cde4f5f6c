"""Logging helpers for the monitor's own diagnostics."""

from __future__ import annotations

import logging


class LoggingManager:
    """Manage the library's diagnostic logger.

    The logger never propagates, so diagnostics cannot leak into the root
    logger whose output a monitor is capturing.
    """

    def __init__(self, logger_name: str = "log_monitor") -> None:
        self.logger = logging.getLogger(logger_name)
        self.logger.propagate = False
        if not self.logger.handlers:
            self.logger.addHandler(logging.NullHandler())

    def setup(self, verbose: bool) -> None:
        """Send diagnostics to stderr, at debug level when ``verbose``."""
        level = logging.DEBUG if verbose else logging.INFO

        console = logging.StreamHandler()
        console.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(message)s"))

        self.logger.handlers.clear()
        self.logger.addHandler(console)
        self.logger.setLevel(level)

    def debug(self, msg: str, *args: object) -> None:
        """Log a debug message."""
        self.logger.debug(msg, *args)


DEFAULT_LOGGER = LoggingManager()
