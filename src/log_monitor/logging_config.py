"""Handle on the logger a monitor wires its capture handler into."""

from __future__ import annotations

import dataclasses
import logging

from log_monitor.logging_utils import DEFAULT_LOGGER, LoggingManager
from log_monitor.types import Severity


@dataclasses.dataclass(frozen=True)
class LoggerState:
    """Handlers and threshold of a logger at a point in time."""

    handlers: tuple[logging.Handler, ...]
    level: int


class LoggingConfig:
    """Install and inspect the destination of a stdlib logger.

    Defaults to the root logger. Installing replaces every handler already
    attached, so the most recent install wins.
    """

    def __init__(
        self,
        logger_name: str | None = None,
        *,
        diagnostics: LoggingManager = DEFAULT_LOGGER,
    ) -> None:
        self.logger = logging.getLogger(logger_name)
        self.diagnostics = diagnostics

    def install(self, handler: logging.Handler, level: Severity) -> None:
        """Make ``handler`` the only destination and set the threshold."""
        removed = len(self.logger.handlers)
        for existing in list(self.logger.handlers):
            self.logger.removeHandler(existing)
        self.logger.addHandler(handler)
        self.logger.setLevel(level)
        self.diagnostics.debug(
            "Installed %s on logger %r at %s (replaced %d handlers)",
            type(handler).__name__,
            self.logger.name,
            level.token,
            removed,
        )

    @property
    def level(self) -> Severity:
        """Current threshold of the wrapped logger."""
        return Severity.from_levelno(self.logger.level)

    def snapshot(self) -> LoggerState:
        return LoggerState(handlers=tuple(self.logger.handlers), level=self.logger.level)

    def restore(self, state: LoggerState) -> None:
        """Put back the handlers and threshold captured by :meth:`snapshot`."""
        for existing in list(self.logger.handlers):
            self.logger.removeHandler(existing)
        for handler in state.handlers:
            self.logger.addHandler(handler)
        self.logger.setLevel(state.level)
        self.diagnostics.debug("Restored %d handlers on logger %r", len(state.handlers), self.logger.name)


DEFAULT_CONFIG = LoggingConfig()
