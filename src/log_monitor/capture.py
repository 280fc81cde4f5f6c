"""Logging handler and formatter that feed a :class:`CaptureSink`."""

from __future__ import annotations

import logging

from log_monitor.sink import CaptureSink
from log_monitor.types import LINE_SEPARATOR, Severity

RECORD_FORMAT = "%(message)s"


class SeverityFormatter(logging.Formatter):
    """Render records as ``LEVEL - message`` using the five severity tokens.

    The token is prefixed here rather than stored on the record, so records
    shared with other handlers are left untouched.
    """

    def __init__(self) -> None:
        super().__init__(RECORD_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        token = Severity.from_levelno(record.levelno).token
        return f"{token} - {super().format(record)}"


class CaptureHandler(logging.Handler):
    """Write every formatted record, plus the line separator, to a sink as bytes."""

    terminator = LINE_SEPARATOR

    def __init__(self, sink: CaptureSink, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self.sink = sink
        self.setFormatter(SeverityFormatter())

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record) + self.terminator
            self.sink.write(msg.encode(self.sink.encoding, errors="replace"))
        except RecursionError:
            raise
        except Exception:  # noqa: BLE001 - stdlib handlers report via handleError
            self.handleError(record)
