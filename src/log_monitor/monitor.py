"""Facade that captures logging output and answers queries about it."""

from __future__ import annotations

import re
from typing import Any, BinaryIO

from rich.console import Console

from log_monitor.capture import CaptureHandler
from log_monitor.errors import InvalidArgument, PatternSyntaxError
from log_monitor.logging_config import DEFAULT_CONFIG, LoggingConfig
from log_monitor.logging_utils import DEFAULT_LOGGER, LoggingManager
from log_monitor.panel import print_statements_panel
from log_monitor.parser import DEFAULT_PARSER, StatementParser
from log_monitor.sink import CaptureSink
from log_monitor.types import LINE_SEPARATOR, CapturedStatement, Severity

StatementQuery = str | re.Pattern[str]

# Marks "no level given" for count(), distinct from an explicit None.
ALL_LEVELS = object()


def compile_pattern(raw_pattern: str) -> re.Pattern[str]:
    """Compile ``raw_pattern``, raising :class:`PatternSyntaxError` on failure."""
    try:
        return re.compile(raw_pattern)
    except re.error as exc:
        raise PatternSyntaxError(raw_pattern, str(exc)) from exc


class LogMonitor:
    """Capture everything logged at or above a severity and query it.

    Construction rewires the target logger (the root logger by default) so a
    fresh in-memory sink is its only destination; a later monitor replaces an
    earlier one. Every query re-parses the whole buffer, so results always
    reflect what has been logged up to the call.

    ``level`` may be a :class:`Severity`, its exact stdlib level number or a
    token such as ``"WARN"``; anything else raises :class:`InvalidArgument`.

    Not thread-safe: use from one test thread at a time.
    """

    def __init__(
        self,
        level: Severity | int | str | None = Severity.DEBUG,
        *,
        logging_config: LoggingConfig = DEFAULT_CONFIG,
        parser: StatementParser = DEFAULT_PARSER,
        logger: LoggingManager = DEFAULT_LOGGER,
    ) -> None:
        if level is None:
            raise InvalidArgument("level parameter cannot be None")
        threshold = Severity.coerce(level)

        self.logging_config = logging_config
        self.parser = parser
        self.logger = logger
        self._sink = CaptureSink()
        self.handler = CaptureHandler(self._sink)

        logging_config.install(self.handler, threshold)
        self.logger.debug("Log monitor capturing at %s and above", threshold.token)

    @classmethod
    def debug_instance(cls, **kwargs: Any) -> LogMonitor:
        """Capture DEBUG, INFO, WARN, ERROR and FATAL statements."""
        return cls(Severity.DEBUG, **kwargs)

    @classmethod
    def info_instance(cls, **kwargs: Any) -> LogMonitor:
        """Capture INFO, WARN, ERROR and FATAL statements."""
        return cls(Severity.INFO, **kwargs)

    @classmethod
    def warn_instance(cls, **kwargs: Any) -> LogMonitor:
        """Capture WARN, ERROR and FATAL statements."""
        return cls(Severity.WARN, **kwargs)

    @classmethod
    def error_instance(cls, **kwargs: Any) -> LogMonitor:
        """Capture ERROR and FATAL statements."""
        return cls(Severity.ERROR, **kwargs)

    @classmethod
    def fatal_instance(cls, **kwargs: Any) -> LogMonitor:
        """Capture FATAL statements only."""
        return cls(Severity.FATAL, **kwargs)

    @property
    def level(self) -> Severity:
        """Threshold currently set on the wired logger."""
        return self.logging_config.level

    @property
    def sink(self) -> CaptureSink:
        return self._sink

    # -- queries -----------------------------------------------------------

    def statements(self) -> list[CapturedStatement]:
        """Return every captured statement in emission order."""
        return self.parser.parse(self._sink.text())

    def statements_at(self, level: Severity | None) -> list[str]:
        """Return the text of statements logged at exactly ``level``."""
        return [statement.text for statement in self.statements() if statement.severity == level]

    def statements_matching(
        self,
        level: Severity | None,
        pattern: StatementQuery | None,
    ) -> list[str]:
        """Return ``level`` statements whose whole text matches ``pattern``.

        ``pattern`` may be compiled or raw pattern text. Raw text that does not
        compile raises :class:`PatternSyntaxError`; a missing level or pattern
        gives an empty list.
        """

        if pattern is None:
            return []
        if isinstance(pattern, str):
            pattern = compile_pattern(pattern)
        if level is None:
            return []

        return [text for text in self.statements_at(level) if pattern.fullmatch(text) is not None]

    def debug_statements(self) -> list[str]:
        return self.statements_at(Severity.DEBUG)

    def info_statements(self) -> list[str]:
        return self.statements_at(Severity.INFO)

    def warn_statements(self) -> list[str]:
        return self.statements_at(Severity.WARN)

    def error_statements(self) -> list[str]:
        return self.statements_at(Severity.ERROR)

    def fatal_statements(self) -> list[str]:
        return self.statements_at(Severity.FATAL)

    def count(self, level: Severity | None | object = ALL_LEVELS) -> int:
        """Return how many statements were captured, optionally at one level.

        Omitting ``level`` counts every statement; an explicit ``None`` counts
        nothing, like :meth:`statements_at`.
        """
        if level is ALL_LEVELS:
            return len(self.statements())
        return len(self.statements_at(level))

    def has_statements(self, level: Severity | None) -> bool:
        return len(self.statements_at(level)) > 0

    def is_statement(self, statement: StatementQuery | None, level: Severity | None = None) -> bool:
        """Return True when a captured statement equals or matches ``statement``.

        Plain strings are compared for exact equality; compiled patterns must
        match the whole text. Without ``level`` every severity is searched.
        """

        if statement is None:
            return False

        if level is None:
            if isinstance(statement, re.Pattern):
                return any(captured.matches(statement) for captured in self.statements())
            return any(captured.text == statement for captured in self.statements())

        if isinstance(statement, re.Pattern):
            return bool(self.statements_matching(level, statement))
        return statement in self.statements_at(level)

    def is_debug_statement(self, statement: StatementQuery) -> bool:
        return self.is_statement(statement, Severity.DEBUG)

    def is_info_statement(self, statement: StatementQuery) -> bool:
        return self.is_statement(statement, Severity.INFO)

    def is_warn_statement(self, statement: StatementQuery) -> bool:
        return self.is_statement(statement, Severity.WARN)

    def is_error_statement(self, statement: StatementQuery) -> bool:
        return self.is_statement(statement, Severity.ERROR)

    def is_fatal_statement(self, statement: StatementQuery) -> bool:
        return self.is_statement(statement, Severity.FATAL)

    # -- debugging dumps ---------------------------------------------------

    def _selected(self, level: Severity | None) -> list[CapturedStatement]:
        statements = self.statements()
        if level is None:
            return statements
        return [statement for statement in statements if statement.severity == level]

    def dump_to_stderr(self, level: Severity | None = None, *, console: Console | None = None) -> None:
        """Write ``SEVERITY - text`` lines to stderr, optionally for one level.

        Lines are written to the console's file unrendered, so tabs and control
        characters reach stderr exactly as captured.
        """
        console = console or Console(stderr=True)
        selected = self._selected(level)
        for statement in selected:
            console.file.write(str(statement) + LINE_SEPARATOR)
        console.file.flush()
        self.logger.debug("Dumped %d statements to stderr", len(selected))

    def dump_to_stream(self, stream: BinaryIO, level: Severity | None = None) -> None:
        """Write ``SEVERITY - text`` lines as bytes to ``stream``.

        Errors raised by the stream propagate to the caller.
        """

        selected = self._selected(level)
        separator = LINE_SEPARATOR.encode(self._sink.encoding)
        for statement in selected:
            stream.write(str(statement).encode(self._sink.encoding, errors="replace"))
            stream.write(separator)
        self.logger.debug("Dumped %d statements to %r", len(selected), stream)

    def print_panel(self, level: Severity | None = None, *, console: Console | None = None) -> None:
        """Render the captured statements as a rich table."""
        title = "Captured log statements" if level is None else f"Captured {level.token} statements"
        print_statements_panel(self._selected(level), console=console, title=title)
