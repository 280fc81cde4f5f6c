"""Split a captured log stream back into individual statements."""

from __future__ import annotations

import re
from collections.abc import Iterator

from log_monitor.logging_utils import DEFAULT_LOGGER, LoggingManager
from log_monitor.types import LEVEL_TOKENS, LINE_SEPARATOR, CapturedStatement, Severity


def build_statement_pattern(line_separator: str = LINE_SEPARATOR) -> re.Pattern[str]:
    """Return the regular expression that delimits formatted records.

    A record is a level token, ``" - "``, then the shortest run of text up to a
    line separator that is followed by another ``LEVEL - `` prefix or by the
    end of the text. Message bodies may therefore span several lines, but a
    body line that itself starts with ``LEVEL - `` ends the record early.
    """

    tokens = "|".join(LEVEL_TOKENS)
    next_record = "|".join(f"{token} - " for token in LEVEL_TOKENS)
    return re.compile(
        f"({tokens}) - (.*?){re.escape(line_separator)}(?={next_record}|$)",
        re.DOTALL,
    )


class StatementParser:
    """Convert buffered log text into :class:`CapturedStatement` objects."""

    def __init__(
        self,
        line_separator: str = LINE_SEPARATOR,
        *,
        logger: LoggingManager = DEFAULT_LOGGER,
    ) -> None:
        self.line_separator = line_separator
        self.pattern = build_statement_pattern(line_separator)
        self.logger = logger

    def iter_statements(self, text: str) -> Iterator[CapturedStatement]:
        """Yield statements in the order they appear in ``text``."""
        for match in self.pattern.finditer(text):
            token, body = match.groups()
            yield CapturedStatement(severity=Severity[token], text=body)

    def parse(self, text: str) -> list[CapturedStatement]:
        """Return every statement found in ``text``; empty when none match."""
        statements = list(self.iter_statements(text))
        self.logger.debug("Parsed %d statements from %d characters", len(statements), len(text))
        return statements


DEFAULT_PARSER = StatementParser()


def parse_statements(text: str) -> list[CapturedStatement]:
    return DEFAULT_PARSER.parse(text)
