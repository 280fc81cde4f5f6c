"""Shared enums and dataclasses for captured log statements."""

from __future__ import annotations

import dataclasses
import enum
import locale
import logging
import os
import re

from log_monitor.errors import InvalidArgument

LINE_SEPARATOR = os.linesep

# Platform default text encoding, used for both writing and reading the buffer.
ENCODING = locale.getpreferredencoding(False)


class Severity(enum.IntEnum):
    """Ordered log levels, valued like their stdlib logging counterparts."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARN = logging.WARNING
    ERROR = logging.ERROR
    FATAL = logging.CRITICAL

    def __str__(self) -> str:
        return self.name

    @property
    def token(self) -> str:
        """Single-token text used in formatted output."""
        return self.name

    @classmethod
    def parse(cls, token: str | None) -> Severity:
        """Return the severity named by ``token``.

        Matching is case-insensitive and also accepts the stdlib spellings
        ``WARNING`` and ``CRITICAL``.
        """

        if token is None:
            raise InvalidArgument("severity token cannot be None")

        name = token.strip().upper()
        name = _STDLIB_ALIASES.get(name, name)
        try:
            return cls[name]
        except KeyError:
            raise InvalidArgument(f"unknown severity {token!r}") from None

    @classmethod
    def coerce(cls, value: Severity | int | str | None) -> Severity:
        """Return ``value`` as a severity.

        Accepts members, their exact stdlib level numbers, or tokens understood
        by :meth:`parse`. Anything else raises :class:`InvalidArgument`.
        """

        if isinstance(value, cls):
            return value
        if isinstance(value, str) or value is None:
            return cls.parse(value)
        try:
            return cls(value)
        except ValueError:
            raise InvalidArgument(f"{value!r} is not one of {', '.join(LEVEL_TOKENS)}") from None

    @classmethod
    def from_levelno(cls, levelno: int) -> Severity:
        """Map a stdlib level number onto the closest severity at or below it."""

        selected = cls.DEBUG
        for severity in cls:
            if severity.value <= levelno:
                selected = severity
        return selected


_STDLIB_ALIASES: dict[str, str] = {
    "WARNING": "WARN",
    "CRITICAL": "FATAL",
}

LEVEL_TOKENS: tuple[str, ...] = tuple(severity.token for severity in Severity)


@dataclasses.dataclass(frozen=True)
class CapturedStatement:
    """A single parsed log statement."""

    severity: Severity
    text: str

    def __str__(self) -> str:
        return f"{self.severity.token} - {self.text}"

    def matches(self, pattern: re.Pattern[str]) -> bool:
        """Return True when ``pattern`` matches the whole statement text."""
        return pattern.fullmatch(self.text) is not None
