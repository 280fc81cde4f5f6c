"""Exceptions raised by the log monitor."""

from __future__ import annotations


class InvalidArgument(ValueError):
    """A required argument was missing or could not be interpreted."""


class PatternSyntaxError(ValueError):
    """Raw pattern text could not be compiled as a regular expression."""

    def __init__(self, pattern: str, detail: str) -> None:
        super().__init__(f"invalid pattern {pattern!r}: {detail}")
        self.pattern = pattern
        self.detail = detail
