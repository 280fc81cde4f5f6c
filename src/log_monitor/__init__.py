"""Capture stdlib logging output in memory and query it from tests."""

from log_monitor.errors import InvalidArgument, PatternSyntaxError
from log_monitor.monitor import LogMonitor
from log_monitor.sink import CaptureSink
from log_monitor.types import CapturedStatement, Severity

__all__: list[str] = [
    "CaptureSink",
    "CapturedStatement",
    "InvalidArgument",
    "LogMonitor",
    "PatternSyntaxError",
    "Severity",
]
