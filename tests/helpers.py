"""Reusable test utilities and recording stubs for the test suite."""


class RecordingLogger:
    """In-memory stand-in for LoggingManager capturing diagnostics."""

    def __init__(self):
        self.messages: list[str] = []
        self.setup_calls: list[bool] = []

    def setup(self, verbose: bool) -> None:
        self.setup_calls.append(verbose)

    def debug(self, msg: str, *args: object) -> None:
        self.messages.append(f"DEBUG:{msg % args if args else msg}")


class FailingStream:
    """Binary stream whose writes always fail."""

    def __init__(self):
        self.attempts = 0

    def write(self, data: bytes) -> int:
        self.attempts += 1
        raise OSError("disk full")
