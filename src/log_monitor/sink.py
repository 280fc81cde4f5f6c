"""In-memory byte sink that receives formatted log records."""

from __future__ import annotations

from log_monitor.types import ENCODING


class CaptureSink:
    """Append-only byte buffer readable in full at any time.

    There is no size cap and no locking: one writer (the logging handler) and
    one reader (the monitor's queries) are expected, on the same thread.
    """

    def __init__(self, encoding: str = ENCODING) -> None:
        self.encoding = encoding
        self._buffer = bytearray()

    def write(self, data: bytes) -> int:
        """Append ``data`` and return the number of bytes written."""
        self._buffer.extend(data)
        return len(data)

    def getvalue(self) -> bytes:
        return bytes(self._buffer)

    def text(self) -> str:
        """Return the buffered bytes decoded as text."""
        return self._buffer.decode(self.encoding, errors="replace")

    def __len__(self) -> int:
        return len(self._buffer)
