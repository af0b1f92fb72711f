"""Reading a stream one line at a time with a fixed-size read buffer."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, Optional


class LineReader(Generic[AnyStr]):
    """Return successive lines of a stream, each keeping its newline.

    The stream is read ``buffer_size`` characters (or bytes) at a time; text
    read beyond the end of a line is kept for the next call.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = 1) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None
        self._newline: Optional[AnyStr] = None

    def _separator(self, data: AnyStr) -> AnyStr:
        """Return the newline of the stream's type, learnt from its first data."""
        if self._newline is None:
            if isinstance(data, (bytes, bytearray)):
                self._newline = b"\n"  # type: ignore[assignment]
            else:
                self._newline = "\n"  # type: ignore[assignment]
        return self._newline  # type: ignore[return-value]

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or None when the stream has no more data.

        The last line is returned without a newline if the stream does not
        end with one. A failing read discards any buffered text and raises.
        """
        pending = self._pending
        while pending is None or self._separator(pending) not in pending:
            try:
                chunk = self._stream.read(self._buffer_size)
            except Exception:
                self._pending = None
                raise
            if not chunk:
                break
            pending = chunk if pending is None else pending + chunk
        if not pending:
            self._pending = None
            return None
        end = pending.find(self._separator(pending))
        if end < 0:
            self._pending = None
            return pending
        self._pending = pending[end + 1:]
        return pending[:end + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line