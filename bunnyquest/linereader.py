"""Read a text stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from typing import Iterator, Optional, TextIO

DEFAULT_BUFFER_SIZE = 64


def has_newline(text: Optional[str]) -> bool:
    """True when ``text`` holds a newline character; ``None`` holds none."""
    return text is not None and "\n" in text


class LineReader:
    """Hand out the lines of ``stream``, reading ``buffer_size`` characters at a time.

    Each line keeps its trailing newline; the last line of a stream that
    does not end in a newline is returned without one.
    """

    def __init__(self, stream: TextIO, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending = ""

    def read_line(self) -> Optional[str]:
        """Return the next line, or ``None`` once the stream is exhausted."""
        while not has_newline(self._pending):
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            self._pending += chunk
        if not self._pending:
            return None
        end = self._pending.find("\n")
        end = len(self._pending) if end < 0 else end + 1
        line, self._pending = self._pending[:end], self._pending[end:]
        return line

    def __iter__(self) -> Iterator[str]:
        while (line := self.read_line()) is not None:
            yield line