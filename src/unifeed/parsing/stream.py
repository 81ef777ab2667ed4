"""Stream wrappers for peeking at a document without losing bytes.

Feed detection has to read the start of a stream before the matching
parser can be chosen. ``RecordingReader`` keeps a copy of everything
read through it and ``replay`` splices that copy back in front of the
unread remainder.
"""

from typing import IO, Any


class RecordingReader:
    """Read-through wrapper that records every chunk it returns."""

    def __init__(self, stream: IO[Any]) -> None:
        self._stream = stream
        self._chunks: list[Any] = []

    def read(self, size: int = -1) -> Any:
        data = self._stream.read(size)
        if data:
            self._chunks.append(data)
        return data

    @property
    def captured(self) -> Any:
        """Everything read so far, or None if nothing was read."""
        if not self._chunks:
            return None
        return self._chunks[0][:0].join(self._chunks)

    def replay(self) -> "ReplayReader":
        """Return a reader yielding the captured data, then the rest of the stream."""
        return ReplayReader(self.captured, self._stream)


class ReplayReader:
    """Reader that serves a buffered prefix before delegating to a stream."""

    def __init__(self, prefix: Any, stream: IO[Any]) -> None:
        self._prefix = prefix
        self._stream = stream

    def read(self, size: int = -1) -> Any:
        if not self._prefix:
            return self._stream.read(size)

        if size is None or size < 0:
            data = self._prefix + self._stream.read()
            self._prefix = None
            return data

        data, self._prefix = self._prefix[:size], self._prefix[size:]
        return data
