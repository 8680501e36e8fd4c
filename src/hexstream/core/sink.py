"""Buffered output sink shared by every source in a session."""

from typing import BinaryIO, Optional


class OutputSink:
    """
    Append-only buffered writer over a binary stream.

    Output is collected in memory and written through to the underlying
    stream when the buffer reaches capacity or on flush(). The last byte
    handed to the sink is remembered across flushes so the driver can
    decide whether a trailing newline is still needed.
    """

    DEFAULT_CAPACITY = 8192  # bytes

    def __init__(self, stream: BinaryIO, capacity: int = DEFAULT_CAPACITY):
        if capacity < 1:
            raise ValueError("Sink capacity must be positive")

        self.stream = stream
        self.capacity = capacity
        self._buffer = bytearray()
        self._last_byte: Optional[int] = None
        self.bytes_written = 0

    def write(self, data: bytes) -> None:
        """
        Append data to the sink.

        Raises:
            OSError: If writing through to the underlying stream fails
        """
        if not data:
            return
        self._buffer += data
        self._last_byte = data[-1]
        self.bytes_written += len(data)
        if len(self._buffer) >= self.capacity:
            self.flush()

    @property
    def last_byte(self) -> Optional[int]:
        """Last byte ever written, or None if the sink is still empty."""
        return self._last_byte

    @property
    def pending(self) -> int:
        """Number of bytes buffered but not yet written through."""
        return len(self._buffer)

    def flush(self) -> None:
        """
        Write buffered bytes to the underlying stream and flush it.

        The buffer is only cleared once the write succeeded.
        """
        if self._buffer:
            self.stream.write(bytes(self._buffer))
            self._buffer.clear()
        self.stream.flush()

    def discard(self) -> None:
        """Drop buffered bytes without writing them."""
        self._buffer.clear()
