"""Hex-to-byte decoder with whitespace filtering and odd-length detection."""

from dataclasses import dataclass
from typing import BinaryIO, Iterator, Optional

from hexstream.core.config import CodecConfig
from hexstream.core.sink import OutputSink
from hexstream.core.sources import DEFAULT_CHUNK_SIZE, iter_chunks
from hexstream.exceptions import MalformedInputError, OddLengthError
from hexstream.utils.encoding import NEWLINE, from_hex_digit, is_ascii_whitespace


@dataclass
class DecoderState:
    """
    Pairing state for one decode session.

    Attributes:
        pending: Value of a high nibble still waiting for its low nibble.
            At most one digit is ever pending.
        offset: Input characters consumed so far, across all sources
    """

    pending: Optional[int] = None
    offset: int = 0

    @property
    def has_pending(self) -> bool:
        return self.pending is not None


class HexDecoder:
    """
    Streaming hex decoder.

    Digits are paired high nibble first and may be upper or lower case.
    Line-feeds are always skipped; other ASCII whitespace is skipped only
    with ignore_whitespace. Anything else aborts decoding at once.

    The pending nibble survives between decode_to() calls, so a pair may be
    split across sources. Call finish() once after the last source.
    """

    def __init__(self, config: CodecConfig, state: Optional[DecoderState] = None):
        self.config = config
        self.state = state if state is not None else DecoderState()

    def _is_skipped(self, char: int) -> bool:
        if char == NEWLINE:
            return True
        return self.config.ignore_whitespace and is_ascii_whitespace(char)

    def iter_decode(self, stream: BinaryIO, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[int]:
        """
        Lazily decode a binary stream of hex characters.

        Yields:
            int: Each reconstructed byte, as soon as its second digit is read

        Raises:
            MalformedInputError: On the first character that is neither a hex
                digit nor skippable; nothing after it is read
        """
        state = self.state
        for chunk in iter_chunks(stream, chunk_size):
            for char in chunk:
                offset = state.offset
                state.offset += 1
                if self._is_skipped(char):
                    continue

                value = from_hex_digit(char)
                if value is None:
                    raise MalformedInputError(chr(char), offset)

                if state.pending is None:
                    state.pending = value
                else:
                    hi = state.pending
                    state.pending = None
                    yield hi * 16 + value

    def decode_to(self, stream: BinaryIO, sink: OutputSink, chunk_size: int = DEFAULT_CHUNK_SIZE) -> int:
        """
        Decode a stream into the sink.

        Args:
            stream: Binary source of hex characters
            sink: Session output
            chunk_size: Bytes per read

        Returns:
            int: Number of bytes written to the sink

        Raises:
            MalformedInputError: If an invalid character is found
            OSError: If reading the source or writing the sink fails
        """
        produced = 0
        for byte in self.iter_decode(stream, chunk_size):
            sink.write(bytes((byte,)))
            produced += 1
        return produced

    def finish(self) -> None:
        """
        Check that the session ended on a digit pair boundary.

        Raises:
            OddLengthError: If a high nibble is still pending
        """
        if self.state.has_pending:
            raise OddLengthError()
