"""Byte-to-hex encoder with per-byte prefix and line wrapping."""

from dataclasses import dataclass
from typing import BinaryIO, Iterator, Optional

from hexstream.core.config import CodecConfig
from hexstream.core.sink import OutputSink
from hexstream.core.sources import DEFAULT_CHUNK_SIZE, iter_chunks
from hexstream.utils.encoding import ensure_bytes, to_hex_pair


@dataclass
class EncoderState:
    """Output column, counted in encoded bytes. Lives for one session."""

    column: int = 0


class HexEncoder:
    """
    Streaming hex encoder.

    Each input byte becomes prefix + two lowercase hex digits. When wrapping
    is enabled a line break follows every wrap_width encoded bytes. The
    column count lives in an EncoderState owned by the session, so calling
    encode_to() once per source behaves exactly like encoding the
    concatenation of all sources.

    Output is text as bytes. The prefix is encoded the way command line
    arguments are decoded (UTF-8 with surrogateescape), so undecodable
    argument bytes come out unchanged.
    """

    LINE_BREAK = b"\n"

    def __init__(self, config: CodecConfig, state: Optional[EncoderState] = None):
        self.config = config
        self.state = state if state is not None else EncoderState()
        prefix = ensure_bytes(config.prefix)
        # prefix + pair for every byte value
        self._table = [prefix + to_hex_pair(byte).encode("ascii") for byte in range(256)]

    def encode_chunk(self, chunk: bytes) -> bytes:
        """
        Encode one block of input, advancing the session column.

        Args:
            chunk: Raw input bytes

        Returns:
            bytes: Encoded text, with a line break at every wrap boundary
        """
        if not self.config.wraps and not self.config.prefix:
            return chunk.hex().encode("ascii")

        wraps = self.config.wraps
        wrap_width = self.config.wrap_width
        table = self._table
        state = self.state
        out = bytearray()
        for byte in chunk:
            out += table[byte]
            state.column += 1
            if wraps and state.column == wrap_width:
                state.column = 0
                out += self.LINE_BREAK
        return bytes(out)

    def iter_encode(self, stream: BinaryIO, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[bytes]:
        """
        Lazily encode a binary stream.

        Yields:
            bytes: Encoded text for each chunk read from the stream
        """
        for chunk in iter_chunks(stream, chunk_size):
            yield self.encode_chunk(chunk)

    def encode_to(self, stream: BinaryIO, sink: OutputSink, chunk_size: int = DEFAULT_CHUNK_SIZE) -> int:
        """
        Encode a stream into the sink.

        Args:
            stream: Binary source, read sequentially
            sink: Session output
            chunk_size: Bytes per read

        Returns:
            int: Number of input bytes encoded

        Raises:
            OSError: If reading the source or writing the sink fails
        """
        consumed = 0
        for chunk in iter_chunks(stream, chunk_size):
            sink.write(self.encode_chunk(chunk))
            consumed += len(chunk)
        return consumed
