"""Byte sources for a codec session: stdin, files and inline strings."""

import io
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from typing import BinaryIO, Iterator, List, Optional, Sequence, Union

from hexstream.utils.encoding import ensure_bytes

STDIN = "-"
DEFAULT_CHUNK_SIZE = 64 * 1024  # bytes per read()


def iter_chunks(stream: BinaryIO, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[bytes]:
    """Read a binary stream sequentially until EOF."""
    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            return
        yield chunk


@dataclass(frozen=True)
class Source:
    """
    One ordered input of a session.

    Exactly one of data or stream may be set. With neither, name is a
    filesystem path, or STDIN for standard input. Files are opened only
    when the driver reaches them and closed before the next source.
    """

    name: str
    data: Optional[bytes] = None
    stream: Optional[BinaryIO] = None

    @classmethod
    def from_bytes(cls, data: Union[bytes, bytearray, str], name: str = "<string>") -> "Source":
        return cls(name=name, data=ensure_bytes(data))

    @classmethod
    def from_stream(cls, stream: BinaryIO, name: str = "<stream>") -> "Source":
        return cls(name=name, stream=stream)

    @property
    def is_stdin(self) -> bool:
        return self.data is None and self.stream is None and self.name == STDIN

    @contextmanager
    def open(self) -> Iterator[BinaryIO]:
        """
        Yield a readable binary stream for this source.

        Streams the source does not own (stdin, caller-supplied) are left open.

        Raises:
            OSError: If the file cannot be opened
        """
        if self.data is not None:
            yield io.BytesIO(self.data)
        elif self.stream is not None:
            yield self.stream
        elif self.is_stdin:
            yield sys.stdin.buffer
        else:
            with open(self.name, "rb") as f:
                yield f


def build_sources(paths: Optional[Sequence[str]] = None, inline: Optional[str] = None) -> List[Source]:
    """
    Turn CLI inputs into an ordered source list.

    Args:
        paths: File paths in order; STDIN stands for standard input
        inline: Literal string to process instead of any file

    Returns:
        List[Source]: Sources in processing order. Defaults to stdin alone.
    """
    if inline is not None:
        return [Source.from_bytes(inline)]
    if not paths:
        return [Source(STDIN)]
    return [Source(path) for path in paths]
