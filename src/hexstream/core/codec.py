"""One-shot encode/decode over in-memory values."""

import io
from typing import Iterable, List, Optional, Union

from hexstream.core.config import CodecConfig
from hexstream.core.driver import StreamDriver
from hexstream.core.sink import OutputSink
from hexstream.core.sources import Source

Data = Union[bytes, bytearray, str]


def _as_sources(parts: Iterable[Data]) -> List[Source]:
    return [Source.from_bytes(part, name=f"<part {i}>") for i, part in enumerate(parts)]


def encode_parts(parts: Iterable[Data], config: Optional[CodecConfig] = None) -> str:
    """
    Encode several values as one session.

    Wrap columns carry over from one part to the next, and the result ends
    with a newline unless it is empty.

    Args:
        parts: Values to encode in order (strings are UTF-8 encoded)
        config: Codec configuration, defaults to CodecConfig()

    Returns:
        str: Encoded text
    """
    out = io.BytesIO()
    StreamDriver(config or CodecConfig(), OutputSink(out)).run(_as_sources(parts))
    return out.getvalue().decode("utf-8", "surrogateescape")


def decode_parts(parts: Iterable[Data], config: Optional[CodecConfig] = None) -> bytes:
    """
    Decode several hex texts as one session.

    A digit pair may be split between parts; the odd-length check runs once
    after the last part.

    Raises:
        MalformedInputError: If a part contains an invalid character
        OddLengthError: If the total digit count is odd
    """
    out = io.BytesIO()
    StreamDriver(config or CodecConfig(), OutputSink(out), decode=True).run(_as_sources(parts))
    return out.getvalue()


def encode(data: Data, config: Optional[CodecConfig] = None) -> str:
    """
    Encode a single value to hex text.

    >>> encode(b"\\xab")
    'ab\\n'
    """
    return encode_parts([data], config)


def decode(text: Data, config: Optional[CodecConfig] = None) -> bytes:
    """
    Decode hex text to bytes.

    >>> decode("4869")
    b'Hi'
    """
    return decode_parts([text], config)
