"""Main package initialization."""

__version__ = "0.1.0"
__author__ = "hexstream developers"
__description__ = "Streaming hexadecimal encoder/decoder"

from .core.config import CodecConfig
from .core.encoder import HexEncoder, EncoderState
from .core.decoder import HexDecoder, DecoderState
from .core.driver import StreamDriver, SessionOutcome
from .core.codec import encode, decode

__all__ = [
    "CodecConfig",
    "HexEncoder",
    "EncoderState",
    "HexDecoder",
    "DecoderState",
    "StreamDriver",
    "SessionOutcome",
    "encode",
    "decode",
]
