"""Streaming hex codec core."""

from hexstream.core.config import CodecConfig
from hexstream.core.encoder import EncoderState, HexEncoder
from hexstream.core.decoder import DecoderState, HexDecoder
from hexstream.core.sink import OutputSink
from hexstream.core.sources import Source, build_sources
from hexstream.core.driver import (
    FailureKind,
    SessionOutcome,
    SessionReport,
    StreamDriver,
    classify_failure,
)
from hexstream.core.codec import encode, decode, encode_parts, decode_parts

__all__ = [
    "CodecConfig",
    "EncoderState",
    "HexEncoder",
    "DecoderState",
    "HexDecoder",
    "OutputSink",
    "Source",
    "build_sources",
    "FailureKind",
    "SessionOutcome",
    "SessionReport",
    "StreamDriver",
    "classify_failure",
    "encode",
    "decode",
    "encode_parts",
    "decode_parts",
]
