"""Custom exceptions for the hexstream codec."""

from typing import Optional


class HexStreamException(Exception):
    """Base exception for all hexstream errors."""
    pass


# Codec Errors
class CodecError(HexStreamException):
    """Base exception for encode/decode errors."""
    pass


class MalformedInputError(CodecError):
    """Raised when a decode character is neither a hex digit nor an ignorable separator."""

    def __init__(self, character: str, offset: Optional[int] = None):
        self.character = character
        self.offset = offset
        message = f"not ascii hexdigit: {character!r}"
        if offset is not None:
            message += f" at offset {offset}"
        super().__init__(message)


class OddLengthError(CodecError):
    """Raised when a decode session ends with an unpaired hex digit."""

    def __init__(self, message: str = "Odd length"):
        super().__init__(message)


# Stream Errors
class StreamIOError(HexStreamException):
    """Raised when reading a source or writing the sink fails."""
    pass


# Configuration Errors
class ConfigurationError(HexStreamException):
    """Raised when codec configuration is invalid."""
    pass
