"""Hex digit tables and byte classification helpers."""

from typing import List, Optional, Union

NEWLINE = 0x0A

# Lowercase digits, indexed by nibble value
HEX_DIGITS = "0123456789abcdef"

# Space, tab, LF, form feed and CR. Vertical tab is not included
ASCII_WHITESPACE = frozenset(b" \t\n\x0c\r")


def _build_nibble_table() -> List[Optional[int]]:
    table: List[Optional[int]] = [None] * 256
    for value, digit in enumerate(HEX_DIGITS):
        table[ord(digit)] = value
        table[ord(digit.upper())] = value
    return table


NIBBLE_VALUES = _build_nibble_table()


def from_hex_digit(char: int) -> Optional[int]:
    """
    Convert an ASCII hex digit to its nibble value.

    Args:
        char: Byte value of the character

    Returns:
        Optional[int]: Value 0-15, or None if the character is not a hex digit
    """
    return NIBBLE_VALUES[char]


def is_ascii_whitespace(char: int) -> bool:
    """Check whether a byte value is ASCII whitespace."""
    return char in ASCII_WHITESPACE


def to_hex_pair(byte: int) -> str:
    """
    Convert a byte to its two-character lowercase hex representation.

    High nibble first.
    """
    return HEX_DIGITS[byte >> 4] + HEX_DIGITS[byte & 0xF]


def ensure_bytes(data: Union[bytes, bytearray, str]) -> bytes:
    """
    Ensure data is in bytes format.

    Args:
        data: Bytes or string

    Returns:
        bytes: Data as bytes. Strings are UTF-8 encoded with surrogateescape,
            so command line arguments map back to their original bytes
    """
    if isinstance(data, bytes):
        return data
    elif isinstance(data, bytearray):
        return bytes(data)
    elif isinstance(data, str):
        return data.encode('utf-8', 'surrogateescape')
    else:
        raise TypeError(f"Expected bytes or str, got {type(data)}")
