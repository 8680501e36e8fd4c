#!/usr/bin/env python3
"""
Quick start guide for hexstream.

Run this to see the encoder and decoder in action.
"""

import io
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from hexstream import CodecConfig, StreamDriver, decode, encode
from hexstream.core.sink import OutputSink
from hexstream.core.sources import Source
from hexstream.exceptions import MalformedInputError, OddLengthError


def main():
    """Run a few encode/decode sessions."""

    print("=" * 70)
    print("HEXSTREAM QUICK START EXAMPLE")
    print("=" * 70)
    print()

    # Step 1: Plain encoding
    print("Step 1: Encode a message")
    print("-" * 70)
    message = b"Hello, hexstream!"
    text = encode(message)
    print(f"  Input:  {message!r}")
    print(f"  Output: {text!r}")
    print()

    # Step 2: Wrapping and prefixes
    print("Step 2: Wrap every 4 bytes, prefix each byte with '0x'")
    print("-" * 70)
    print(encode(message, CodecConfig(wrap_width=4, prefix="0x")))

    # Step 3: Decoding with whitespace tolerance
    print("Step 3: Decode spaced hex with --ignore-whitespaces semantics")
    print("-" * 70)
    spaced = "48 65 6c 6c 6f\r\n"
    print(f"  Input:  {spaced!r}")
    print(f"  Output: {decode(spaced, CodecConfig(ignore_whitespace=True))!r}")
    print()

    # Step 4: Several sources, one session
    print("Step 4: Two sources encoded as one session (wrap 3)")
    print("-" * 70)
    out = io.BytesIO()
    driver = StreamDriver(CodecConfig(wrap_width=3), OutputSink(out))
    report = driver.run([Source.from_bytes(b"ab"), Source.from_bytes(b"cde")])
    print(out.getvalue().decode())
    print(f"  Sources: {report.sources}, bytes in: {report.bytes_in}, bytes out: {report.bytes_out}")
    print()

    # Step 5: Errors
    print("Step 5: Malformed and odd-length input")
    print("-" * 70)
    for bad in ("zz", "abc"):
        try:
            decode(bad)
        except (MalformedInputError, OddLengthError) as e:
            print(f"  {bad!r}: {type(e).__name__}: {e}")
    print()


if __name__ == "__main__":
    main()
