"""Tests for the streaming hex decoder."""

import io

import pytest
from hexstream.core.config import CodecConfig
from hexstream.core.decoder import DecoderState, HexDecoder
from hexstream.exceptions import CodecError, MalformedInputError, OddLengthError


def _decode(text: bytes, **config) -> bytes:
    decoder = HexDecoder(CodecConfig(**config))
    result = bytes(decoder.iter_decode(io.BytesIO(text)))
    decoder.finish()
    return result


class TestPairing:
    """Tests for digit pairing."""

    def test_basic(self):
        assert _decode(b"4869") == b"Hi"

    def test_empty(self):
        assert _decode(b"") == b""

    def test_high_nibble_first(self):
        assert _decode(b"f0") == b"\xf0"

    def test_case_insensitive(self):
        """Test that upper, lower and mixed case decode identically."""
        assert _decode(b"AB") == _decode(b"ab") == _decode(b"Ab") == b"\xab"

    def test_pending_digit(self):
        """Test that a lone digit is held, not emitted."""
        state = DecoderState()
        decoder = HexDecoder(CodecConfig(), state)

        assert list(decoder.iter_decode(io.BytesIO(b"a"))) == []
        assert state.pending == 0xA
        assert state.has_pending

    def test_pair_split_across_sources(self, output, sink):
        """Test that the pending digit carries over to the next source."""
        decoder = HexDecoder(CodecConfig())

        assert decoder.decode_to(io.BytesIO(b"a"), sink) == 0
        assert decoder.decode_to(io.BytesIO(b"bcd"), sink) == 2
        decoder.finish()
        sink.flush()

        assert output.getvalue() == b"\xab\xcd"
        assert decoder.state.pending is None


class TestOddLength:
    """Tests for odd digit counts."""

    def test_single_digit(self):
        with pytest.raises(OddLengthError, match="Odd length"):
            _decode(b"a")

    def test_three_digits(self):
        with pytest.raises(OddLengthError):
            _decode(b"abc")

    def test_odd_length_is_codec_error(self):
        assert issubclass(OddLengthError, CodecError)

    def test_finish_checks_session_not_source(self):
        """Test that finish() only fails if the whole session is odd."""
        decoder = HexDecoder(CodecConfig())
        list(decoder.iter_decode(io.BytesIO(b"a")))
        list(decoder.iter_decode(io.BytesIO(b"b")))

        decoder.finish()


class TestMalformedInput:
    """Tests for invalid characters."""

    def test_invalid_character(self):
        """Test that 'zz' fails on the first 'z'."""
        with pytest.raises(MalformedInputError, match="'z'") as exc_info:
            _decode(b"zz")

        assert exc_info.value.character == "z"
        assert exc_info.value.offset == 0

    def test_message(self):
        with pytest.raises(MalformedInputError) as exc_info:
            _decode(b"abzz")

        assert str(exc_info.value) == "not ascii hexdigit: 'z' at offset 2"

    def test_stops_at_invalid_character(self):
        """Test that no input after the invalid character is read."""
        stream = io.BytesIO(b"abz123")
        decoder = HexDecoder(CodecConfig())

        with pytest.raises(MalformedInputError):
            list(decoder.iter_decode(stream, chunk_size=1))

        assert stream.tell() == 3
        assert decoder.state.offset == 3

    def test_bytes_before_error_are_yielded(self):
        decoder = HexDecoder(CodecConfig())
        produced = []

        with pytest.raises(MalformedInputError):
            for byte in decoder.iter_decode(io.BytesIO(b"4869!")):
                produced.append(byte)

        assert bytes(produced) == b"Hi"

    def test_non_ascii_byte(self):
        with pytest.raises(MalformedInputError) as exc_info:
            _decode(b"\xff")

        assert exc_info.value.character == "\xff"

    def test_offset_spans_sources(self):
        decoder = HexDecoder(CodecConfig())
        list(decoder.iter_decode(io.BytesIO(b"ab\n")))

        with pytest.raises(MalformedInputError) as exc_info:
            list(decoder.iter_decode(io.BytesIO(b"cg")))

        assert exc_info.value.offset == 4


class TestWhitespace:
    """Tests for separator handling."""

    @pytest.mark.parametrize("ignore_whitespace", [False, True])
    def test_newline_always_ignored(self, ignore_whitespace):
        """Test that line-feed is skipped regardless of the flag."""
        assert _decode(b"a\nb", ignore_whitespace=ignore_whitespace) == _decode(b"ab")

    def test_space_rejected_by_default(self):
        """Test that 'a b1' fails on the space without tolerance."""
        with pytest.raises(MalformedInputError, match="' '") as exc_info:
            _decode(b"a b1")

        assert exc_info.value.offset == 1

    @pytest.mark.parametrize("char", [b"\t", b"\r", b"\x0c"])
    def test_other_whitespace_rejected_by_default(self, char):
        with pytest.raises(MalformedInputError):
            _decode(b"ab" + char + b"cd")

    def test_space_ignored_with_tolerance(self):
        assert _decode(b"a b", ignore_whitespace=True) == b"\xab"

    def test_whitespace_is_elided(self):
        """Test that whitespace never separates a pair."""
        assert _decode(b"a b ", ignore_whitespace=True) == _decode(b"ab", ignore_whitespace=True)

    def test_crlf_with_tolerance(self):
        assert _decode(b"dead\r\nbeef\r\n", ignore_whitespace=True) == b"\xde\xad\xbe\xef"

    def test_mixed_whitespace_with_tolerance(self):
        assert _decode(b" 0\t1 \x0c02\r\n", ignore_whitespace=True) == b"\x01\x02"

    def test_vertical_tab_not_whitespace(self):
        with pytest.raises(MalformedInputError):
            _decode(b"ab\x0bcd", ignore_whitespace=True)

    def test_crlf_rejected_by_default(self):
        """Test that only the line-feed of CRLF is ignored by default."""
        with pytest.raises(MalformedInputError, match="'\\\\r'"):
            _decode(b"ab\r\ncd")
