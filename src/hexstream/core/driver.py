"""Session driver: runs the encoder or decoder over ordered sources.

One StreamDriver is one session. It owns the session state (encoder column
or decoder pending nibble) and the output sink, feeds every source through
the same codec instance in order, and finishes the session:

    encode: append a trailing newline unless the output already ends with one
    decode: fail if an unpaired hex digit is left over

I/O failures are classified. A broken pipe means the downstream reader went
away and is reported as an outcome, not raised. Every other OSError becomes a
StreamIOError.
"""

import enum
import errno
import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from hexstream.core.config import CodecConfig
from hexstream.core.decoder import DecoderState, HexDecoder
from hexstream.core.encoder import EncoderState, HexEncoder
from hexstream.core.sink import OutputSink
from hexstream.core.sources import DEFAULT_CHUNK_SIZE, Source
from hexstream.exceptions import HexStreamException, StreamIOError
from hexstream.utils.encoding import NEWLINE

logger = logging.getLogger(__name__)


class FailureKind(str, enum.Enum):
    """Classification of an OSError raised during a session."""
    BROKEN_PIPE = "broken_pipe"
    IO_FAILURE = "io_failure"


class SessionOutcome(str, enum.Enum):
    """How a session ended when it did not raise."""
    COMPLETED = "completed"
    BROKEN_PIPE = "broken_pipe"


def classify_failure(error: OSError) -> FailureKind:
    """
    Decide whether an OSError is a closed downstream pipe.

    Args:
        error: The raised error

    Returns:
        FailureKind: BROKEN_PIPE for BrokenPipeError or EPIPE, else IO_FAILURE
    """
    if isinstance(error, BrokenPipeError) or getattr(error, "errno", None) == errno.EPIPE:
        return FailureKind.BROKEN_PIPE
    return FailureKind.IO_FAILURE


@dataclass
class SessionReport:
    """Summary of a finished session."""

    outcome: SessionOutcome
    sources: int = 0
    bytes_in: int = 0
    bytes_out: int = 0


class StreamDriver:
    """
    Runs one encode or decode session.

    Args:
        config: Codec configuration for the whole session
        sink: Output shared by every source
        decode: Decode instead of encode
        chunk_size: Bytes per read from each source
    """

    def __init__(
        self,
        config: CodecConfig,
        sink: OutputSink,
        decode: bool = False,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ):
        self.config = config
        self.sink = sink
        self.decode = decode
        self.chunk_size = chunk_size

        self.encoder: Optional[HexEncoder] = None
        self.decoder: Optional[HexDecoder] = None
        if decode:
            self.decoder = HexDecoder(config, DecoderState())
        else:
            self.encoder = HexEncoder(config, EncoderState())

        self._report = SessionReport(outcome=SessionOutcome.COMPLETED)

    def run(self, sources: Iterable[Source]) -> SessionReport:
        """
        Process all sources in order and finish the session.

        Args:
            sources: Inputs in processing order

        Returns:
            SessionReport: COMPLETED, or BROKEN_PIPE if the reader closed early

        Raises:
            MalformedInputError: If decoding hits an invalid character
            OddLengthError: If decoding ends with an unpaired digit
            StreamIOError: If a source or the sink fails for any reason
                other than a broken pipe
        """
        try:
            for source in sources:
                self._process(source)
            self._finish()
            self.sink.flush()
        except OSError as e:
            self.sink.discard()
            if classify_failure(e) is FailureKind.BROKEN_PIPE:
                logger.info("Output closed by reader, stopping")
                self._report.outcome = SessionOutcome.BROKEN_PIPE
                return self._report
            logger.debug(f"I/O failure: {e}")
            raise StreamIOError(f"I/O error: {e}") from e
        except HexStreamException:
            self.sink.discard()
            raise

        self._report.bytes_out = self.sink.bytes_written
        logger.info(
            f"{'Decoded' if self.decode else 'Encoded'} {self._report.bytes_in} bytes "
            f"from {self._report.sources} source(s), wrote {self._report.bytes_out} bytes"
        )
        return self._report

    def _process(self, source: Source) -> None:
        logger.debug(f"Processing source {source.name}")
        with source.open() as stream:
            if self.decoder is not None:
                produced = self.decoder.decode_to(stream, self.sink, self.chunk_size)
                self._report.bytes_in = self.decoder.state.offset
                logger.debug(f"Decoded {produced} bytes from {source.name}")
            else:
                consumed = self.encoder.encode_to(stream, self.sink, self.chunk_size)
                self._report.bytes_in += consumed
                logger.debug(f"Encoded {consumed} bytes from {source.name}")
        self._report.sources += 1

    def _finish(self) -> None:
        if self.decoder is not None:
            self.decoder.finish()
            return

        last = self.sink.last_byte
        if last is not None and last != NEWLINE:
            self.sink.write(b"\n")
