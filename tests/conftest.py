"""Pytest configuration and fixtures."""

import errno
import io
import os

import pytest
import sys
from pathlib import Path

# Add src to path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from hexstream.core.config import CodecConfig
from hexstream.core.sink import OutputSink


class BrokenPipeStream:
    """Binary stream whose reader has gone away."""

    def __init__(self):
        self.write_attempts = 0

    def write(self, data):
        self.write_attempts += 1
        raise BrokenPipeError(errno.EPIPE, "Broken pipe")

    def flush(self):
        pass


class FailingStream:
    """Binary stream that fails every write with a non-pipe error."""

    def write(self, data):
        raise OSError(errno.ENOSPC, "No space left on device")

    def flush(self):
        pass


@pytest.fixture
def output():
    """Fixture providing an in-memory binary output stream."""
    return io.BytesIO()


@pytest.fixture
def sink(output):
    """Fixture providing a sink over the in-memory output."""
    return OutputSink(output)


@pytest.fixture
def default_config():
    """Fixture providing the default codec configuration."""
    return CodecConfig()


@pytest.fixture
def broken_pipe_stream():
    return BrokenPipeStream()


@pytest.fixture
def failing_stream():
    return FailingStream()


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Fixture isolating tests from HEXSTREAM_* variables and any .env file."""
    for name in list(os.environ):
        if name.startswith("HEXSTREAM_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return tmp_path
