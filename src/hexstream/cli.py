"""Command line interface: hex encode or decode files and stdin."""

import logging
import os
import sys
from typing import BinaryIO, List, Optional

import typer

from hexstream import __version__
from hexstream.core.driver import SessionOutcome, StreamDriver
from hexstream.core.sink import OutputSink
from hexstream.core.sources import build_sources
from hexstream.exceptions import ConfigurationError, HexStreamException
from hexstream.settings import load_settings

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Encode data as lowercase hex, or decode hex back to bytes.",
    add_completion=False,
)


def configure_logging(level_name: str) -> None:
    """Send log records to stderr so stdout carries only codec output."""
    level = getattr(logging, level_name.upper(), None)
    if not isinstance(level, int):
        raise ConfigurationError(f"Unknown log level: {level_name}")
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _stdout() -> BinaryIO:
    return sys.stdout.buffer


def _silence_stdout() -> None:
    # The interpreter flushes stdout again at exit; point it at devnull so
    # the closed pipe does not produce a second error there.
    try:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
    except (OSError, ValueError) as e:
        logger.debug(f"Could not redirect stdout after broken pipe: {e}")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"hexstream {__version__}")
        raise typer.Exit()


@app.command()
def main(
    files: Optional[List[str]] = typer.Option(
        None, "--file", "-f",
        help="Encode/decode data from a file. Repeat for several files; '-' reads stdin.",
    ),
    decode: bool = typer.Option(False, "--decode", "-d", help="Decode data"),
    ignore_whitespace: bool = typer.Option(
        False, "--ignore-whitespaces", "-i",
        help="Ignore whitespaces. By default only newlines ('\\n') are ignored.",
    ),
    wrap: Optional[int] = typer.Option(
        None, "--wrap", "-w", min=0,
        help="Wrap encoded lines after number of bytes (2 characters). Default is 0, which indicates no wrapping.",
    ),
    prefix: Optional[str] = typer.Option(
        None, "--prefix", "-p", help="String written before every encoded byte.",
    ),
    string: Optional[str] = typer.Option(
        None, "--string", "-s", help="Encode/decode this string instead of reading files.",
    ),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Log level for messages on stderr (default WARNING).",
    ),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Hex encode stdin or files to stdout, or decode with --decode."""
    if files and string is not None:
        raise typer.BadParameter("cannot be combined with --file", param_hint="'--string'")

    try:
        settings = load_settings()
        configure_logging(log_level or settings.log_level)
        config = settings.to_codec_config(
            ignore_whitespace=True if ignore_whitespace else None,
            wrap_width=wrap,
            prefix=prefix,
        )
        logger.debug(f"Codec configuration: {config}")

        driver = StreamDriver(config, OutputSink(_stdout()), decode=decode, chunk_size=settings.chunk_size)
        report = driver.run(build_sources(files, string))
    except HexStreamException as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if report.outcome is SessionOutcome.BROKEN_PIPE:
        _silence_stdout()


def run() -> None:
    """Console script entry point."""
    app(prog_name="hexstream")


if __name__ == "__main__":
    run()
