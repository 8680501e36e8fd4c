"""Allow ``python -m hexstream``."""

from hexstream.cli import run

run()
