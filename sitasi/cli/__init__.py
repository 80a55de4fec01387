"""sitasi CLI.

Command-line interface for formatting book citations, built with Click
and Rich.
"""

from sitasi.cli.main import cli

__all__ = ["cli"]
