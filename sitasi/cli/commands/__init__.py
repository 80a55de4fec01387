"""CLI commands."""

from . import cite

__all__ = ["cite"]
