"""Rich console helpers for the CLI."""

from .console import create_console
from .messages import (
    error_message,
    notification_message,
    success_message,
    warning_message,
)
from .themes import get_theme

__all__ = [
    "create_console",
    "success_message",
    "error_message",
    "warning_message",
    "notification_message",
    "get_theme",
]
