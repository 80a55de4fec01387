"""Message formatting utilities for the CLI.

Provides functions for formatting success, error, warning, and info messages.
"""

from rich.console import Console
from rich.markup import escape

from sitasi.citations.clipboard import Notification


class StatusIcon:
    """Status icon constants."""

    SUCCESS = "[green]✓[/green]"
    ERROR = "[red]✗[/red]"
    WARNING = "[yellow]⚠[/yellow]"


def success_message(console: Console, message: str) -> None:
    """Display a success message.

    Args:
        console: Rich console instance
        message: Success message text
    """
    console.print(f"{StatusIcon.SUCCESS} {message}", style="green")


def error_message(console: Console, message: str) -> None:
    """Display an error message.

    Args:
        console: Rich console instance
        message: Error message text
    """
    console.print(f"{StatusIcon.ERROR} {message}", style="red")


def warning_message(console: Console, message: str) -> None:
    """Display a warning message."""
    console.print(f"{StatusIcon.WARNING} {message}", style="yellow")


def notification_message(console: Console, notification: Notification) -> None:
    """Display a copy notification as a success or error message."""
    title = escape(notification.title)
    text = f"[bold]{title}[/bold] {escape(notification.description)}"
    if notification.is_error:
        error_message(console, text)
    else:
        success_message(console, text)
