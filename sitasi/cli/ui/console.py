"""Console setup for the CLI."""

from rich.console import Console

from .themes import get_theme


def create_console(
    no_color: bool = False,
    width: int | None = None,
    theme_name: str = "professional",
    stderr: bool = False,
) -> Console:
    """Create a configured Rich console.

    Args:
        no_color: Disable colors and highlighting
        width: Console width (defaults to 120)
        theme_name: Name of theme to apply
        stderr: Write to standard error instead of standard output

    Returns:
        Configured Console instance
    """
    return Console(
        width=width or 120,
        theme=get_theme(theme_name),
        no_color=no_color,
        highlight=not no_color,
        color_system=None if no_color else "auto",
        soft_wrap=True,
        stderr=stderr,
    )
