"""Color themes for the CLI."""

from rich.theme import Theme

THEMES = {
    "professional": {
        "primary": "blue",
        "success": "green",
        "warning": "yellow",
        "error": "red",
        "info": "blue",
        "muted": "dim",
        "accent": "cyan",
        # Citation styles
        "style.name": "bold cyan",
        "style.copied": "bold green",
        "citation": "italic",
        # Tables
        "table.header": "bold cyan",
        "table.border": "dim",
    },
    "minimal": {
        "primary": "white",
        "success": "green",
        "warning": "yellow",
        "error": "red",
        "info": "white",
        "muted": "dim",
        "accent": "white",
        "style.name": "bold",
        "style.copied": "bold",
        "citation": "none",
        "table.header": "bold",
        "table.border": "dim",
    },
}


def get_theme(name: str = "professional") -> Theme:
    """Get a theme by name, falling back to the professional theme."""
    theme_dict = THEMES.get(name, THEMES["professional"])
    return Theme(theme_dict)
