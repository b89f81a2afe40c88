"""Color themes and styles for the CLI.

Defines color schemes and style mappings for consistent visual presentation.
"""

from rich.theme import Theme

# Theme definitions
THEMES = {
    "default": {
        "primary": "blue",
        "success": "green",
        "warning": "yellow",
        "error": "red",
        "muted": "dim",
        "accent": "cyan",
        # Pagination controls
        "control.enabled": "bold cyan",
        "control.disabled": "dim",
        "page.valid": "bold",
        "page.invalid": "bold red",
        "page.locked": "dim",
        # Tables
        "table.header": "bold cyan",
        "table.border": "dim",
    },
    "minimal": {
        "primary": "white",
        "success": "green",
        "warning": "yellow",
        "error": "red",
        "muted": "dim",
        "accent": "white",
        "control.enabled": "bold",
        "control.disabled": "dim",
        "page.valid": "none",
        "page.invalid": "red",
        "page.locked": "dim",
        "table.header": "bold",
        "table.border": "none",
    },
}


def get_theme(name: str = "default") -> Theme:
    """Get a Rich theme by name, falling back to the default theme."""
    styles = THEMES.get(name, THEMES["default"])
    return Theme(styles)
