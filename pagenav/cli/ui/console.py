"""Console setup for the CLI."""

from rich.console import Console

from .themes import get_theme


def create_console(
    no_color: bool = False,
    width: int | None = None,
    theme_name: str = "default",
) -> Console:
    """Create a configured Rich console.

    Args:
        no_color: Disable colored output
        width: Console width, 120 when not given
        theme_name: Name of theme to apply

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
    )
