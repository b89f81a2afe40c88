"""CLI commands."""

from pagenav.cli.commands.browse import browse
from pagenav.cli.commands.navigation import navigate, pages

__all__ = ["browse", "navigate", "pages"]
