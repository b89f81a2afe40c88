"""UI components for the CLI."""

from .console import create_console
from .pagination import PaginationControls, format_pagination_controls, rows_table
from .themes import THEMES, get_theme

__all__ = [
    "THEMES",
    "PaginationControls",
    "create_console",
    "format_pagination_controls",
    "get_theme",
    "rows_table",
]
