"""Pagination rendering for the CLI.

The engine never touches presentation: PaginationControls subscribes to
state events and turns the latest snapshot into Rich markup.
"""

from collections.abc import Mapping
from typing import Any

from rich.markup import escape
from rich.table import Table

from pagenav.core.models import ControlState
from pagenav.events import Event, EventBus, EventType


def _control(label: str, enabled: bool) -> str:
    style = "control.enabled" if enabled else "control.disabled"
    return f"[{style}]{label}[/{style}]"


def format_pagination_controls(state: ControlState) -> str:
    """Format pagination controls for display.

    Args:
        state: Snapshot of the page state

    Returns:
        Formatted pagination controls
    """
    if not state.valid:
        page_style = "page.invalid"
    elif state.page_enabled:
        page_style = "page.valid"
    else:
        page_style = "page.locked"

    page = "-" if state.page is None else str(state.page)
    total = "?" if state.max is None else str(state.max)

    controls = [
        _control("← Prev", state.prev_enabled),
        f"Page [{page_style}]{page}[/{page_style}] of {total}",
        _control("Next →", state.next_enabled),
    ]
    line = " | ".join(controls)

    if not state.valid:
        line += " [error](invalid page)[/error]"

    return line


class PaginationControls:
    """Rendering adapter following a page state through its events."""

    def __init__(self, event_bus: EventBus):
        """Subscribe to state changes on ``event_bus``."""
        self.event_bus = event_bus
        self.state: ControlState | None = None
        event_bus.subscribe(EventType.STATE_CHANGED, self._on_state_changed)

    def _on_state_changed(self, event: Event) -> None:
        self.state = event.state

    def render(self) -> str:
        """Render the latest known controls, empty before any state change."""
        if self.state is None:
            return ""
        return format_pagination_controls(self.state)

    def detach(self) -> None:
        """Stop following state changes."""
        self.event_bus.unsubscribe(EventType.STATE_CHANGED, self._on_state_changed)


def rows_table(rows: Any, first_index: int = 1, title: str | None = None) -> Table:
    """Build a table for a page of rows.

    Mapping rows get one column per key, other rows a single value column.

    Args:
        rows: Page data, a list of rows or a single value
        first_index: Number of the first row
        title: Optional table title
    """
    if isinstance(rows, Mapping) or not isinstance(rows, list):
        rows = [rows]

    columns: list[str] = []
    for row in rows:
        if isinstance(row, Mapping):
            columns.extend(str(k) for k in row if str(k) not in columns)

    table = Table(title=title, header_style="table.header", border_style="table.border")
    table.add_column("#", justify="right", style="muted")
    if columns:
        for column in columns:
            table.add_column(column)
    else:
        table.add_column("value")

    for offset, row in enumerate(rows):
        if columns and isinstance(row, Mapping):
            values = [str(row.get(c, "")) for c in columns]
        elif columns:
            # Scalar row among mapping rows
            values = [str(row)] + [""] * (len(columns) - 1)
        else:
            values = [str(row)]
        table.add_row(str(first_index + offset), *(escape(v) for v in values))

    return table
