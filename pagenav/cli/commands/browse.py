"""Interactive browsing of a JSON array file."""

import logging
from pathlib import Path
from typing import Any

import click
from rich.console import Console
from rich.prompt import Prompt

from pagenav.cli.ui.pagination import PaginationControls, rows_table
from pagenav.core.state import PageState
from pagenav.fetch.controller import PagedFetchController
from pagenav.sources.slice import SliceSource

logger = logging.getLogger(__name__)

HELP_LINE = "[muted]n: next  p: prev  g N: go to page N  q: quit[/muted]"


class BrowseSession:
    """Wires a page state, a fetch controller and the console together."""

    def __init__(self, console: Console, source: SliceSource, state: PageState):
        self.console = console
        self.source = source
        self.state = state
        self.controls = PaginationControls(state.event_bus)
        self.controller = PagedFetchController(state, on_rows=self._show_rows)

    def _show_rows(self, data: Any) -> None:
        request = self.controller.last_request
        first = 1 if request is None else (request.page - 1) * request.page_length + 1
        if isinstance(data, list) and not data:
            self.console.print("[muted]No items on this page[/muted]")
            return
        self.console.print(rows_table(data, first_index=first))

    def refresh(self) -> None:
        """Fetch the current page and show the controls."""
        self.controller.submit(self.source)
        self.console.print(self.controls.render())

    def handle(self, command: str) -> bool:
        """Handle one command.

        Returns:
            False when the session should end
        """
        parts = command.strip().split()
        if not parts:
            return True

        action = parts[0].lower()
        if action == "q":
            return False

        if action == "n":
            if not self.state.next_enabled:
                self.console.print("[warning]Already on the last page[/warning]")
                return True
            self.state.step_up()
        elif action == "p":
            if not self.state.prev_enabled:
                self.console.print("[warning]Already on the first page[/warning]")
                return True
            self.state.step_down()
        elif action == "g" and len(parts) == 2 and parts[1].lstrip("-").isdigit():
            # The current page is fetched again
            self.state.go_to(int(parts[1]))
        else:
            self.console.print(HELP_LINE)
            return True

        if self.state.is_valid():
            self.refresh()
        else:
            self.console.print(self.controls.render())
        return True


@click.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--page-length", "-l", type=click.IntRange(min=1), help="Items per page"
)
@click.pass_context
def browse(ctx: click.Context, file: Path, page_length: int | None) -> None:
    """Browse the items of a JSON array FILE page by page."""
    console = ctx.obj.console

    def rejected(state: PageState) -> None:
        console.print(f"[error]Page {state.page} is not available[/error]")

    source = SliceSource.from_file(file)
    state = PageState(
        page_length=page_length or ctx.obj.settings.page_length,
        on_invalid_page=rejected,
        event_bus=ctx.obj.event_bus,
    )
    session = BrowseSession(console, source, state)

    logger.debug(f"Browsing {file} ({source.items_count} items)")
    session.refresh()
    console.print(HELP_LINE)

    while True:
        try:
            command = Prompt.ask("[accent]page[/accent]", console=console, default="q")
        except EOFError:
            break
        if not session.handle(command):
            break
