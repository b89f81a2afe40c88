"""Page list and navigator commands."""

import click

from pagenav.core.navigators import (
    NavigatorKind,
    RandomAccessNavigator,
    SequentialAccessNavigator,
    create_navigator,
)
from pagenav.core.pages import recompute

RANDOM_MOVES = ("prev", "next")
SEQUENTIAL_MOVES = ("prev", "next", "rewind", "fast-forward")


def _apply_move(navigator, move: str) -> None:
    """Apply one move, given as name or ``goto:N``."""
    if move.startswith("goto:"):
        try:
            position = int(move.split(":", 1)[1])
        except ValueError:
            raise click.BadParameter(f"Invalid position in '{move}'", param_hint="MOVES")
        navigator.go_to(position)
        return

    allowed = (
        SEQUENTIAL_MOVES
        if isinstance(navigator, SequentialAccessNavigator)
        else RANDOM_MOVES
    )
    if move not in allowed:
        raise click.BadParameter(
            f"'{move}' is not one of {', '.join(allowed)} or goto:N",
            param_hint="MOVES",
        )
    getattr(navigator, move.replace("-", "_"))()


@click.command()
@click.argument("items", type=click.IntRange(min=0))
@click.option(
    "--page-length", "-l", type=click.IntRange(min=1), help="Items per page"
)
@click.pass_context
def pages(ctx: click.Context, items: int, page_length: int | None) -> None:
    """Show the page numbers for ITEMS items."""
    console = ctx.obj.console
    page_length = page_length or ctx.obj.settings.page_length

    page_list = recompute([], items, page_length)
    if not page_list:
        console.print("[muted]Nothing to paginate[/muted]")
        return

    console.print(" ".join(str(p) for p in page_list), highlight=False)


@click.command()
@click.argument("items", type=click.IntRange(min=0))
@click.argument("moves", nargs=-1, required=True)
@click.option(
    "--page-length", "-l", type=click.IntRange(min=1), help="Items per page"
)
@click.option(
    "--mode",
    "-m",
    type=click.Choice([k.value for k in NavigatorKind]),
    help="Navigation policy",
)
@click.pass_context
def navigate(
    ctx: click.Context,
    items: int,
    moves: tuple[str, ...],
    page_length: int | None,
    mode: str | None,
) -> None:
    """Replay MOVES over ITEMS items and show each position.

    Moves are prev, next, goto:N and, in sequential mode, rewind and
    fast-forward.
    """
    console = ctx.obj.console
    settings = ctx.obj.settings

    navigator = create_navigator(
        mode or settings.navigator,
        items_count=items,
        page_length=page_length or settings.page_length,
        event_bus=ctx.obj.event_bus,
    )

    if not navigator.is_paginable():
        console.print("[warning]Items fit in a single page[/warning]")

    label = "page" if isinstance(navigator, RandomAccessNavigator) else "item"
    console.print(f"start: {label} {navigator.position}", highlight=False)
    for move in moves:
        _apply_move(navigator, move)
        console.print(f"{move}: {label} {navigator.position}", highlight=False)
