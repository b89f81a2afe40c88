"""Main CLI entry point and application setup."""

import logging
import sys
from dataclasses import dataclass
from pathlib import Path

import click
from click.exceptions import Exit
from rich.console import Console

from pagenav import __version__
from pagenav.cli.commands import browse, navigate, pages
from pagenav.cli.config import PagerSettings, load_settings
from pagenav.cli.ui.console import create_console
from pagenav.events import EventBus


@dataclass
class Context:
    """CLI context that holds shared resources."""

    console: Console
    event_bus: EventBus
    settings: PagerSettings
    debug: bool = False


def setup_logging(
    verbose: bool = False, quiet: bool = False, debug: bool = False
) -> None:
    """Configure logging based on CLI flags."""
    if quiet:
        level = logging.WARNING
    elif verbose or debug:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s"
        if not debug
        else "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


class PagenavGroup(click.Group):
    """Custom group that reports errors and handles KeyboardInterrupt."""

    def invoke(self, ctx):
        try:
            return super().invoke(ctx)
        except KeyboardInterrupt:
            console = getattr(ctx.obj, "console", None) if ctx.obj else None
            if console:
                console.print("[warning]Interrupted[/warning]")
            ctx.exit(130)
        except (click.ClickException, click.Abort, Exit, SystemExit):
            # Click exceptions and exits carry their own exit codes
            raise
        except Exception as e:
            debug = getattr(ctx.obj, "debug", False) if ctx.obj else False
            if debug:
                raise
            console = getattr(ctx.obj, "console", None) if ctx.obj else None
            if console:
                console.print(f"[error]Error:[/error] {e}")
            else:
                click.echo(f"Error: {e}", err=True)
            ctx.exit(1)


@click.group(cls=PagenavGroup)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-error output")
@click.option("--no-color", is_flag=True, help="Disable colored output")
@click.option("--debug", is_flag=True, help="Enable debug mode with full tracebacks")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration file",
)
@click.version_option(
    version=__version__, prog_name="pagenav", message="pagenav version %(version)s"
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    no_color: bool,
    debug: bool,
    config: Path | None,
) -> None:
    """Pagination and navigation engine.

    Explore page lists, navigation policies and paginated browsing of
    JSON documents from the terminal.
    """
    setup_logging(verbose=verbose, quiet=quiet, debug=debug)

    try:
        settings = load_settings(config)
    except ValueError as e:
        if debug:
            raise
        click.echo(f"Error loading configuration: {e}", err=True)
        ctx.exit(1)

    ctx.obj = Context(
        console=create_console(no_color=no_color, theme_name=settings.theme),
        event_bus=EventBus(),
        settings=settings,
        debug=debug,
    )


cli.add_command(pages)
cli.add_command(navigate)
cli.add_command(browse)


def main() -> None:
    """Main entry point for the CLI application."""
    try:
        cli()
    except KeyboardInterrupt:
        sys.exit(130)
    except Exception as e:
        if "--debug" in sys.argv:
            raise
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
