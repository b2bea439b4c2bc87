"""Item commands: tada add|ls|done|rm|path"""

import logging
import sys
from typing import List, Optional

import typer

from tada.cli.context import EXIT_USAGE, data_path, get_context
from tada.errors import StorageError
from tada.model import Item
from tada.ui.panel import grouped_lines, item_lines, progress_bar, render_panel, stats
from tada.ui.theme import Role, colorize

logger = logging.getLogger(__name__)


def _can_interact() -> bool:
    return sys.stdin.isatty() and sys.stdout.isatty()


def register(app: typer.Typer):
    @app.command()
    def add(
        ctx: typer.Context,
        words: Optional[List[str]] = typer.Argument(None, help="Title (may be several words)"),
    ):
        """Add a new item."""
        cli = get_context(ctx)
        title = " ".join(words or []).strip()
        if not title:
            cli.die("add: empty title", EXIT_USAGE)

        items = cli.load()
        items.append(Item(title=title))
        cli.save(items)
        logger.info("added item %d", len(items))
        cli.output.ok("added")

    def list_items(
        ctx: typer.Context,
        plain: bool = typer.Option(False, "--plain", help="Print the list instead of opening the interactive view"),
    ):
        """List items (interactive on a terminal)."""
        cli = get_context(ctx)
        items = cli.load()

        if plain or not _can_interact():
            _print_panel(cli, items)
            return

        from tada.tui.session import run_interactive_session

        try:
            result = run_interactive_session(items, cli.store, cli.theme)
        except StorageError as e:
            cli.die(f"save: {e}")
        if result.saved:
            cli.output.ok("saved")

    app.command("ls")(list_items)
    app.command("list")(list_items)

    @app.command()
    def done(ctx: typer.Context, index: int = typer.Argument(..., help="1-based index from `tada ls`")):
        """Toggle done for the item at INDEX."""
        cli = get_context(ctx)
        items = cli.load()
        idx = cli.check_index(items, index)
        items[idx].done = not items[idx].done
        cli.save(items)
        cli.output.ok("toggled")

    @app.command()
    def rm(ctx: typer.Context, index: int = typer.Argument(..., help="1-based index from `tada ls`")):
        """Remove the item at INDEX."""
        cli = get_context(ctx)
        items = cli.load()
        idx = cli.check_index(items, index)
        del items[idx]
        cli.save(items)
        cli.output.ok("removed")

    @app.command()
    def path(ctx: typer.Context):
        """Show the absolute path to the data file."""
        cli = get_context(ctx)
        cli.output.out.print(str(data_path(cli)), markup=False, soft_wrap=True)


def _print_panel(cli, items: list[Item]) -> None:
    theme = cli.theme
    if cli.settings.group:
        lines = grouped_lines(items, theme)
    else:
        lines = item_lines(items, theme)

    done_count, _ = stats(items)
    lines.append("")
    lines.append(colorize(Role.MUTED, progress_bar(done_count, len(items)), theme))
    cli.output.line(render_panel(lines, theme))
