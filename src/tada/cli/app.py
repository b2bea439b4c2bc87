"""Main CLI application wiring for tada.

  tada add Buy milk
  tada ls
  tada done 2
  tada rm 3

Root options (--file, --theme, --color/--no-color, --group) override
whatever `.tada.yml` in the working directory says.
"""

from pathlib import Path
from typing import Optional

import typer

from tada.cli.context import EXIT_USAGE, CliContext
from tada.config import apply_overrides, load_settings, setup_logging
from tada.errors import ConfigError
from tada.store import JsonStore
from tada.ui.console import Output
from tada.ui.theme import DEFAULT_THEME, get_theme

app = typer.Typer(add_completion=False, help="tada - a tiny todo list for your terminal")


@app.callback()
def main(
    ctx: typer.Context,
    file: Optional[Path] = typer.Option(
        None, "--file", "-f", help="Path to the data file (default: ./todos.json)"
    ),
    theme: Optional[str] = typer.Option(
        None, "--theme", help="UI theme: classic | neon | mono"
    ),
    color: bool = typer.Option(False, "--color", help="Force color even when not a TTY"),
    no_color: bool = typer.Option(False, "--no-color", help="Disable color output"),
    group: bool = typer.Option(False, "--group", help="Group listings by pending/done"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging to the log file"),
):
    """tada CLI."""
    setup_logging(verbose)

    fallback = Output.create(get_theme(DEFAULT_THEME))
    if color and no_color:
        fallback.fail("--color and --no-color are mutually exclusive")
        raise typer.Exit(code=EXIT_USAGE)

    cwd = Path.cwd()
    color_mode = "always" if color else "never" if no_color else None
    try:
        settings = apply_overrides(
            load_settings(cwd),
            theme=theme,
            color=color_mode,
            group=True if group else None,
            data_file=file,
        )
        active_theme = get_theme(settings.theme)
    except ConfigError as e:
        fallback.fail(f"config: {e}")
        raise typer.Exit(code=EXIT_USAGE)

    ctx.obj = CliContext(
        settings=settings,
        theme=active_theme,
        store=JsonStore(settings.resolve_data_file(cwd)),
        output=Output.create(active_theme, settings.color),
    )


# =============================================================================
# Register commands
# =============================================================================

from tada.cli import items as items_cmd
from tada.cli import auth as auth_cmd

items_cmd.register(app)
auth_cmd.register(app)
