"""Per-invocation state shared by every command (built in the root callback)."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import NoReturn

import typer

from tada.config import Settings
from tada.errors import StorageError
from tada.model import Item
from tada.store import JsonStore
from tada.ui.console import Output
from tada.ui.theme import Theme

EXIT_ERROR = 1
EXIT_USAGE = 2


@dataclass
class CliContext:
    settings: Settings
    theme: Theme
    store: JsonStore
    output: Output

    def die(self, msg: str, code: int = EXIT_ERROR) -> NoReturn:
        self.output.fail(msg)
        sys.exit(code)

    def load(self) -> list[Item]:
        try:
            return self.store.load()
        except StorageError as e:
            self.die(f"load: {e}")

    def save(self, items: list[Item]) -> None:
        try:
            self.store.save(items)
        except StorageError as e:
            self.die(f"save: {e}")

    def check_index(self, items: list[Item], user_index: int) -> int:
        """Validate a 1-based index and return the 0-based one."""
        if user_index < 1 or user_index > len(items):
            self.output.fail(f"index out of range: have {len(items)}, got {user_index}")
            self.output.hint("Hint: run `tada ls` to see valid indexes")
            sys.exit(EXIT_USAGE)
        return user_index - 1


def get_context(ctx: typer.Context) -> CliContext:
    obj = ctx.find_root().obj
    if not isinstance(obj, CliContext):
        raise RuntimeError("tada CLI context not initialised")
    return obj


def data_path(cli: CliContext) -> Path:
    return cli.store.path.resolve()
