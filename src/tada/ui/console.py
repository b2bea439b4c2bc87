"""Rich consoles for one-shot command output."""

from __future__ import annotations

from dataclasses import dataclass, field

from rich.console import Console

from tada.ui.theme import CLASSIC, Role, Theme, colorize


def make_console(color: str = "auto", stderr: bool = False) -> Console:
    """Build a console honoring the color mode (auto | always | never)."""
    if color == "always":
        return Console(stderr=stderr, force_terminal=True, highlight=False)
    if color == "never":
        return Console(stderr=stderr, no_color=True, highlight=False)
    return Console(stderr=stderr, highlight=False)


@dataclass
class Output:
    """Theme-aware printers bound to stdout and stderr consoles."""

    theme: Theme = CLASSIC
    out: Console = field(default_factory=Console)
    err: Console = field(default_factory=lambda: Console(stderr=True))

    @classmethod
    def create(cls, theme: Theme, color: str = "auto") -> "Output":
        return cls(
            theme=theme,
            out=make_console(color),
            err=make_console(color, stderr=True),
        )

    def ok(self, msg: str) -> None:
        self.out.print(colorize(Role.SUCCESS, f"{self.theme.symbols.ok} {msg}", self.theme))

    def fail(self, msg: str) -> None:
        self.err.print(colorize(Role.ERROR, f"{self.theme.symbols.fail} {msg}", self.theme))

    def hint(self, msg: str) -> None:
        self.err.print(colorize(Role.MUTED, msg, self.theme))

    def line(self, renderable: object = "") -> None:
        self.out.print(renderable)
