"""Semantic color roles and the built-in themes.

A Theme is an immutable value: callers pass it around instead of reading
package-level styling globals. Styles are rich style strings, so the same
markup works for one-shot console output and inside the Textual session.
"""

from dataclasses import dataclass, field
from enum import Enum

from rich import box
from rich.markup import escape

from tada.errors import ConfigError


class Role(str, Enum):
    TITLE = "title"
    SUCCESS = "success"
    PENDING = "pending"
    ACCENT = "accent"
    MUTED = "muted"
    ERROR = "error"
    SELECTED = "selected"
    DONE = "done"


@dataclass(frozen=True)
class Symbols:
    box_unchecked: str = "☐"
    box_checked: str = "☑"
    done: str = "✔"
    pending: str = "•"
    ok: str = "✔"
    fail: str = "✖"


@dataclass(frozen=True)
class Theme:
    name: str
    styles: dict[Role, str] = field(default_factory=dict)
    symbols: Symbols = field(default_factory=Symbols)
    panel_box: box.Box = box.SQUARE
    # Textual border type for the interactive session frame.
    border: str = "solid"

    def style(self, role: Role) -> str:
        return self.styles.get(role, "")


CLASSIC = Theme(
    name="classic",
    styles={
        Role.TITLE: "bold",
        Role.SUCCESS: "green",
        Role.PENDING: "yellow",
        Role.ACCENT: "blue",
        Role.MUTED: "bright_black",
        Role.ERROR: "bold red",
        Role.SELECTED: "bold reverse",
        Role.DONE: "dim strike",
    },
)

NEON = Theme(
    name="neon",
    styles={
        Role.TITLE: "bold bright_magenta",
        Role.SUCCESS: "bright_green",
        Role.PENDING: "bright_yellow",
        Role.ACCENT: "bright_cyan",
        Role.MUTED: "bright_black",
        Role.ERROR: "bold bright_red",
        Role.SELECTED: "bold reverse bright_magenta",
        Role.DONE: "dim strike",
    },
    symbols=Symbols(box_unchecked="◻", box_checked="◼"),
    panel_box=box.ROUNDED,
    border="round",
)

MONO = Theme(
    name="mono",
    styles={Role.SELECTED: "reverse"},
    symbols=Symbols(
        box_unchecked="[ ]",
        box_checked="[x]",
        done="x",
        pending="-",
        ok="ok:",
        fail="error:",
    ),
    panel_box=box.ASCII,
    border="ascii",
)

THEMES = {t.name: t for t in (CLASSIC, NEON, MONO)}
DEFAULT_THEME = CLASSIC.name


def get_theme(name: str) -> Theme:
    try:
        return THEMES[name.strip().lower()]
    except KeyError:
        raise ConfigError(
            f"unknown theme {name!r} (choose from {', '.join(THEMES)})"
        ) from None


def colorize(role: Role, text: str, theme: Theme) -> str:
    """Wrap text in rich markup for the role; text is escaped first."""
    escaped = escape(text)
    style = theme.style(role)
    if not style:
        return escaped
    return f"[{style}]{escaped}[/]"
