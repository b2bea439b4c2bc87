"""Pure formatting helpers: progress bar, item lines and the bordered panel."""

from __future__ import annotations

from typing import Iterable, Sequence

from rich.markup import escape
from rich.panel import Panel

from tada.model import Item
from tada.ui.theme import Role, Theme, colorize

DEFAULT_BAR_WIDTH = 28
MAX_TITLE_WIDTH = 80


def stats(items: Iterable[Item]) -> tuple[int, int]:
    """Return (done, pending) counts."""
    done = pending = 0
    for item in items:
        if item.done:
            done += 1
        else:
            pending += 1
    return done, pending


def progress_bar(done: int, total: int, width: int = DEFAULT_BAR_WIDTH) -> str:
    """Render `[████░░░░] done/total`."""
    label = f"{done}/{total}"
    if total <= 0:
        total = 1
    if width <= 0:
        width = DEFAULT_BAR_WIDTH
    filled = max(0, min(int(done / total * width), width))
    return "[" + "█" * filled + "░" * (width - filled) + "] " + label


def truncate(title: str, limit: int = MAX_TITLE_WIDTH) -> str:
    if len(title) > limit:
        return title[: limit - 3] + "..."
    return title


def check_box(item: Item, theme: Theme) -> str:
    if item.done:
        return colorize(Role.SUCCESS, theme.symbols.box_checked, theme)
    return colorize(Role.MUTED, theme.symbols.box_unchecked, theme)


def item_title(item: Item, theme: Theme, limit: int = MAX_TITLE_WIDTH) -> str:
    text = truncate(item.title, limit)
    if item.done:
        return colorize(Role.DONE, text, theme)
    return escape(text)


def item_lines(items: Sequence[Item], theme: Theme, start: int = 1) -> list[str]:
    """Numbered rows like ` 1. ☐ Buy milk` (markup strings)."""
    if not items:
        return [colorize(Role.MUTED, "no items", theme)]
    lines = []
    for offset, item in enumerate(items):
        number = colorize(Role.MUTED, f"{start + offset:2d}.", theme)
        lines.append(f"{number} {check_box(item, theme)} {item_title(item, theme)}")
    return lines


def grouped_lines(items: Sequence[Item], theme: Theme) -> list[str]:
    """Pending section then Done section; numbering follows file order."""
    pending = [(i, it) for i, it in enumerate(items, 1) if not it.done]
    done = [(i, it) for i, it in enumerate(items, 1) if it.done]

    lines: list[str] = []
    for heading, group in (("Pending", pending), ("Done", done)):
        if lines:
            lines.append("")
        lines.append(colorize(Role.ACCENT, heading, theme))
        if not group:
            lines.append(colorize(Role.MUTED, "(none)", theme))
            continue
        for index, item in group:
            lines.extend(item_lines([item], theme, start=index))
    return lines


def summary_line(items: Sequence[Item], theme: Theme, width: int = DEFAULT_BAR_WIDTH) -> str:
    """Header line with counts and progress, e.g. `Todos  ✔ 1  • 2  Total 3`."""
    done, pending = stats(items)
    symbols = theme.symbols
    return "   ".join(
        [
            colorize(Role.TITLE, "Todos", theme),
            f"{colorize(Role.SUCCESS, symbols.done, theme)} {done}  "
            f"{colorize(Role.PENDING, symbols.pending, theme)} {pending}  "
            f"{colorize(Role.ACCENT, 'Total', theme)} {len(items)}",
            colorize(Role.MUTED, progress_bar(done, len(items), width), theme),
        ]
    )


def render_panel(lines: Sequence[str], theme: Theme) -> Panel:
    """Bordered panel around markup lines, using the theme's box style."""
    style = theme.style(Role.MUTED)
    return Panel(
        "\n".join(lines),
        box=theme.panel_box,
        border_style=style or "none",
        padding=(0, 1),
        expand=False,
    )
