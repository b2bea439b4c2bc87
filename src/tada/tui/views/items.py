from rich.markup import escape
from textual.containers import Vertical
from textual.widgets import Static

from tada.tui.state import Mode, SessionState
from tada.tui.text_entry import LineBuffer
from tada.tui.views.base import DEFAULT_SIZE, View
from tada.ui.panel import check_box, item_title, summary_line
from tada.ui.theme import Role, Theme, colorize

# Frame border + padding rows, header and hint bar.
CHROME_ROWS = 6
ENTRY_ROWS = 4


def visible_window(cursor: int, count: int, height: int) -> tuple[int, int]:
    """Slice [start, end) of `count` rows that fits `height` and shows cursor."""
    height = max(1, height)
    if count <= height:
        return 0, count
    start = cursor - height // 2
    start = max(0, min(start, count - height))
    return start, start + height


def buffer_markup(buffer: LineBuffer, theme: Theme, placeholder: str = "") -> str:
    """Render a line buffer with a block cursor at its position."""
    if not buffer.text and placeholder:
        return colorize(Role.SELECTED, " ", theme) + colorize(Role.MUTED, placeholder, theme)
    before = escape(buffer.text[: buffer.position])
    at = buffer.text[buffer.position : buffer.position + 1] or " "
    after = escape(buffer.text[buffer.position + 1 :])
    return before + colorize(Role.SELECTED, at, theme) + after


class ItemsView(View):
    name = "items"

    def _list_lines(self, state: SessionState, theme: Theme, width: int, height: int) -> str:
        visible = state.selection.visible()
        if not visible:
            if state.selection.filter_text:
                return colorize(Role.MUTED, "No items match the filter.", theme)
            return colorize(Role.MUTED, "No items yet. Press 'a' to add one.", theme)

        cursor = state.selection.cursor
        start, end = visible_window(cursor, len(visible), height)
        limit = max(10, width - 12)
        lines = []
        for row in range(start, end):
            _, item = visible[row]
            if row == cursor:
                prefix = colorize(Role.SELECTED, ">", theme) + " "
            else:
                prefix = "  "
            lines.append(f"{prefix}{check_box(item, theme)} {item_title(item, theme, limit)}")
        return "\n".join(lines)

    def _entry_bar(self, state: SessionState, theme: Theme) -> str:
        entry = state.entry
        if state.mode is Mode.EDITING:
            title, placeholder = "Edit item", "Edit item title..."
        else:
            title, placeholder = "Add new item", "New item title..."
        title = colorize(Role.ACCENT, title, theme)
        if entry.error:
            title += " - " + colorize(Role.ERROR, entry.error, theme)
        return f"{title}\n> {buffer_markup(entry.buffer, theme, placeholder)}"

    def _filter_line(self, state: SessionState, theme: Theme) -> str:
        label = colorize(Role.ACCENT, "/", theme)
        if state.mode is Mode.FILTERING:
            return f"{label} {buffer_markup(state.filter_entry, theme)}"
        shown = state.selection.visible_count()
        return (
            f"{label} {escape(state.selection.filter_text)}  "
            + colorize(Role.MUTED, f"({shown} of {len(state.items)} shown, esc clears)", theme)
        )

    def widgets(self, state: SessionState, theme: Theme, size: tuple[int, int] = DEFAULT_SIZE) -> list[Static]:
        width, height = size
        if width <= 0 or height <= 0:
            width, height = DEFAULT_SIZE

        entry_open = state.mode in (Mode.ADDING, Mode.EDITING)
        show_filter = state.mode is Mode.FILTERING or bool(state.selection.filter_text)

        list_height = height - CHROME_ROWS
        if entry_open:
            list_height -= ENTRY_ROWS
        if show_filter:
            list_height -= 1

        bar_width = max(10, min(28, width - 40))
        widgets = [
            Static(summary_line(state.items, theme, bar_width), id="header"),
            Static(self._list_lines(state, theme, width, list_height), id="items"),
        ]
        if show_filter:
            widgets.append(Static(self._filter_line(state, theme), id="filter"))
        if entry_open:
            widgets.append(Static(self._entry_bar(state, theme), id="entry"))
        widgets.append(Static(colorize(Role.MUTED, state.hint, theme), id="hint-bar"))
        return widgets

    def render(self, state: SessionState, theme: Theme, size: tuple[int, int] = DEFAULT_SIZE):
        layout = Vertical(*self.widgets(state, theme, size), id="session-layout")
        layout.styles.border = (theme.border, "grey")
        return [layout]
