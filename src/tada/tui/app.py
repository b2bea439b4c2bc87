"""Full-screen interactive list built on Textual.

- Every key goes through SessionState.handle_key, which switches on the
  session mode before looking at the key (no per-widget bindings)
- Views are pure functions of state; the app re-renders after each event
  and on resize
- The app never touches the store: saving happens after it exits
"""

from __future__ import annotations

import logging

from textual import events
from textual.app import App, ComposeResult
from textual.containers import Container
from textual.css.query import NoMatches

from tada.model import Item
from tada.tui.state import SessionState
from tada.tui.views.items import ItemsView
from tada.ui.theme import CLASSIC, Theme

logger = logging.getLogger(__name__)


class TadaApp(App):
    CSS_PATH = "tui.tcss"
    TITLE = "tada"

    def __init__(self, items: list[Item] | None = None, theme: Theme = CLASSIC, **kwargs):
        super().__init__(**kwargs)
        self.state = SessionState.from_items(items or [])
        self.tada_theme = theme
        self.items_view = ItemsView()

    def compose(self) -> ComposeResult:
        yield Container(id="main")

    def on_mount(self) -> None:
        logger.info("session started with %d items", len(self.state.items))
        self._render_view()

    def on_resize(self, event: events.Resize) -> None:
        self._render_view()

    # =====================
    # Input
    # =====================

    def on_key(self, event: events.Key) -> None:
        event.stop()
        event.prevent_default()

        mode = self.state.mode
        before = self.state.selection.snapshot()
        action = self.state.handle_key(event.key, event.character)
        if action is None:
            return

        logger.debug("%s: %s -> %s", mode.value, event.key, type(action).__name__)
        if self.state.items != before:
            logger.info(
                "%s changed the list (%d -> %d items)",
                type(action).__name__,
                len(before),
                len(self.state.items),
            )
        if self.state.entry.error:
            logger.debug("entry rejected: %s", self.state.entry.error)

        if self.state.quit:
            logger.info("session quit (dirty=%s)", self.state.dirty)
            self.exit()
            return
        self._render_view()

    # =====================
    # Rendering
    # =====================

    def _viewport(self) -> tuple[int, int]:
        width, height = self.size
        if width <= 0 or height <= 0:
            return 80, 24
        return width, height

    def _render_view(self) -> None:
        """Schedule a re-render.

        remove_children()/mount() are async; running them in an exclusive
        worker keeps fast key repeats from mounting duplicate ids.
        """
        self.run_worker(
            self._render_view_async(),
            group="render",
            exclusive=True,
            exit_on_error=False,
        )

    async def _render_view_async(self) -> None:
        try:
            container = self.screen.query_one("#main")
        except NoMatches:
            return

        await container.remove_children()
        widgets = self.items_view.render(self.state, self.tada_theme, self._viewport())
        await container.mount_all(widgets)
