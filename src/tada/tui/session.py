"""Blocking entry point for the interactive list.

Runs the Textual app to completion, then writes back through the store,
but only when the session changed something. The save never overlaps the
event loop.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Sequence

from tada.model import Item
from tada.store import JsonStore
from tada.tui.app import TadaApp
from tada.ui.theme import CLASSIC, Theme

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionResult:
    items: list[Item]
    dirty: bool
    saved: bool


def run_interactive_session(
    items: Sequence[Item],
    store: JsonStore,
    theme: Theme = CLASSIC,
    app_factory: Callable[..., TadaApp] = TadaApp,
) -> SessionResult:
    """Run one session over items; raises StorageError if the final save fails."""
    app = app_factory(items=list(items), theme=theme)
    app.run()

    state = app.state
    final = state.selection.snapshot()
    if not state.dirty:
        logger.info("session ended without changes; not saving")
        return SessionResult(items=final, dirty=False, saved=False)

    store.save(final)
    return SessionResult(items=final, dirty=True, saved=True)
