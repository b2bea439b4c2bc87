from abc import ABC, abstractmethod
from typing import Iterable

from textual.widget import Widget

from tada.tui.state import SessionState
from tada.ui.theme import Theme

DEFAULT_SIZE = (80, 24)


class View(ABC):
    name: str

    @abstractmethod
    def render(
        self, state: SessionState, theme: Theme, size: tuple[int, int] = DEFAULT_SIZE
    ) -> Iterable[Widget]: ...
