"""Small builders shared by the test modules."""

from tada.model import Item


def make_items(*titles: str, done: tuple[int, ...] = ()) -> list[Item]:
    return [Item(title=t, done=i in done) for i, t in enumerate(titles)]


def titles(items) -> list[str]:
    return [item.title for item in items]


def type_text(state, text: str) -> None:
    """Feed text to a SessionState one key at a time, as a terminal would."""
    for ch in text:
        state.handle_key("space" if ch == " " else ch, ch)
