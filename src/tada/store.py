"""JSON-backed item storage.

One human-readable file, no locking: fine for a local single-user tool.
Writes go to a sibling temp file first and are swapped in with os.replace.
"""

from __future__ import annotations

import json
import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Iterable

from tada.errors import StorageError
from tada.model import Item

logger = logging.getLogger(__name__)

DATA_FILE_NAME = "todos.json"


def default_path(cwd: Path | None = None) -> Path:
    return (cwd or Path.cwd()) / DATA_FILE_NAME


class JsonStore:
    """Loads and saves the ordered item list from a single JSON file."""

    def __init__(self, path: Path | str | None = None) -> None:
        self.path = Path(path) if path is not None else default_path()

    def load(self) -> list[Item]:
        """Return all items; a missing file is an empty list, not an error."""
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("no data file at %s, starting empty", self.path)
            return []
        except OSError as e:
            logger.exception("reading %s failed", self.path)
            raise StorageError(f"read file: {e}") from e

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.exception("parsing %s failed", self.path)
            raise StorageError(f"json decode: {e}") from e

        if not isinstance(data, list):
            raise StorageError("json decode: top-level value must be a list")

        items = [Item.from_dict(entry) for entry in data]
        logger.debug("loaded %d items from %s", len(items), self.path)
        return items

    def _file_mode(self) -> int:
        """Keep the existing file's mode; new files get 0666 minus the umask."""
        try:
            return stat.S_IMODE(self.path.stat().st_mode)
        except FileNotFoundError:
            umask = os.umask(0)
            os.umask(umask)
            return 0o666 & ~umask

    def save(self, items: Iterable[Item]) -> None:
        """Overwrite the data file with items."""
        payload = json.dumps(
            [item.to_dict() for item in items], indent=2, ensure_ascii=False
        )

        directory = self.path.parent
        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=directory
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload + "\n")
            os.chmod(tmp_name, self._file_mode())
            os.replace(tmp_name, self.path)
        except OSError as e:
            logger.exception("writing %s failed", self.path)
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageError(f"write file: {e}") from e

        logger.info("saved items to %s", self.path)
