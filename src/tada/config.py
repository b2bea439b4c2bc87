"""Project settings and logging setup.

Settings come from an optional `.tada.yml` in the working directory:

    theme: neon        # classic | neon | mono
    color: auto        # auto | always | never
    group: false       # group plain listings by pending/done
    data_file: todos.json

Root CLI options override whatever the file says.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Literal, Optional

import yaml

from tada.errors import ConfigError
from tada.store import DATA_FILE_NAME

CONFIG_FILE_NAME = ".tada.yml"
LOG_FILE_NAME = "tada.log"

ColorMode = Literal["auto", "always", "never"]
COLOR_MODES = ("auto", "always", "never")


@dataclass(frozen=True)
class Settings:
    theme: str = "classic"
    color: ColorMode = "auto"
    group: bool = False
    data_file: Path = Path(DATA_FILE_NAME)

    def resolve_data_file(self, cwd: Path) -> Path:
        path = self.data_file.expanduser()
        return path if path.is_absolute() else cwd / path


def tada_home() -> Path:
    """Directory for credentials and the log file (TADA_HOME overrides ~/.tada)."""
    override = os.environ.get("TADA_HOME", "").strip()
    if override:
        return Path(override).expanduser()
    return Path.home() / ".tada"


def load_settings(cwd: Optional[Path] = None) -> Settings:
    """Read `.tada.yml` from cwd, falling back to defaults when absent."""
    cwd = cwd or Path.cwd()
    cfg_path = cwd / CONFIG_FILE_NAME
    if not cfg_path.exists():
        return Settings()

    try:
        raw = yaml.safe_load(cfg_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError(f"{cfg_path.name}: invalid YAML: {e}") from e
    except OSError as e:
        raise ConfigError(f"{cfg_path.name}: {e}") from e

    if raw is None:
        return Settings()
    if not isinstance(raw, dict):
        raise ConfigError(f"{cfg_path.name}: top level must be a mapping")

    return apply_overrides(Settings(), **_settings_kwargs(raw))


def _settings_kwargs(raw: dict[str, Any]) -> dict[str, Any]:
    kwargs: dict[str, Any] = {}
    if "theme" in raw:
        kwargs["theme"] = str(raw["theme"])
    if "color" in raw:
        kwargs["color"] = str(raw["color"])
    if "group" in raw:
        if not isinstance(raw["group"], bool):
            raise ConfigError("group must be true or false")
        kwargs["group"] = raw["group"]
    if "data_file" in raw:
        kwargs["data_file"] = Path(str(raw["data_file"]))
    return kwargs


def apply_overrides(settings: Settings, **overrides: Any) -> Settings:
    """Return settings with every non-None override applied and validated."""
    changes = {k: v for k, v in overrides.items() if v is not None}
    merged = replace(settings, **changes)

    if merged.color not in COLOR_MODES:
        raise ConfigError(
            f"color must be one of {', '.join(COLOR_MODES)}, got {merged.color!r}"
        )

    # Validates the theme name; imported late to keep config free of UI deps.
    from tada.ui.theme import get_theme

    get_theme(merged.theme)
    return merged


def setup_logging(verbose: bool = False) -> Optional[Path]:
    """Send log records to <tada home>/tada.log; the terminal stays clean.

    Returns None when the log file can't be opened; records are dropped then.
    """
    level = logging.DEBUG if verbose else logging.INFO
    log_path = tada_home() / LOG_FILE_NAME
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logging.basicConfig(
            filename=log_path,
            level=level,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
    except OSError:
        logging.basicConfig(level=level, handlers=[logging.NullHandler()])
        return None
    return log_path
