"""JSON configuration loading.

The config file holds external program commands and view preferences. It is
only read: missing or malformed files silently fall back to the defaults.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir, user_log_dir

APP_NAME = "panecmder"
CONFIG_FILENAME = "config.json"
LOG_FILENAME = "panecmder.log"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
DEFAULT_LOG_PATH = Path(user_log_dir(APP_NAME, appauthor=False)) / LOG_FILENAME
DEFAULT_VIEWER = "less -R"
DEFAULT_STYLE = "monokai"


def default_editor() -> str:
    return os.environ.get("EDITOR", "").strip() or "vi"


@dataclass(frozen=True)
class Config:
    viewer: str = DEFAULT_VIEWER
    editor: str = "vi"
    highlight: bool = True
    style: str = DEFAULT_STYLE
    log_file: Path = DEFAULT_LOG_PATH


def load_config_data(config_path: Path | None = None) -> dict[str, object]:
    """Load the raw JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    path = config_path if config_path is not None else DEFAULT_CONFIG_PATH
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def _lookup(data: dict[str, object], dotted_key: str) -> object | None:
    """Return ``data["a.b"]`` or ``data["a"]["b"]`` for ``dotted_key == "a.b"``."""
    if dotted_key in data:
        return data[dotted_key]
    node: object = data
    for part in dotted_key.split("."):
        if not isinstance(node, dict) or part not in node:
            return None
        node = node[part]
    return node


def _string(data: dict[str, object], key: str, default: str) -> str:
    value = _lookup(data, key)
    if isinstance(value, str) and value.strip():
        return value.strip()
    return default


def load_config(config_path: Path | None = None) -> Config:
    """Build a :class:`Config` from the JSON file, falling back per key."""
    data = load_config_data(config_path)
    highlight = _lookup(data, "view.highlight")
    log_file = _lookup(data, "log.file")
    return Config(
        viewer=_string(data, "cmd.viewer", DEFAULT_VIEWER),
        editor=_string(data, "cmd.editor", default_editor()),
        highlight=highlight if isinstance(highlight, bool) else True,
        style=_string(data, "view.style", DEFAULT_STYLE),
        log_file=Path(log_file).expanduser() if isinstance(log_file, str) and log_file.strip() else DEFAULT_LOG_PATH,
    )
