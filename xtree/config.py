"""Read-only JSON defaults for the xtree CLI.

Looks for ``config.json`` in the platform config directory (or the file named
by ``XTREE_CONFIG``). Malformed or missing config falls back to built-in
defaults; xtree never writes this file.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .errors import InvalidArgument
from .file_tree_model import DEFAULT_MAX_DEPTH, validate_depth
from .render import COLOR_MODES

logger = logging.getLogger(__name__)

APP_NAME = "xtree"
CONFIG_FILENAME = "config.json"
CONFIG_ENV_VAR = "XTREE_CONFIG"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


@dataclass(frozen=True)
class Defaults:
    """Effective defaults applied before CLI flags."""

    depth: int = DEFAULT_MAX_DEPTH
    color: str = "auto"
    show_hidden: bool = True
    dirs_only: bool = False


def config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR, "").strip()
    if override:
        return Path(override).expanduser()
    return DEFAULT_CONFIG_PATH


def load_config(path: Path | None = None) -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    target = path if path is not None else config_path()
    try:
        raw = target.read_text(encoding="utf-8")
    except FileNotFoundError:
        return {}
    except OSError as exc:
        logger.warning("ignoring unreadable config %s: %s", target, exc)
        return {}
    try:
        data = json.loads(raw)
    except ValueError as exc:
        logger.warning("ignoring malformed config %s: %s", target, exc)
        return {}
    return data if isinstance(data, dict) else {}


def _coerce_bool(value: object, fallback: bool) -> bool:
    # Only explicit JSON booleans count.
    return value if isinstance(value, bool) else fallback


def load_defaults(path: Path | None = None) -> Defaults:
    """Merge validated config values over the built-in defaults."""
    data = load_config(path)
    base = Defaults()

    depth = base.depth
    if "depth" in data:
        try:
            depth = validate_depth(data["depth"])
        except InvalidArgument as exc:
            logger.warning("ignoring config depth: %s", exc)

    color = data.get("color", base.color)
    if color not in COLOR_MODES:
        logger.warning("ignoring config color %r", color)
        color = base.color

    return Defaults(
        depth=depth,
        color=str(color),
        show_hidden=_coerce_bool(data.get("show_hidden"), base.show_hidden),
        dirs_only=_coerce_bool(data.get("dirs_only"), base.dirs_only),
    )


__all__ = [
    "APP_NAME",
    "CONFIG_ENV_VAR",
    "DEFAULT_CONFIG_PATH",
    "Defaults",
    "config_path",
    "load_config",
    "load_defaults",
]
