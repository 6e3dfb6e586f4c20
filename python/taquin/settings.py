"""Default solver settings, optionally overridden by a JSON file.

Command-line options take precedence over both.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS: dict[str, Any] = {
    "strategy": "reduce",
    "search_mode": "minimize",
    "heuristic": "misplaced",
    "shuffle_moves": 100,
    "playback_delay": 0.05,
    "log_level": "WARNING",
}


def load_settings(path: Path | None = None) -> dict[str, Any]:
    """Load settings from *path*, merged over the defaults.

    A missing or unreadable file yields the defaults.  Unknown keys are
    ignored.
    """
    result = DEFAULT_SETTINGS.copy()
    if path is None:
        return result
    if not path.exists():
        logger.debug("Settings file %s not found, using defaults", path)
        return result

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Failed to load settings from %s: %s, using defaults", path, e)
        return result

    if not isinstance(data, dict):
        logger.warning("Settings file %s is not a JSON object, using defaults", path)
        return result

    for key, value in data.items():
        if key in result:
            result[key] = value
        else:
            logger.debug("Ignoring unknown setting %r", key)
    return result
