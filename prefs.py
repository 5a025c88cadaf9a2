"""Device-local preferences (theme and language), kept outside the log store."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from models import LANGUAGES, THEMES, Preferences

logger = logging.getLogger(__name__)


def _get_prefs_path() -> Path:
    """Get preferences path from environment variable or default location."""
    if env_path := os.environ.get("INTERNLOG_PREFS"):
        return Path(env_path)
    return Path(__file__).parent / "data" / "prefs.json"


PREFS_PATH = _get_prefs_path()


def load_preferences() -> Preferences:
    """Read saved preferences, falling back to defaults for anything unusable."""
    prefs = Preferences()
    if not PREFS_PATH.exists():
        return prefs

    try:
        data = json.loads(PREFS_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable preferences file %s: %s", PREFS_PATH, exc)
        return prefs
    if not isinstance(data, dict):
        return prefs

    if data.get("theme") in THEMES:
        prefs.theme = data["theme"]
    if data.get("language") in LANGUAGES:
        prefs.language = data["language"]
    return prefs


def save_preferences(prefs: Preferences) -> None:
    PREFS_PATH.parent.mkdir(parents=True, exist_ok=True)
    PREFS_PATH.write_text(
        json.dumps({"theme": prefs.theme, "language": prefs.language}, indent=2),
        encoding="utf-8",
    )
    logger.debug("Saved preferences to %s", PREFS_PATH)


def next_theme(theme: str) -> str:
    """Cycle dark -> blue -> light -> dark."""
    if theme not in THEMES:
        return THEMES[0]
    return THEMES[(THEMES.index(theme) + 1) % len(THEMES)]
