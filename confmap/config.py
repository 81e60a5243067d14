"""Bundled settings for confmap itself.

Loads confmap/settings.json once at first access. This is the package's own
metadata and defaults, not the application config served by ConfigStore.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

_config: dict[str, Any] | None = None
_CONFIG_PATH = Path(__file__).resolve().parent / "settings.json"


def get_config() -> dict[str, Any]:
    """Return the bundled settings, loading from disk on first call."""
    global _config
    if _config is None:
        with open(_CONFIG_PATH, encoding="utf-8") as f:
            _config = json.load(f)
    return _config


def _reset() -> None:
    """Reset cached settings (for testing only)."""
    global _config
    _config = None
