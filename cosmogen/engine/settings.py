"""settings.json loading shared by the logger and universe configuration."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

SETTINGS_PATH = Path("settings.json")


def load_settings(path: Path | None = None) -> Dict[str, Any]:
    """Read a settings file, returning an empty mapping when it is unusable."""

    path = path or SETTINGS_PATH
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text())
    except json.JSONDecodeError:
        return {}
    if not isinstance(data, dict):
        return {}
    return data


__all__ = ["SETTINGS_PATH", "load_settings"]
