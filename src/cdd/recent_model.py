from __future__ import annotations

import json
from pathlib import Path
from typing import Optional


def load_model_state(state_path: Path) -> dict:
    """Load opencode's model state file; anything unreadable counts as empty."""
    if not state_path.is_file():
        return {}
    try:
        with open(state_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError, OSError):
        return {}
    return data if isinstance(data, dict) else {}


def most_recent_model(state_path: Path) -> Optional[str]:
    """Return ``provider/model`` for the first entry of ``recent``, if any."""
    recent = load_model_state(state_path).get("recent")
    if not isinstance(recent, list) or not recent:
        return None
    entry = recent[0]
    if not isinstance(entry, dict):
        return None
    provider = entry.get("providerID")
    model = entry.get("modelID")
    if not isinstance(provider, str) or not isinstance(model, str):
        return None
    if not provider.strip() or not model.strip():
        return None
    return f"{provider.strip()}/{model.strip()}"
