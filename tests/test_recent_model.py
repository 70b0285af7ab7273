from __future__ import annotations

import json
from pathlib import Path

import pytest

from cdd.recent_model import most_recent_model


def _write(path: Path, payload) -> Path:
    path.write_text(payload if isinstance(payload, str) else json.dumps(payload))
    return path


def test_first_recent_entry_wins(tmp_path: Path):
    state = _write(
        tmp_path / "model.json",
        {
            "recent": [
                {"providerID": "anthropic", "modelID": "claude-sonnet-4"},
                {"providerID": "openai", "modelID": "gpt-5"},
            ]
        },
    )

    assert most_recent_model(state) == "anthropic/claude-sonnet-4"


def test_missing_file(tmp_path: Path):
    assert most_recent_model(tmp_path / "absent.json") is None


@pytest.mark.parametrize(
    "payload",
    [
        "{not json",
        [],
        {},
        {"recent": []},
        {"recent": "anthropic"},
        {"recent": ["anthropic/claude"]},
        {"recent": [{"providerID": "anthropic"}]},
        {"recent": [{"providerID": "", "modelID": "x"}]},
        {"recent": [{"providerID": 1, "modelID": 2}]},
    ],
)
def test_unusable_state_is_ignored(tmp_path: Path, payload):
    assert most_recent_model(_write(tmp_path / "model.json", payload)) is None
