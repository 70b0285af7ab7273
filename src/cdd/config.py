from __future__ import annotations

import os
import platform
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

CONTEXT_DIR = ".context"
REFERENCE_DIR = "_reference"
TASKS_DIR = "tasks"
VERSION_FILE = ".version"
TASK_EXTENSION = ".md"

DEFAULT_FZF = "fzf"


def default_opencode_state_path() -> Path:
    """Location of the state file where opencode records recently used models."""
    override = os.environ.get("CDD_OPENCODE_STATE")
    if override:
        return Path(override).expanduser()
    xdg_state = os.environ.get("XDG_STATE_HOME")
    if xdg_state:
        return Path(xdg_state) / "opencode" / "model.json"
    if platform.system() == "Windows":
        local_appdata = os.environ.get("LOCALAPPDATA")
        if local_appdata:
            return Path(local_appdata) / "opencode" / "model.json"
    return Path.home() / ".local" / "state" / "opencode" / "model.json"


def agent_bin(name: str) -> str:
    return os.environ.get(f"CDD_{name.upper()}_BIN", name)


@dataclass
class Config:
    command: str
    workspace: Path
    profile_name: Optional[str] = None
    fzf_bin: str = DEFAULT_FZF
    opencode_state_path: Path = field(default_factory=default_opencode_state_path)
    raw_args: List[str] = field(default_factory=list)

    @property
    def context_path(self) -> Path:
        return self.workspace / CONTEXT_DIR

    @property
    def reference_path(self) -> Path:
        return self.context_path / REFERENCE_DIR

    @property
    def tasks_path(self) -> Path:
        return self.context_path / TASKS_DIR

    @property
    def version_path(self) -> Path:
        return self.context_path / VERSION_FILE


def workspace_from_env() -> Path:
    return Path(os.environ.get("CDD_WORKSPACE") or Path.cwd())
