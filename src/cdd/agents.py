from __future__ import annotations

import subprocess
from pathlib import Path
from typing import List, Optional

from .config import agent_bin
from .errors import LaunchError
from .profiles import Profile
from .recent_model import most_recent_model


def build_agent_command(profile: Profile, prompt: str, state_path: Optional[Path]) -> List[str]:
    """argv for launching ``profile``'s assistant with ``prompt``.

    The executable can be overridden with ``CDD_<NAME>_BIN``.
    """
    model = None
    if profile.remembers_model and state_path is not None:
        model = most_recent_model(state_path)
    return [agent_bin(profile.executable), *profile.build_args(prompt, model)]


def launch(profile: Profile, prompt: str, workspace: Path, state_path: Optional[Path] = None) -> int:
    """Run the assistant in ``workspace`` and wait for it; returns its exit status."""
    command = build_agent_command(profile, prompt, state_path)
    try:
        completed = subprocess.run(command, cwd=workspace)
    except FileNotFoundError as exc:
        raise LaunchError(command[0], "command not found") from exc
    except PermissionError as exc:
        raise LaunchError(command[0], "permission denied") from exc
    return completed.returncode
