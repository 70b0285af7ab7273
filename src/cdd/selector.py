from __future__ import annotations

import subprocess
from pathlib import Path
from typing import List, Optional, Sequence

from .errors import LaunchError, SelectionCancelled
from .tasks import TaskItem

TASK_PREVIEW = (
    "if [ -d {} ]; then ls -1 {}; "
    "else bat --color=always --style=plain {} 2>/dev/null || cat {}; fi"
)


def run_fzf_selection(
    options: Sequence[str],
    prompt: str = "Select",
    *,
    fzf_bin: str = "fzf",
    extra_args: Optional[List[str]] = None,
    cwd: Optional[Path] = None,
) -> str:
    """Run fzf over ``options`` and return the chosen line.

    Raises SelectionCancelled when the user aborts or nothing is chosen.
    """
    cmd = [fzf_bin, "--prompt", f"{prompt}: "]
    if extra_args:
        cmd.extend(extra_args)
    try:
        result = subprocess.run(
            cmd,
            input="\n".join(options),
            text=True,
            stdout=subprocess.PIPE,
            cwd=cwd,
        )
    except FileNotFoundError as exc:
        raise LaunchError(fzf_bin, "fuzzy finder not found") from exc

    # labels may carry leading or trailing spaces; only the line break is fzf's
    output = result.stdout.rstrip("\n")
    if result.returncode != 0 or not output:
        raise SelectionCancelled()
    return output.split("\n", 1)[0]


def select_one(options: Sequence[str], prompt: str, *, fzf_bin: str = "fzf") -> str:
    """Single choice from a short fixed list."""
    choice = run_fzf_selection(options, prompt, fzf_bin=fzf_bin, extra_args=["--height", "~40%"])
    if choice not in options:
        raise SelectionCancelled()
    return choice


def select_task(items: Sequence[TaskItem], tasks_dir: Path, *, fzf_bin: str = "fzf") -> TaskItem:
    by_label = {item.label: item for item in items}
    choice = run_fzf_selection(
        [item.label for item in items],
        "Select a task",
        fzf_bin=fzf_bin,
        extra_args=[
            "--height",
            "50%",
            "--preview",
            TASK_PREVIEW,
            "--preview-window",
            "right:60%:wrap",
        ],
        cwd=tasks_dir,
    )
    if choice not in by_label:
        raise SelectionCancelled()
    return by_label[choice]
