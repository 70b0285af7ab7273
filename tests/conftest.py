from __future__ import annotations

import os
from pathlib import Path
from types import SimpleNamespace

import pytest

from cdd.assets import AssetDir
from cdd.config import Config

PROJECT_ROOT = Path(__file__).resolve().parents[1]

REFERENCE_FILES = {
    "README.md": "managed readme\n",
    "rules/base.md": "# Base\n",
    "rules/languages/python.md": "# Python\n",
    "templates/task.md": "# Task template\n",
    "commands/create-task.md": "create a task\n",
    "commands/run-task.md": "run a task\n",
    "drafts/unpublished.md": "not for users\n",
}


@pytest.fixture
def reference() -> AssetDir:
    return AssetDir.from_mapping(REFERENCE_FILES)


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    ws = tmp_path / "project"
    ws.mkdir()
    return ws


@pytest.fixture
def cfg(workspace: Path, tmp_path: Path) -> Config:
    return Config(
        command="run",
        workspace=workspace,
        opencode_state_path=tmp_path / "state" / "model.json",
    )


@pytest.fixture
def fake_bin(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Directory of stand-in executables that log how they were called."""
    bin_dir = tmp_path / "tools"
    bin_dir.mkdir()
    logs = {}

    def _write_tool(name: str) -> None:
        log_path = tmp_path / f"{name}.args"
        logs[name] = log_path
        script_path = bin_dir / name
        script_path.write_text(
            "#!/usr/bin/env bash\n"
            f"pwd > {log_path}.cwd\n"
            f"printf '%s\\0' \"$@\" > {log_path}\n"
            "exit ${FAKE_AGENT_EXIT:-0}\n"
        )
        script_path.chmod(0o755)

    for tool in ("claude", "opencode"):
        _write_tool(tool)

    fzf_path = bin_dir / "fzf"
    fzf_path.write_text(
        "#!/usr/bin/env bash\n"
        "cat > /dev/null\n"
        "if [ -z \"$FAKE_FZF_CHOICE\" ]; then\n"
        "  exit 130\n"
        "fi\n"
        "echo \"$FAKE_FZF_CHOICE\"\n"
    )
    fzf_path.chmod(0o755)

    monkeypatch.setenv("PATH", f"{bin_dir}{os.pathsep}{os.environ.get('PATH', '')}")

    def read_args(name: str) -> list[str] | None:
        log_path = logs[name]
        if not log_path.exists():
            return None
        return log_path.read_text().split("\0")[:-1]

    def read_cwd(name: str) -> str:
        return Path(f"{logs[name]}.cwd").read_text().strip()

    return SimpleNamespace(dir=bin_dir, logs=logs, args=read_args, cwd=read_cwd)


@pytest.fixture
def cli_environment(tmp_path: Path, fake_bin, workspace: Path):
    env = os.environ.copy()
    env["PYTHONPATH"] = str(PROJECT_ROOT / "src")
    env["CDD_OPENCODE_STATE"] = str(tmp_path / "state" / "model.json")
    env.pop("CDD_WORKSPACE", None)
    for name in ("FAKE_FZF_CHOICE", "FAKE_AGENT_EXIT", "CDD_CLAUDE_BIN", "CDD_OPENCODE_BIN", "CDD_FZF_BIN"):
        env.pop(name, None)
    return SimpleNamespace(env=env, tools=fake_bin, workspace=workspace)



@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch):
    for name in ("CDD_CLAUDE_BIN", "CDD_OPENCODE_BIN", "CDD_FZF_BIN", "CDD_WORKSPACE", "CDD_OPENCODE_STATE"):
        monkeypatch.delenv(name, raising=False)
