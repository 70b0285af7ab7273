from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from .assets import AssetDir
from .errors import NotInstalledError

COMMANDS_ASSET_DIR = "commands"


def _claude_args(prompt: str, model: Optional[str]) -> List[str]:
    return [prompt]


def _opencode_args(prompt: str, model: Optional[str]) -> List[str]:
    args: List[str] = []
    if model:
        args.extend(["--model", model])
    args.extend(["--prompt", prompt])
    return args


@dataclass(frozen=True)
class Profile:
    name: str
    label: str
    target_root: str
    command_subdir: str
    executable: str
    build_args: Callable[[str, Optional[str]], List[str]]
    remembers_model: bool = False
    aliases: Tuple[str, ...] = ()

    def command_dir(self, workspace: Path) -> Path:
        return workspace / self.target_root / self.command_subdir


CLAUDE = Profile(
    name="claude",
    label="Claude Code",
    target_root=".claude",
    command_subdir="commands",
    executable="claude",
    build_args=_claude_args,
    aliases=("claudecode", "claude-code"),
)

OPENCODE = Profile(
    name="opencode",
    label="OpenCode",
    target_root=".opencode",
    command_subdir="command",
    executable="opencode",
    build_args=_opencode_args,
    remembers_model=True,
    aliases=("open-code",),
)

# Order doubles as the tie-break when more than one profile is installed.
PROFILES: Tuple[Profile, ...] = (CLAUDE, OPENCODE)


def profile_by_name(name: str) -> Optional[Profile]:
    wanted = name.strip().lower()
    for profile in PROFILES:
        if wanted == profile.name or wanted in profile.aliases:
            return profile
    return None


def profile_by_label(label: str) -> Optional[Profile]:
    return next((profile for profile in PROFILES if profile.label == label), None)


@dataclass
class InstallReport:
    copied: List[str]
    kept: List[str]


def install_profile(profile: Profile, workspace: Path, reference: AssetDir) -> InstallReport:
    """Copy command definitions for ``profile`` without overwriting user edits."""
    root = workspace / profile.target_root
    root.mkdir(exist_ok=True)
    command_dir = root / profile.command_subdir
    command_dir.mkdir(parents=True, exist_ok=True)

    report = InstallReport(copied=[], kept=[])
    commands = reference.get_dir(COMMANDS_ASSET_DIR)
    if commands is None:
        return report
    for asset in commands.files():
        destination = command_dir / asset.name
        if destination.exists():
            report.kept.append(asset.name)
            continue
        destination.write_bytes(asset.contents)
        report.copied.append(asset.name)
    return report


def resolve_profile(workspace: Path) -> Profile:
    for profile in PROFILES:
        if profile.command_dir(workspace).is_dir():
            return profile
    expected = ", ".join(f"{p.target_root}/{p.command_subdir}/" for p in PROFILES)
    raise NotInstalledError(f"No assistant profile installed (looked for {expected}).")
