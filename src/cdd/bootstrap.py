from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import FrozenSet

from .assets import AssetDir
from .config import Config
from .output import success


@dataclass(frozen=True)
class MergePolicy:
    allowed_top_level_subdirs: FrozenSet[str]

    def allows(self, name: str) -> bool:
        return name in self.allowed_top_level_subdirs


# commands/ is copied per profile by the installer, never into .context
REFERENCE_POLICY = MergePolicy(frozenset({"rules", "templates"}))


def extract_dir_all(node: AssetDir, target: Path) -> int:
    """Recreate ``node`` under ``target``, overwriting every file. Returns files written."""
    target.mkdir(parents=True, exist_ok=True)
    written = 0
    for asset in node.files():
        (target / asset.name).write_bytes(asset.contents)
        written += 1
    for child in node.dirs():
        written += extract_dir_all(child, target / child.name)
    return written


def extract_reference(
    reference: AssetDir,
    target_root: Path,
    policy: MergePolicy = REFERENCE_POLICY,
) -> int:
    """Materialize the managed part of ``reference`` into ``target_root``.

    Files at the top level are always written.  Top-level directories are
    only descended into when the policy allows them; below that everything
    is copied.  Existing files are overwritten since this content is managed.
    """
    target_root.mkdir(parents=True, exist_ok=True)
    written = 0
    for asset in reference.files():
        (target_root / asset.name).write_bytes(asset.contents)
        written += 1
    for child in reference.dirs():
        if not policy.allows(child.name):
            continue
        written += extract_dir_all(child, target_root / child.name)
    return written


def ensure_context_extracted(cfg: Config, reference: AssetDir, version: str) -> None:
    success("Extracting %s files (version %s)...", _display(cfg, cfg.reference_path), version)
    cfg.context_path.mkdir(parents=True, exist_ok=True)
    extract_reference(reference, cfg.reference_path)
    # tasks/ belongs to the user; create it once and never touch it again
    cfg.tasks_path.mkdir(parents=True, exist_ok=True)
    cfg.version_path.write_text(version, encoding="utf-8")
    success("✓ Extracted %s files", _display(cfg, cfg.reference_path))


def installed_version(cfg: Config) -> str | None:
    try:
        return cfg.version_path.read_text(encoding="utf-8").strip() or None
    except FileNotFoundError:
        return None


def is_initialized(cfg: Config) -> bool:
    return installed_version(cfg) is not None and cfg.tasks_path.is_dir()


def _display(cfg: Config, path: Path) -> str:
    try:
        return path.relative_to(cfg.workspace).as_posix()
    except ValueError:
        return str(path)
