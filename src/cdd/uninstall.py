from __future__ import annotations

import shutil
from pathlib import Path

from .config import CONTEXT_DIR
from .output import info, success
from .profiles import PROFILES


def uninstall(workspace: Path) -> int:
    """Remove everything cdd created in ``workspace``; returns the number of removed items.

    Profile directories may hold other tool settings, so only the command
    folder is removed and the profile directory itself only when left empty.
    """
    info("Uninstalling CDD files...")
    removed = 0

    context_path = workspace / CONTEXT_DIR
    if context_path.exists():
        shutil.rmtree(context_path)
        success("  ✓ Removed %s/", CONTEXT_DIR)
        removed += 1

    for profile in PROFILES:
        profile_dir = workspace / profile.target_root
        if not profile_dir.is_dir():
            continue
        command_dir = profile_dir / profile.command_subdir
        if command_dir.exists():
            shutil.rmtree(command_dir)
            success("  ✓ Removed %s/%s/", profile.target_root, profile.command_subdir)
            removed += 1
        if not any(profile_dir.iterdir()):
            profile_dir.rmdir()
            success("  ✓ Removed %s/ (was empty)", profile.target_root)
            removed += 1

    if removed == 0:
        info("  No CDD files found to remove.")
    else:
        success("\n✅ Uninstall complete! Removed %s item(s).", removed)
        info("Note: This only removed CDD files from the current directory.")
    return removed
