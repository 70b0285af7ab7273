from __future__ import annotations

from . import __version__
from .agents import launch
from .assets import AssetDir
from .bootstrap import ensure_context_extracted, is_initialized
from .config import Config
from .errors import CddError, NotInstalledError
from .output import info, success, warning
from .profiles import PROFILES, Profile, install_profile, profile_by_label, profile_by_name, resolve_profile
from .selector import select_one, select_task
from .tasks import build_task_prompt, collect_tasks


def choose_profile(cfg: Config) -> Profile:
    if cfg.profile_name:
        profile = profile_by_name(cfg.profile_name)
        if profile is None:
            raise CddError(f"Unknown profile '{cfg.profile_name}'")
        return profile
    label = select_one(
        [profile.label for profile in PROFILES],
        "Choose your development environment",
        fzf_bin=cfg.fzf_bin,
    )
    profile = profile_by_label(label)
    if profile is None:
        raise CddError(f"Unknown profile '{label}'")
    return profile


def run_install(cfg: Config, reference: AssetDir) -> None:
    profile = choose_profile(cfg)

    ensure_context_extracted(cfg, reference, __version__)

    report = install_profile(profile, cfg.workspace, reference)
    target = f"{profile.target_root}/{profile.command_subdir}/"
    if report.copied:
        success("✓ Copied %s command file(s) to %s", len(report.copied), target)
    if report.kept:
        info("  Kept %s existing command file(s) in %s", len(report.kept), target)

    success("\n✓ Setup complete for %s", profile.label)


def run_task(cfg: Config, reference: AssetDir) -> None:
    if not is_initialized(cfg):
        raise NotInstalledError(".context/tasks/ directory not found.")

    ensure_context_extracted(cfg, reference, __version__)
    profile = resolve_profile(cfg.workspace)

    items = collect_tasks(cfg.tasks_path)
    if not items:
        info("No tasks found in .context/tasks/")
        info("Tasks will appear here after you create them.")
        return

    item = select_task(items, cfg.tasks_path, fzf_bin=cfg.fzf_bin)
    prompt, documents = build_task_prompt(item)
    if item.is_container and documents == 0:
        warning("No task documents found in %s; nothing to run.", item.label)
        return

    if item.is_container:
        success("Selected: %s (%s document(s))", item.label, documents)
    else:
        success("Selected: %s", item.label)
    info("Launching %s...", profile.label)

    status = launch(profile, prompt, cfg.workspace, cfg.opencode_state_path)
    if status != 0:
        warning("Warning: %s exited with status %s", profile.executable, status)
