from __future__ import annotations

import argparse
import os
import sys
import textwrap
from typing import List, NoReturn

from . import __version__
from .config import DEFAULT_FZF, Config, workspace_from_env
from .output import error, info
from .profiles import PROFILES, profile_by_name

COMMAND_ALIASES = {
    "run": "run",
    "install": "install",
    "setup": "install",
    "uninstall": "uninstall",
    "rm": "uninstall",
    "remove": "uninstall",
}

VERSION_LINE = f"cdd (context-driven-development) {__version__}"

HELP_TEXT = textwrap.dedent(
    f"""\
    {VERSION_LINE}

    Usage: cdd [COMMAND] [OPTIONS]

    Commands:
      (no args), run             Pick a task from .context/tasks/ and launch the assistant
      install, setup             Set up .context/ and the assistant command files
      uninstall, rm, remove      Remove CDD files from the current directory

    Options:
      -p, --profile NAME         Profile for install: claude or opencode (prompts if omitted)
      -v, --version              Print version information
      -h, --help                 Show this help message

    Examples:
      cdd install                # Choose Claude Code or OpenCode interactively
      cdd setup -p opencode      # Install the OpenCode profile
      cdd                        # Fuzzy-find a task and run it
      cdd rm                     # Remove CDD files
    """
)


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        if "--profile" in message and "expected one argument" in message:
            usage_error("--profile requires a value", "Usage: cdd install --profile <claude|opencode>")
        usage_error(message)


def usage_error(*lines: str) -> NoReturn:
    for index, line in enumerate(lines):
        error(("Error: " if index == 0 else "") + line)
    error("Run 'cdd --help' for usage information.")
    sys.exit(1)


def parse_args(argv: List[str]) -> Config:
    parser = _Parser(prog="cdd", add_help=False, allow_abbrev=False)
    parser.add_argument("command", nargs="?")
    parser.add_argument("-p", "--profile", dest="profile_name")
    parser.add_argument("-v", "--version", action="store_true")
    parser.add_argument("-h", "--help", action="store_true")

    args = parser.parse_args(argv)

    if args.help:
        info(HELP_TEXT)
        raise SystemExit(0)
    if args.version:
        info(VERSION_LINE)
        raise SystemExit(0)

    command = COMMAND_ALIASES.get(args.command or "run")
    if command is None:
        usage_error(f"Unknown command: {args.command}")

    if args.profile_name is not None:
        if profile_by_name(args.profile_name) is None:
            usage_error(
                f"Unknown profile '{args.profile_name}'",
                "Valid profiles: " + ", ".join(profile.name for profile in PROFILES),
            )
        if args.command is None:
            command = "install"
        elif command != "install":
            usage_error(f"--profile is only valid with install, not {args.command}")

    return Config(
        command=command,
        workspace=workspace_from_env(),
        profile_name=args.profile_name,
        fzf_bin=os.environ.get("CDD_FZF_BIN", DEFAULT_FZF),
        raw_args=list(argv),
    )
