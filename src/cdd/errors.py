from __future__ import annotations

from pathlib import Path


class CddError(Exception):
    """Base class for conditions the CLI reports without a traceback."""


class NotInstalledError(CddError):
    """The workspace is missing the structure created by ``cdd install``."""

    hint = "Run 'cdd install' first to initialize the project."


class LaunchError(CddError):
    """An external program could not be started."""

    def __init__(self, executable: str, reason: str | None = None) -> None:
        self.executable = executable
        self.reason = reason
        message = f"Could not start '{executable}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)

    @property
    def hint(self) -> str:
        return f"Check that `{self.executable}` is installed and on your PATH."


class SelectionCancelled(CddError):
    """The user aborted an interactive choice."""

    def __init__(self, message: str = "Selection cancelled.") -> None:
        super().__init__(message)


class TaskReadError(CddError):
    """A task document could not be decoded as text."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Could not read task file {path}: {reason}")
