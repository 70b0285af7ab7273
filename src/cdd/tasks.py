from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Tuple

from .config import TASK_EXTENSION
from .errors import TaskReadError

DOCUMENT_SEPARATOR = "\n\n---\n\n"


@dataclass(frozen=True)
class TaskItem:
    label: str
    path: Path
    is_container: bool


def _walk(directory: Path) -> Iterator[Tuple[Path, bool]]:
    """Depth-first walk yielding ``(path, is_dir)``; subdirectories before files."""
    entries = sorted(directory.iterdir(), key=lambda p: p.name)
    subdirs = [entry for entry in entries if entry.is_dir()]
    files = [entry for entry in entries if entry.is_file()]
    for subdir in subdirs:
        yield subdir, True
        yield from _walk(subdir)
    for file_path in files:
        if file_path.name.endswith(TASK_EXTENSION):
            yield file_path, False


def _label(root: Path, path: Path, is_container: bool) -> str:
    label = path.relative_to(root).as_posix()
    return f"{label}/" if is_container else label


def collect_tasks(root: Path) -> List[TaskItem]:
    """List task directories and documents under ``root``.

    Directories come first, then documents, each group sorted by label.
    """
    items = [
        TaskItem(label=_label(root, path, is_dir), path=path.resolve(), is_container=is_dir)
        for path, is_dir in _walk(root)
    ]
    items.sort(key=lambda item: (not item.is_container, item.label))
    return items


def read_document(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise TaskReadError(path, "not valid UTF-8 text") from exc


def iter_documents(container: Path) -> Iterator[Path]:
    for path, is_dir in _walk(container):
        if not is_dir:
            yield path


def read_container(container: Path) -> Tuple[str, int]:
    parts: List[str] = []
    for document in iter_documents(container):
        contents = read_document(document)
        parts.append(f"## File: {document.resolve()}\n\n{contents}")
    return DOCUMENT_SEPARATOR.join(parts), len(parts)


def build_task_prompt(item: TaskItem) -> Tuple[str, int]:
    """Return the prompt for a selected item and how many documents it holds."""
    if item.is_container:
        return read_container(item.path)
    return read_document(item.path), 1
