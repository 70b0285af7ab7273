"""Read-only view of the reference files bundled with cdd.

The tree is loaded once at start-up and handed to the bootstrap and install
steps, which only ever query it.  Tests build synthetic trees with
:meth:`AssetDir.from_mapping`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import Dict, Mapping, Optional, Tuple, Union

BUNDLED_REFERENCE = Path(__file__).parent / "_reference"

SKIP_NAMES = {"__pycache__", ".DS_Store"}


@dataclass(frozen=True)
class AssetFile:
    path: PurePosixPath
    contents: bytes

    @property
    def name(self) -> str:
        return self.path.name


@dataclass(frozen=True)
class AssetDir:
    path: PurePosixPath
    _files: Tuple[AssetFile, ...] = field(default=())
    _dirs: Tuple["AssetDir", ...] = field(default=())

    @property
    def name(self) -> str:
        return self.path.name

    def files(self) -> Tuple[AssetFile, ...]:
        """Files directly inside this directory, sorted by name."""
        return self._files

    def dirs(self) -> Tuple["AssetDir", ...]:
        """Immediate subdirectories, sorted by name."""
        return self._dirs

    def get_dir(self, relative: str) -> Optional["AssetDir"]:
        node: Optional[AssetDir] = self
        for part in PurePosixPath(relative).parts:
            if node is None:
                return None
            node = next((child for child in node._dirs if child.name == part), None)
        return node

    @classmethod
    def from_path(cls, root: Path, _relative: PurePosixPath = PurePosixPath("")) -> "AssetDir":
        """Snapshot a directory on disk into memory."""
        files = []
        dirs = []
        for entry in sorted(root.iterdir(), key=lambda p: p.name):
            if entry.name in SKIP_NAMES:
                continue
            relative = _relative / entry.name
            if entry.is_dir():
                dirs.append(cls.from_path(entry, relative))
            elif entry.is_file():
                files.append(AssetFile(relative, entry.read_bytes()))
        return cls(_relative, tuple(files), tuple(dirs))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Union[str, bytes]]) -> "AssetDir":
        """Build a tree from ``{"rules/base.md": "..."}`` style entries."""
        nested: Dict[str, object] = {}
        for key, value in mapping.items():
            parts = PurePosixPath(key).parts
            cursor = nested
            for part in parts[:-1]:
                cursor = cursor.setdefault(part, {})  # type: ignore[assignment]
            data = value.encode("utf-8") if isinstance(value, str) else value
            cursor[parts[-1]] = data
        return cls._from_nested(nested, PurePosixPath(""))

    @classmethod
    def _from_nested(cls, nested: Mapping[str, object], relative: PurePosixPath) -> "AssetDir":
        files = []
        dirs = []
        for name in sorted(nested):
            value = nested[name]
            if isinstance(value, dict):
                dirs.append(cls._from_nested(value, relative / name))
            else:
                files.append(AssetFile(relative / name, value))  # type: ignore[arg-type]
        return cls(relative, tuple(files), tuple(dirs))


def load_bundled_reference(root: Path = BUNDLED_REFERENCE) -> AssetDir:
    if not root.is_dir():
        raise FileNotFoundError(f"Bundled reference directory missing: {root}")
    return AssetDir.from_path(root)
