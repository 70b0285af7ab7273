from __future__ import annotations

from pathlib import Path, PurePosixPath

from cdd.assets import AssetDir, load_bundled_reference


def test_from_mapping_orders_children(reference: AssetDir):
    assert [d.name for d in reference.dirs()] == ["commands", "drafts", "rules", "templates"]
    assert [f.name for f in reference.files()] == ["README.md"]
    rules = reference.get_dir("rules")
    assert rules is not None
    assert [f.name for f in rules.files()] == ["base.md"]
    assert rules.get_dir("languages").files()[0].path == PurePosixPath("rules/languages/python.md")


def test_lookup_misses_return_none(reference: AssetDir):
    assert reference.get_dir("missing") is None
    assert reference.get_dir("rules/missing/deeper") is None
    assert reference.get_dir("rules/base.md") is None
    assert [f.contents for f in reference.get_dir("commands").files()] == [b"create a task\n", b"run a task\n"]


def test_from_path_snapshots_directory(tmp_path: Path):
    root = tmp_path / "ref"
    (root / "rules").mkdir(parents=True)
    (root / "rules" / "a.md").write_bytes(b"\x00binary\xff")
    (root / "__pycache__").mkdir()
    (root / "__pycache__" / "junk.pyc").write_bytes(b"")

    tree = AssetDir.from_path(root)
    (root / "rules" / "a.md").write_bytes(b"changed")

    assert [d.name for d in tree.dirs()] == ["rules"]
    assert tree.get_dir("rules").files()[0].contents == b"\x00binary\xff"


def test_bundled_reference_ships_all_sections():
    tree = load_bundled_reference()
    for name in ("rules", "templates", "commands"):
        node = tree.get_dir(name)
        assert node is not None, name
        assert node.files(), name
