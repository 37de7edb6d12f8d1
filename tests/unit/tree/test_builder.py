"""Unit tests for tree reconstruction.

Tests for path_key and build() with synthetic entry lists.
"""

import random
from pathlib import Path, PurePosixPath

import pytest
from pathtree.tree.builder import build, path_key
from pathtree.tree.errors import BuildError, OrphanEntryError, TreeInsertionError
from pathtree.tree.models import Entry, Tree


def _entries(*specs: str) -> list[Entry]:
    """Create entries from specs; a trailing '/' marks a directory."""
    return [
        Entry(path=Path(spec.rstrip("/")), is_file=not spec.endswith("/")) for spec in specs
    ]


TESTDATA_ENTRIES = (
    "testdata/a/",
    "testdata/a/b/",
    "testdata/a/b/c/",
    "testdata/a/b/c/.gitkeep",
    "testdata/a/b/d/",
    "testdata/a/b/d/.gitkeep",
    "testdata/a/e/",
    "testdata/a/e/.gitkeep",
    "testdata/a/f",
)


def _assert_well_formed(tree: Tree) -> None:
    """Check parent links and sibling order for every node."""
    for node_id in tree.traverse_pre_order_ids():
        node = tree.get(node_id)
        if node.parent is not None:
            assert tree.get(node.parent).data.path == node.data.path.parent
        keys = [path_key(tree.get(child).data.path) for child in node.children]
        assert keys == sorted(keys)


class TestPathKey:
    """Tests for canonical path keys."""

    def test_trailing_separator_is_dropped(self) -> None:
        """'testdata/' and 'testdata' share a key."""
        assert path_key(Path("testdata/")) == path_key(Path("testdata")) == "testdata"

    def test_segments_joined_with_slash(self) -> None:
        """Segments are joined with '/'."""
        assert path_key(Path("a") / "b" / "c") == "a/b/c"

    def test_absolute_path(self) -> None:
        """Absolute paths keep a single leading separator."""
        assert path_key(PurePosixPath("/srv/data/")) == "/srv/data"


class TestBuild:
    """Tests for build()."""

    def test_empty_entries_yield_root_only(self) -> None:
        """A root with no entries gives a one-node tree."""
        tree = build(Path("empty"), [])

        assert len(tree) == 1
        root_id = tree.root_node_id
        assert root_id is not None
        root = tree.get(root_id)
        assert root.data == Entry(path=Path("empty"), is_file=False)
        assert root.children == ()

    def test_testdata_pre_order(self, testdata_preorder: list[Path]) -> None:
        """The testdata layout produces the expected pre-order sequence."""
        tree = build(Path("testdata/"), _entries(*TESTDATA_ENTRIES))

        assert tree.paths() == testdata_preorder
        _assert_well_formed(tree)

    @pytest.mark.parametrize("seed", [0, 1, 7, 42])
    def test_discovery_order_does_not_leak(self, seed: int, testdata_preorder: list[Path]) -> None:
        """Shuffled input produces the same tree."""
        entries = _entries(*TESTDATA_ENTRIES)
        random.Random(seed).shuffle(entries)

        tree = build(Path("testdata"), entries)

        assert tree.paths() == testdata_preorder

    def test_siblings_sorted_by_full_path(self) -> None:
        """Siblings sort lexicographically by their slash-joined path."""
        tree = build(Path("r"), _entries("r/b", "r/B", "r/a.txt", "r/a/", "r/.hidden"))

        assert [str(p) for p in tree.paths()] == ["r", "r/.hidden", "r/B", "r/a", "r/a.txt", "r/b"]

    def test_root_is_directory_even_for_file_entries(self) -> None:
        """The root node is always created as a directory."""
        tree = build(Path("r"), _entries("r/x"))
        root_id = tree.root_node_id
        assert root_id is not None
        assert tree.get(root_id).data.is_file is False

    def test_missing_ancestor_raises_orphan_entry(self) -> None:
        """An entry whose parent was never yielded is an orphan."""
        entries = _entries("testdata/a/", "testdata/a/b/c/.gitkeep")

        with pytest.raises(OrphanEntryError) as exc_info:
            build(Path("testdata"), entries)

        assert exc_info.value.path == Path("testdata/a/b/c/.gitkeep")
        assert exc_info.value.parent == Path("testdata/a/b/c")
        assert isinstance(exc_info.value, BuildError)

    def test_entry_outside_root_is_orphan(self) -> None:
        """Entries not below the root cannot be attached."""
        with pytest.raises(OrphanEntryError):
            build(Path("root"), _entries("elsewhere/file"))

    def test_duplicate_entry_raises(self) -> None:
        """A path yielded twice is a tree insertion failure."""
        with pytest.raises(TreeInsertionError, match="Duplicate"):
            build(Path("r"), _entries("r/a", "r/a"))

    def test_absolute_root(self, tmp_path: Path) -> None:
        """Absolute paths are attached under an absolute root."""
        tree = build(tmp_path, [Entry(path=tmp_path / "x", is_file=True)])
        assert tree.paths() == [tmp_path, tmp_path / "x"]

    def test_builds_are_independent(self) -> None:
        """Each build owns its own tree."""
        first = build(Path("r"), _entries("r/a"))
        second = build(Path("r"), _entries("r/a"))

        assert first is not second
        assert first.paths() == second.paths()
        assert first.root_node_id != second.root_node_id
