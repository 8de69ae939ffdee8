"""Tests for test tree registration."""

from __future__ import annotations

from pathlib import Path

from ahkunit.testing.discovery import (
    build_file_node,
    collect_leaf_ids,
    discover_file,
    find_test_files,
)
from ahkunit.testing.identity import file_locator

SOURCE = """\
class MathTests {
    Adds() {
    }
    class Nested {
        Deep() => true
    }
}
"""


class TestFindTestFiles:
    """Tests for test file selection."""

    def test_glob_is_recursive_and_sorted(self, tmp_path: Path) -> None:
        (tmp_path / "sub").mkdir()
        (tmp_path / "b.test.ahk").write_text("")
        (tmp_path / "sub" / "a.test.ahk").write_text("")
        (tmp_path / "lib.ahk").write_text("")

        files = find_test_files(tmp_path, "**/*.test.ahk")

        expected = [tmp_path / "b.test.ahk", tmp_path / "sub" / "a.test.ahk"]
        assert files == sorted(p.resolve() for p in expected)

    def test_single_file(self, tmp_path: Path) -> None:
        path = tmp_path / "one.ahk"
        path.write_text("")
        assert find_test_files(path, "**/*.test.ahk") == [path.resolve()]


class TestBuildFileNode:
    """Tests for id composition."""

    def test_ids_and_kinds(self, tmp_path: Path) -> None:
        path = tmp_path / "math.test.ahk"
        node = build_file_node(path, SOURCE)
        locator = file_locator(str(path))

        assert node.id == locator
        assert node.kind == "file"
        assert node.label == "math.test.ahk"

        [cls] = node.children
        assert cls.id == f"{locator}::MathTests"
        assert cls.kind == "class"
        assert cls.line == 0
        assert [c.id for c in cls.children] == [
            f"{locator}::MathTests::Adds",
            f"{locator}::MathTests::Nested",
        ]
        nested = cls.children[1]
        assert nested.children[0].id == f"{locator}::MathTests::Nested::Deep"
        assert nested.children[0].kind == "method"
        assert nested.children[0].line == 4
        assert nested.children[0].children == []

    def test_children_share_file_path(self, tmp_path: Path) -> None:
        path = tmp_path / "math.test.ahk"
        node = build_file_node(path, SOURCE)
        assert node.children[0].children[0].path == str(path)

    def test_unreadable_file_is_empty(self, tmp_path: Path) -> None:
        node = discover_file(tmp_path / "missing.test.ahk")
        assert node.children == []

    def test_bom_is_stripped(self, tmp_path: Path) -> None:
        path = tmp_path / "bom.test.ahk"
        path.write_bytes(b"\xef\xbb\xbf" + SOURCE.encode("utf-8"))
        node = discover_file(path)
        assert node.children[0].label == "MathTests"


class TestCollectLeafIds:
    """Tests for leaf selection."""

    def test_all_leaves_in_tree_order(self, tmp_path: Path) -> None:
        node = build_file_node(tmp_path / "m.test.ahk", SOURCE)
        ids = collect_leaf_ids([node])
        assert [i.rsplit("::", 1)[1] for i in ids] == ["Adds", "Deep"]

    def test_include_subtree(self, tmp_path: Path) -> None:
        node = build_file_node(tmp_path / "m.test.ahk", SOURCE)
        nested_id = node.children[0].children[1].id
        assert collect_leaf_ids([node], include=[nested_id]) == [f"{nested_id}::Deep"]

    def test_overlapping_includes_deduplicated(self, tmp_path: Path) -> None:
        node = build_file_node(tmp_path / "m.test.ahk", SOURCE)
        class_id = node.children[0].id
        nested_id = node.children[0].children[1].id
        ids = collect_leaf_ids([node], include=[class_id, nested_id])
        assert len(ids) == 2
        assert len(set(ids)) == 2

    def test_unknown_include(self, tmp_path: Path) -> None:
        node = build_file_node(tmp_path / "m.test.ahk", SOURCE)
        assert collect_leaf_ids([node], include=["nope"]) == []
