"""Tests for the directory/file tree mapper."""

from searchview.mappers import map_dir_result, map_file_result, map_file_tree, parent_path
from searchview.models import FileTreeFileType, FileTreeNode


def _file(name, lang="Rust", current=False):
    return {"name": name, "entry_data": {"File": {"lang": lang}}, "currentFile": current}


def _dir(name):
    return {"name": name, "entry_data": "Directory"}


class TestMapFileTree:
    def test_directory_node(self):
        (node,) = map_file_tree([_dir("src/")], "")

        assert node.type == FileTreeFileType.DIR
        assert node.name == "src"
        assert node.path == "src/"
        assert node.lang is None
        assert node.children == []

    def test_file_node(self):
        (node,) = map_file_tree([_file("main.rs")], "server/src/")

        assert node.type == FileTreeFileType.FILE
        assert node.name == "main.rs"
        assert node.path == "server/src/main.rs"
        assert node.lang == "Rust"
        assert node.selected is False

    def test_strips_exactly_one_separator(self):
        (node,) = map_file_tree([_dir("weird//")], "")

        assert node.name == "weird/"

    def test_directory_without_separator_kept(self):
        (node,) = map_file_tree([_dir("bin")], "")

        assert node.name == "bin"

    def test_default_sort_dirs_first_then_name(self, directory_record):
        nodes = map_file_tree(directory_record["data"]["entries"], "client/src/")

        assert [n.name for n in nodes] == ["components", "pages", "App.tsx", "utils.ts"]

    def test_custom_sort_key(self):
        nodes = map_file_tree(
            [_dir("b/"), _file("a.rs"), _dir("c/")],
            "",
            sort_key=lambda node: node.name,
        )

        assert [n.name for n in nodes] == ["a.rs", "b", "c"]

    def test_sort_is_stable(self):
        nodes = map_file_tree(
            [_file("one.rs"), _file("two.rs"), _file("three.rs")],
            "",
            sort_key=lambda node: 0,
        )

        assert [n.name for n in nodes] == ["one.rs", "two.rs", "three.rs"]

    def test_selected_from_entry_flag(self):
        nodes = map_file_tree([_file("a.rs", current=True), _file("b.rs")], "")

        assert [n.selected for n in nodes] == [True, False]

    def test_selected_from_current_file(self):
        nodes = map_file_tree([_file("a.rs"), _file("b.rs")], "src/", current_file="src/b.rs")

        assert [n.selected for n in nodes] == [False, True]

    def test_empty(self):
        assert map_file_tree([], "src/") == []


class TestParentPath:
    def test_nested(self):
        assert parent_path("src/app/main.py") == "src/app/"

    def test_top_level(self):
        assert parent_path("README.md") == ""


class TestMapDirResult:
    def test_maps_listing(self, directory_record):
        view = map_dir_result(directory_record)

        assert view.name == "bloop"
        assert view.relative_path == "client/src/"
        assert view.repo_ref == "local/bloop"
        assert view.entries[0] == FileTreeNode(
            type=FileTreeFileType.DIR, path="client/src/components/", name="components"
        )
        assert view.entries[-1].path == "client/src/utils.ts"


class TestMapFileResult:
    def test_maps_file(self, source_file):
        view = map_file_result(source_file)

        assert view.language == "Python"
        assert view.relative_path == "src/app/main.py"
        assert view.repo_path == "local/app"
        assert view.repo_name == "app"
        assert view.code.startswith("line 1\n")
        assert view.hoverable_ranges == []

    def test_siblings_use_parent_directory(self, source_file):
        view = map_file_result(source_file)

        assert [n.path for n in view.file_tree] == [
            "src/app/views/",
            "src/app/main.py",
            "src/app/models.py",
        ]
        assert [n.selected for n in view.file_tree] == [False, True, False]

    def test_missing_siblings(self, source_file):
        del source_file["data"]["siblings"]

        assert map_file_result(source_file).file_tree == []
