# src/searchview/mappers/tree.py
"""Map directory listings and file siblings into file tree nodes."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any

from searchview.models.raw import DirectoryEntry, DirectoryItem, FileItem
from searchview.models.tree import DirectoryView, FileTreeFileType, FileTreeNode, FileView

SortKey = Callable[[FileTreeNode], Any]


def sort_files(node: FileTreeNode) -> tuple[int, str]:
    """Default ordering: directories first, then case-insensitive name."""
    return (0 if node.is_dir else 1, node.name.casefold())


def _strip_separator(name: str, separator: str) -> str:
    if separator and name.endswith(separator):
        return name[: -len(separator)]
    return name


def _map_entry(
    entry: DirectoryEntry,
    base_path: str,
    current_file: str | None,
    separator: str,
) -> FileTreeNode:
    path = f"{base_path}{entry.name}"
    if entry.is_dir:
        return FileTreeNode(
            type=FileTreeFileType.DIR,
            path=path,
            name=_strip_separator(entry.name, separator),
            selected=entry.current_file,
        )
    return FileTreeNode(
        type=FileTreeFileType.FILE,
        path=path,
        name=entry.name,
        lang=entry.lang,
        selected=entry.current_file or (current_file is not None and path == current_file),
    )


def map_file_tree(
    entries: Iterable[DirectoryEntry | Mapping[str, Any]],
    base_path: str,
    current_file: str | None = None,
    sort_key: SortKey = sort_files,
    separator: str = "/",
) -> list[FileTreeNode]:
    """Convert raw directory entries into sorted tree nodes.

    Args:
        entries: Directory entries (models or raw mappings)
        base_path: Prefix joined to each entry name; must be empty or end
            with a separator
        current_file: Path of the open file, marked as selected
        sort_key: Ordering policy (stable sort)
        separator: Path separator stripped from directory names

    Returns:
        Nodes with empty ``children``
    """
    nodes = [
        _map_entry(
            entry if isinstance(entry, DirectoryEntry) else DirectoryEntry.model_validate(entry),
            base_path,
            current_file,
            separator,
        )
        for entry in entries
    ]
    return sorted(nodes, key=sort_key)


def parent_path(relative_path: str, separator: str = "/") -> str:
    """Return the directory part of a path, keeping the trailing separator."""
    head, sep, _ = relative_path.rpartition(separator)
    return f"{head}{sep}" if sep else ""


def map_dir_result(
    item: DirectoryItem | Mapping[str, Any],
    sort_key: SortKey = sort_files,
    separator: str = "/",
) -> DirectoryView:
    """Map a directory record into a view with its sorted entries."""
    if not isinstance(item, DirectoryItem):
        item = DirectoryItem.model_validate(item)
    data = item.data
    return DirectoryView(
        name=data.repo_name,
        relative_path=data.relative_path,
        repo_ref=data.repo_ref,
        entries=map_file_tree(
            data.entries, data.relative_path, sort_key=sort_key, separator=separator
        ),
    )


def map_file_result(
    item: FileItem | Mapping[str, Any],
    sort_key: SortKey = sort_files,
    separator: str = "/",
) -> FileView:
    """Map a file record into a view with its contents and sibling tree.

    Missing siblings produce an empty tree. Siblings live next to the file,
    so their paths are built from the file's parent directory.
    """
    if not isinstance(item, FileItem):
        item = FileItem.model_validate(item)
    data = item.data
    return FileView(
        language=data.lang,
        repo_path=data.repo_ref,
        relative_path=data.relative_path,
        code=data.contents,
        repo_name=data.repo_name,
        file_tree=map_file_tree(
            data.siblings or [],
            parent_path(data.relative_path, separator),
            current_file=data.relative_path,
            sort_key=sort_key,
            separator=separator,
        ),
    )
