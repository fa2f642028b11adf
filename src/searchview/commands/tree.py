# src/searchview/commands/tree.py
"""Tree command - list a directory record or a file's siblings."""

from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError

from searchview.commands.base import TreeResult, read_json
from searchview.config import get_settings
from searchview.mappers.tree import map_dir_result, map_file_result


def tree(
    path: str | Path,
    config_path: str | Path | None = None,
) -> TreeResult:
    """Map a saved directory or file record into tree nodes.

    Records whose data carries ``entries`` are treated as directories,
    everything else as a file whose siblings are listed.

    Args:
        path: JSON file holding a ``{"kind", "data"}`` record
        config_path: Override config file path

    Returns:
        TreeResult with sorted nodes
    """
    document, error = read_json(path)
    if error is not None:
        return TreeResult(success=False, error=error)
    if not isinstance(document, dict) or not isinstance(document.get("data"), dict):
        return TreeResult(success=False, error="Expected a record with a 'data' object")

    try:
        separator = get_settings(config_path).directory_separator
    except ValueError as e:
        return TreeResult(success=False, error=f"Invalid configuration: {e}")
    try:
        if "entries" in document["data"]:
            directory = map_dir_result(document, separator=separator)
            return TreeResult(
                success=True,
                repo_name=directory.name,
                relative_path=directory.relative_path,
                nodes=directory.entries,
            )
        file_view = map_file_result(document, separator=separator)
    except ValidationError as e:
        return TreeResult(success=False, error=f"Invalid record: {e.errors()[0]['msg']}")

    return TreeResult(
        success=True,
        repo_name=file_view.repo_name,
        relative_path=file_view.relative_path,
        nodes=file_view.file_tree,
    )
