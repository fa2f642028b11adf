# src/searchview/commands/windows.py
"""Windows command - lay out citations into one file."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import ValidationError

from searchview.annotator import AnnotatedFile
from searchview.citations import layout_citations
from searchview.commands.base import WindowsResult, read_json
from searchview.config import get_settings


def _split_document(document: Any) -> tuple[Any, Any]:
    """Return (citations, file record) from a windows input document."""
    if isinstance(document, list):
        return document, None
    if isinstance(document, dict):
        return document.get("citations", []), document.get("file")
    return None, None


def windows(
    path: str | Path,
    margin: int | None = None,
    config_path: str | Path | None = None,
) -> WindowsResult:
    """Compute citation windows from a JSON file.

    The file holds either a list of citations or an object with
    ``citations`` and, optionally, the cited ``file`` record. When the file
    is present the excerpt lines are cut as well.

    Args:
        path: JSON input file
        margin: Override the configured margin
        config_path: Override config file path

    Returns:
        WindowsResult with the layout (and excerpts when a file was given)
    """
    document, error = read_json(path)
    if error is not None:
        return WindowsResult(success=False, error=error)

    citations, file_record = _split_document(document)
    if not isinstance(citations, list):
        return WindowsResult(success=False, error="Expected a list of citations")

    try:
        settings = get_settings(config_path)
    except ValueError as e:
        return WindowsResult(success=False, error=f"Invalid configuration: {e}")
    if margin is not None:
        if margin < 0:
            return WindowsResult(success=False, error=f"Margin must be non-negative, got {margin}")
        settings = settings.model_copy(update={"margin": margin})

    try:
        if file_record is not None:
            annotated = AnnotatedFile.build(file_record, citations, settings=settings)
            return WindowsResult(
                success=True,
                layout=annotated.layout,
                excerpts=annotated.excerpts,
                margin=settings.margin,
            )
        layout = layout_citations(citations, settings)
    except ValidationError as e:
        return WindowsResult(success=False, error=f"Invalid input: {e.errors()[0]['msg']}")

    return WindowsResult(success=True, layout=layout, margin=settings.margin)
