# src/searchview/commands/results.py
"""Results command - normalize a saved search response.

This module provides the normalization logic that the CLI uses.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError

from searchview.commands.base import ResultsResult, read_json
from searchview.config import get_settings
from searchview.mappers.results import map_results
from searchview.models.raw import SearchResponse


def results(
    path: str | Path,
    config_path: str | Path | None = None,
) -> ResultsResult:
    """Normalize the search response stored in a JSON file.

    Args:
        path: JSON file holding ``{"count": ..., "data": [...]}``
        config_path: Override config file path

    Returns:
        ResultsResult with the normalized results
    """
    document, error = read_json(path)
    if error is not None:
        return ResultsResult(success=False, error=error)

    try:
        response = SearchResponse.model_validate(document)
    except ValidationError as e:
        return ResultsResult(
            success=False, error=f"Not a search response: {e.errors()[0]['msg']}"
        )

    try:
        settings = get_settings(config_path)
    except ValueError as e:
        return ResultsResult(success=False, error=f"Invalid configuration: {e}")

    normalized = map_results(response, local_repo_prefix=settings.local_repo_prefix)

    total = len(response.data)
    return ResultsResult(
        success=True,
        results=normalized,
        total_records=total,
        dropped=total - len(normalized) if response.count else 0,
    )
