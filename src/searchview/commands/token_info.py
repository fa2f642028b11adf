# src/searchview/commands/token_info.py
"""Token-info command - group references and definitions by file."""

from __future__ import annotations

from pathlib import Path

from searchview.commands.base import TokenInfoResult, read_json
from searchview.mappers.token_info import map_token_info


def token_info(path: str | Path) -> TokenInfoResult:
    """Map a saved token-info response.

    Args:
        path: JSON file holding a list of ``{"file", "data"}`` entries, or
            an object with that list under ``data``

    Returns:
        TokenInfoResult with references and definitions
    """
    document, error = read_json(path)
    if error is not None:
        return TokenInfoResult(success=False, error=error)

    entries = document.get("data") if isinstance(document, dict) else document
    if not isinstance(entries, list):
        return TokenInfoResult(success=False, error="Expected a list of token-info entries")

    return TokenInfoResult(success=True, group=map_token_info(entries))
