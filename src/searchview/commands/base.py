# src/searchview/commands/base.py
"""Result types returned by the commands, and the shared JSON reader.

Commands never raise for bad input files. They return a result with
``success=False`` and a message the CLI prints as is.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from searchview.models.citation import CitationExcerpt, CitationLayout
from searchview.models.results import NormalizedResult
from searchview.models.token_info import TokenInfoGroup
from searchview.models.tree import FileTreeNode


@dataclass
class CommandResult:
    """Base result type for commands."""

    success: bool
    error: str | None = None


@dataclass
class ResultsResult(CommandResult):
    """Result of the results command.

    Attributes:
        results: Normalized results, in response order
        total_records: Number of records in the response
        dropped: Records dropped for an unknown kind or malformed body
    """

    results: list[NormalizedResult] = field(default_factory=list)
    total_records: int = 0
    dropped: int = 0


@dataclass
class WindowsResult(CommandResult):
    """Result of the windows command.

    Attributes:
        layout: Citation windows and rendered height
        excerpts: Rendered lines per citation (only when a file was given)
        margin: Margin used for the computation
    """

    layout: CitationLayout | None = None
    excerpts: list[CitationExcerpt] = field(default_factory=list)
    margin: int = 0


@dataclass
class TreeResult(CommandResult):
    """Result of the tree command.

    Attributes:
        repo_name: Repository of the listing
        relative_path: Directory or file the listing belongs to
        nodes: Sorted tree nodes
    """

    repo_name: str = ""
    relative_path: str = ""
    nodes: list[FileTreeNode] = field(default_factory=list)


@dataclass
class TokenInfoResult(CommandResult):
    """Result of the token-info command."""

    group: TokenInfoGroup | None = None


@dataclass
class SettingInfo:
    """Information about a single setting."""

    name: str
    value: str
    source: str  # "env var", "yaml", "preset" or "default"


@dataclass
class ConfigResult(CommandResult):
    """Result of the config command.

    Attributes:
        settings: List of settings with sources
        config_path: Path to config file (if found)
        warnings: Problems found in the config file
    """

    settings: list[SettingInfo] = field(default_factory=list)
    config_path: str | None = None
    warnings: list[str] = field(default_factory=list)


def read_json(path: str | Path) -> tuple[Any, str | None]:
    """Read a JSON document.

    Returns:
        Tuple of (parsed document, error message). The error is None on success.
    """
    file_path = Path(path)
    if not file_path.exists():
        return None, f"File not found: {path}"
    try:
        return json.loads(file_path.read_text(encoding="utf-8")), None
    except json.JSONDecodeError as e:
        return None, f"Invalid JSON in {path}: {e}"
    except OSError as e:
        return None, f"Could not read {path}: {e}"
