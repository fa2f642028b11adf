# src/searchview/commands/__init__.py
"""UI-agnostic command layer for searchview.

Command functions read saved backend payloads, run the mappers and return
data structures, leaving rendering to the caller.

Usage:
    from searchview.commands import results, windows

    result = results.results("response.json")
    layout = windows.windows("citations.json", margin=3)
"""

from searchview.commands import config_cmd, results, token_info, tree, windows
from searchview.commands.base import (
    CommandResult,
    ConfigResult,
    ResultsResult,
    SettingInfo,
    TokenInfoResult,
    TreeResult,
    WindowsResult,
)

__all__ = [
    # Base types
    "CommandResult",
    # Result types
    "ResultsResult",
    "WindowsResult",
    "TreeResult",
    "TokenInfoResult",
    "ConfigResult",
    "SettingInfo",
    # Command modules
    "results",
    "windows",
    "tree",
    "token_info",
    "config_cmd",
]
