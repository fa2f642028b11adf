# src/searchview/models/__init__.py
"""Data models for searchview."""

from searchview.models.citation import (
    Citation,
    CitationExcerpt,
    CitationLayout,
    CitationWindow,
    Token,
    TokensLine,
)
from searchview.models.ranges import LineRangeMap, LineSpan, Range, RangeLine
from searchview.models.raw import (
    DirectoryEntry,
    DirectoryItem,
    FileItem,
    RawResultRecord,
    RefDefDataItem,
    RefDefSnippet,
    SearchResponse,
    TokenInfoFile,
)
from searchview.models.results import (
    CodeResult,
    FileResult,
    FlagResult,
    LangResult,
    NormalizedResult,
    RepoResult,
    ResultItemType,
    SnippetItem,
    SymbolItem,
)
from searchview.models.token_info import TokenInfoGroup
from searchview.models.tree import DirectoryView, FileTreeFileType, FileTreeNode, FileView

__all__ = [
    "Range",
    "RangeLine",
    "LineSpan",
    "LineRangeMap",
    "RawResultRecord",
    "SearchResponse",
    "DirectoryEntry",
    "DirectoryItem",
    "FileItem",
    "RefDefDataItem",
    "RefDefSnippet",
    "TokenInfoFile",
    "ResultItemType",
    "NormalizedResult",
    "RepoResult",
    "CodeResult",
    "FileResult",
    "FlagResult",
    "LangResult",
    "SnippetItem",
    "SymbolItem",
    "FileTreeFileType",
    "FileTreeNode",
    "DirectoryView",
    "FileView",
    "TokenInfoGroup",
    "Citation",
    "CitationWindow",
    "CitationLayout",
    "CitationExcerpt",
    "Token",
    "TokensLine",
]
