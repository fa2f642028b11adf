"""searchview - render-ready views of code-search results.

Turns a search backend's tagged payloads into uniform typed results and
computes the context windows shown around an answer's citations.

Quick Start:
    from searchview import AnnotatedFile, compute_windows, map_results

    # Normalize a search response
    results = map_results({"count": 1, "data": [record]})

    # Lay out citations into one file
    layout = compute_windows(
        [{"start_line": 10, "end_line": 12}, {"start_line": 14, "end_line": 16}]
    )
    layout.windows[0].window_start  # 4

    # Or cut the excerpts directly from the file record
    annotated = AnnotatedFile.build(file_record, citations)
"""

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("searchview")
except PackageNotFoundError:
    # Running from a source tree without an installed distribution
    __version__ = "unknown"

from searchview.annotator import AnnotatedFile
from searchview.citations import compute_windows, layout_citations, total_height, window_for

# Mappers
from searchview.mappers import (
    map_dir_result,
    map_file_result,
    map_file_tree,
    map_ranges,
    map_results,
    map_token_info,
    sort_files,
)

# Models
from searchview.models import (
    Citation,
    CitationLayout,
    CitationWindow,
    FileTreeFileType,
    FileTreeNode,
    NormalizedResult,
    Range,
    ResultItemType,
    TokenInfoGroup,
)

# Configuration
from searchview.settings import Settings

# Tokenizers
from searchview.tokenizer import PlainTokenizer, Tokenizer

__all__ = [
    # Version
    "__version__",
    # Models
    "Citation",
    "CitationLayout",
    "CitationWindow",
    "FileTreeFileType",
    "FileTreeNode",
    "NormalizedResult",
    "Range",
    "ResultItemType",
    "TokenInfoGroup",
    # Config
    "Settings",
    # Mappers
    "map_results",
    "map_ranges",
    "map_file_tree",
    "map_dir_result",
    "map_file_result",
    "map_token_info",
    "sort_files",
    # Citations
    "compute_windows",
    "layout_citations",
    "total_height",
    "window_for",
    "AnnotatedFile",
    # Tokenizers
    "Tokenizer",
    "PlainTokenizer",
]
