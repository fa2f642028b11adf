# src/searchview/mappers/__init__.py
"""Pure functions turning backend payloads into render-ready models.

Usage:
    from searchview.mappers import map_results, map_ranges

    results = map_results(response_json)
    by_line = map_ranges(hoverable_ranges)
"""

from searchview.mappers.ranges import map_ranges
from searchview.mappers.results import map_record, map_results, parse_record, strip_local_prefix
from searchview.mappers.token_info import map_token_info, trim_item
from searchview.mappers.tree import (
    map_dir_result,
    map_file_result,
    map_file_tree,
    parent_path,
    sort_files,
)

__all__ = [
    "map_ranges",
    "map_results",
    "map_record",
    "parse_record",
    "strip_local_prefix",
    "map_file_tree",
    "map_dir_result",
    "map_file_result",
    "parent_path",
    "sort_files",
    "map_token_info",
    "trim_item",
]
