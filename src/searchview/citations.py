# src/searchview/citations.py
"""Display windows for answer citations into a single file.

Each citation is shown with up to ``margin`` lines of context above and
below. Context never extends into a neighbouring citation: when two
citations compete for the lines between them, those lines are shared out
so their windows touch but never overlap.

Windows are 0-based line indices. ``window_start`` is the first rendered
line and ``window_end`` the exclusive end of the rendered slice.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from functools import lru_cache
from typing import TYPE_CHECKING, Any

from searchview.models.citation import Citation, CitationLayout, CitationWindow

if TYPE_CHECKING:
    from searchview.settings import Settings

DEFAULT_MARGIN = 5
LINE_HEIGHT = 21
HEADER_HEIGHT = 56
PADDING = 16
COLLAPSE_THRESHOLD = 350


def _split_gap(gap: int, margin: int) -> tuple[int, int]:
    """Share the lines between two citations.

    Returns (context below the earlier citation, context above the later
    one). The two together never exceed ``gap + 1`` boundary slots.
    """
    slots = max(gap + 1, 0)
    return min(margin, (slots + 1) // 2), min(margin, slots // 2)


def _context_above(citations: Sequence[Citation], index: int, margin: int) -> int:
    if index == 0:
        return margin
    previous = citations[index - 1]
    current = citations[index]
    if previous.end_line is None or current.start_line is None:
        return margin
    gap = current.start_line - 1 - previous.end_line
    return _split_gap(gap, margin)[1]


def _context_below(citations: Sequence[Citation], index: int, margin: int) -> int:
    if index == len(citations) - 1:
        return margin
    current = citations[index]
    following = citations[index + 1]
    if following.start_line is None or current.end_line is None:
        return margin
    gap = following.start_line - 1 - current.end_line
    return _split_gap(gap, margin)[0]


def window_for(
    citations: Sequence[Citation], index: int, margin: int = DEFAULT_MARGIN
) -> CitationWindow:
    """Compute the display window of one citation given its neighbours."""
    citation = citations[index]

    window_start = None
    if citation.start_line is not None:
        window_start = max(0, citation.start_line - 1 - _context_above(citations, index, margin))

    window_end = None
    if citation.end_line is not None:
        window_end = max(1, citation.end_line - 1 + _context_below(citations, index, margin))

    return CitationWindow(
        **citation.model_dump(include=set(Citation.model_fields)),
        window_start=window_start,
        window_end=window_end,
    )


def total_height(
    windows: Iterable[CitationWindow],
    line_height: int = LINE_HEIGHT,
    padding: int = PADDING,
    header_height: int = HEADER_HEIGHT,
) -> int:
    """Height in pixels of a block rendering all windows."""
    lines = sum(max((w.window_end or 0) - (w.window_start or 0), 0) for w in windows)
    return lines * line_height + padding + header_height


@lru_cache(maxsize=256)
def _windows(citations: tuple[Citation, ...], margin: int) -> tuple[CitationWindow, ...]:
    # Cached windows are frozen and shared; every layout gets its own list
    return tuple(window_for(citations, index, margin) for index in range(len(citations)))


def _as_citation(item: Citation | Mapping[str, Any]) -> Citation:
    if isinstance(item, Citation):
        return item
    return Citation.model_validate(item)


def compute_windows(
    citations: Iterable[Citation | Mapping[str, Any]],
    margin: int = DEFAULT_MARGIN,
    line_height: int = LINE_HEIGHT,
    padding: int = PADDING,
    header_height: int = HEADER_HEIGHT,
    collapse_threshold: int = COLLAPSE_THRESHOLD,
) -> CitationLayout:
    """Compute display windows for the citations of one file.

    This is a pure function of its arguments. Windows are cached by value,
    but every call returns a new layout that the caller may modify.

    Args:
        citations: Citations in answer order (models or
            ``{"start_line", "end_line", "comment", "i"}`` mappings)
        margin: Maximum context lines above and below each citation
        line_height: Rendered height of one line
        padding: Fixed vertical padding of the block
        header_height: Height of the file header
        collapse_threshold: Height above which the block is collapsed

    Returns:
        CitationLayout with one window per citation, in input order

    Raises:
        ValueError: If margin is negative
    """
    if margin < 0:
        raise ValueError(f"margin must be non-negative, got {margin}")
    windows = list(_windows(tuple(_as_citation(c) for c in citations), margin))
    height = total_height(windows, line_height, padding, header_height)
    return CitationLayout(
        windows=windows,
        total_height=height,
        collapsed_height=min(height, collapse_threshold),
        is_overflowing=height > collapse_threshold,
    )


def layout_citations(
    citations: Iterable[Citation | Mapping[str, Any]],
    settings: Settings | None = None,
) -> CitationLayout:
    """Compute windows using the values of a Settings object."""
    from searchview.settings import Settings

    settings = settings or Settings()
    return compute_windows(
        citations,
        margin=settings.margin,
        line_height=settings.line_height,
        padding=settings.padding,
        header_height=settings.header_height,
        collapse_threshold=settings.collapse_threshold,
    )
