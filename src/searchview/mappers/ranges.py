"""Bucket highlight ranges by line."""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError

from searchview.models.ranges import LineRangeMap, LineSpan, Range

logger = logging.getLogger(__name__)


def _parse_span(item: Any) -> LineSpan | None:
    if isinstance(item, LineSpan):
        return item
    try:
        return LineSpan.model_validate(item)
    except ValidationError as e:
        logger.warning("Dropping malformed range: %s", e.errors()[0]["msg"])
        return None


def map_ranges(ranges: Iterable[LineSpan | Mapping[str, Any]]) -> LineRangeMap:
    """Group byte ranges by the line they start on.

    Each input range contributes ``Range(start.byte, end.byte)`` to the
    bucket of ``start.line``. Buckets keep arrival order; nothing is
    deduplicated or sorted. Malformed spans are skipped.

    Args:
        ranges: Spans as ``LineSpan`` models or ``{"start": ..., "end": ...}``
            mappings with ``byte``/``line`` positions

    Returns:
        Mapping of line number -> ranges on that line
    """
    result: LineRangeMap = {}
    for item in ranges:
        span = _parse_span(item)
        if span is None:
            continue
        try:
            highlight = Range(start=span.start.byte, end=span.end.byte)
        except ValidationError as e:
            logger.warning("Dropping malformed range: %s", e.errors()[0]["msg"])
            continue
        result.setdefault(span.start.line, []).append(highlight)
    return result
