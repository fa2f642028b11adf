# src/searchview/mappers/token_info.py
"""Group reference/definition hits by file."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from pydantic import ValidationError

from searchview.models.ranges import Range
from searchview.models.raw import RefDefDataItem, TokenInfoFile
from searchview.models.token_info import TokenInfoGroup

logger = logging.getLogger(__name__)

REFERENCE = "reference"
DEFINITION = "definition"


def trim_item(item: RefDefDataItem) -> RefDefDataItem:
    """Strip leading whitespace from a hit's snippet.

    Highlights are shifted left by the number of removed characters so they
    stay valid against the trimmed text. The first shifted highlight becomes
    the item's ``token_range``.
    """
    snippet = item.snippet
    trimmed = snippet.data.lstrip()
    shift = len(snippet.data) - len(trimmed)
    highlights = [Range(start=h.start - shift, end=h.end - shift) for h in snippet.highlights]
    return item.model_copy(
        update={
            "snippet": snippet.model_copy(
                update={
                    "data": trimmed,
                    "highlights": highlights,
                    "token_range": highlights[0] if highlights else None,
                }
            )
        }
    )


def _parse_item(file: str, payload: Any) -> RefDefDataItem | None:
    if isinstance(payload, RefDefDataItem):
        return payload
    try:
        return RefDefDataItem.model_validate(payload)
    except ValidationError as e:
        logger.warning("Dropping malformed hit in %s: %s", file, e.errors()[0]["msg"])
        return None


def _hits(
    entries: Iterable[TokenInfoFile | Mapping[str, Any]],
) -> Iterator[tuple[str, RefDefDataItem]]:
    """Yield (file, hit) pairs, validating each hit on its own."""
    for entry in entries:
        if isinstance(entry, TokenInfoFile):
            for item in entry.data:
                yield entry.file, item
            continue

        file = entry.get("file") if isinstance(entry, Mapping) else None
        data = entry.get("data", []) if isinstance(entry, Mapping) else None
        if not isinstance(file, str) or not isinstance(data, list):
            logger.warning("Dropping malformed token-info entry for %r", file)
            continue
        for payload in data:
            item = _parse_item(file, payload)
            if item is not None:
                yield file, item


def _flatten(grouped: dict[str, list[RefDefDataItem]]) -> list[TokenInfoFile]:
    return [TokenInfoFile(file=file, data=items) for file, items in grouped.items()]


def map_token_info(entries: Iterable[TokenInfoFile | Mapping[str, Any]]) -> TokenInfoGroup:
    """Split token-info hits into per-file references and definitions.

    Entries for the same file are concatenated in arrival order. Hits of any
    other kind are ignored, and malformed entries or hits are dropped.

    Args:
        entries: ``{"file": ..., "data": [...]}`` entries from the backend

    Returns:
        TokenInfoGroup with trimmed snippets
    """
    references: dict[str, list[RefDefDataItem]] = {}
    definitions: dict[str, list[RefDefDataItem]] = {}

    for file, item in _hits(entries):
        if item.kind == REFERENCE:
            references.setdefault(file, []).append(trim_item(item))
        elif item.kind == DEFINITION:
            definitions.setdefault(file, []).append(trim_item(item))

    return TokenInfoGroup(references=_flatten(references), definitions=_flatten(definitions))
