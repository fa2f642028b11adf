# src/searchview/mappers/results.py
"""Normalize backend search records into typed results."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import TypeAdapter, ValidationError

from searchview.models.raw import (
    RESULT_KINDS,
    CodeItem,
    FileResItem,
    FlagItem,
    LangItem,
    RawResultRecord,
    RepoItem,
    SearchResponse,
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

logger = logging.getLogger(__name__)

LOCAL_REPO_PREFIX = "local/"

_record_adapter: TypeAdapter[RawResultRecord] = TypeAdapter(RawResultRecord)


def strip_local_prefix(repo_ref: str, prefix: str = LOCAL_REPO_PREFIX) -> str:
    """Drop the local-repository prefix from a repo ref, if present."""
    if prefix and repo_ref.startswith(prefix):
        return repo_ref[len(prefix) :]
    return repo_ref


def parse_record(payload: Any) -> RawResultRecord | None:
    """Validate one backend record.

    Returns None for records with an unknown ``kind`` or a malformed body,
    so callers can drop them without failing the whole response.
    """
    if isinstance(payload, (CodeItem, FileResItem, RepoItem, FlagItem, LangItem)):
        return payload
    if not isinstance(payload, Mapping):
        logger.debug("Dropping non-mapping search record: %r", type(payload).__name__)
        return None

    kind = payload.get("kind")
    if kind not in RESULT_KINDS:
        logger.debug("Dropping search record with unknown kind %r", kind)
        return None

    try:
        return _record_adapter.validate_python(payload)
    except ValidationError as e:
        logger.warning("Dropping malformed %s record: %s", kind, e.errors()[0]["msg"])
        return None


def _map_repo(item: RepoItem, id: int) -> RepoResult:
    return RepoResult(
        id=id,
        repository=item.data.name.text,
        repo_name=item.data.name.text,
        highlights=list(item.data.name.highlights),
    )


def _map_code(item: CodeItem, id: int, prefix: str) -> CodeResult:
    data = item.data
    return CodeResult(
        id=id,
        language=data.lang,
        relative_path=data.relative_path,
        repo_name=data.repo_name,
        repo_path=strip_local_prefix(data.repo_ref, prefix),
        snippets=[
            SnippetItem(
                code=snippet.data,
                line_start=snippet.line_range.start,
                highlights=list(snippet.highlights),
                symbols=[
                    SymbolItem(kind=symbol.kind, line=symbol.range.start.line)
                    for symbol in snippet.symbols
                ],
            )
            for snippet in data.snippets
        ],
    )


def _map_file(item: FileResItem, id: int, prefix: str) -> FileResult:
    data = item.data
    return FileResult(
        id=id,
        relative_path=data.relative_path.text,
        repo_path=strip_local_prefix(data.repo_ref, prefix),
        repo_name=data.repo_name,
        language=data.lang,
        highlights=list(data.relative_path.highlights),
    )


def map_record(
    record: RawResultRecord, id: int, prefix: str = LOCAL_REPO_PREFIX
) -> NormalizedResult:
    """Convert one validated backend record into its normalized variant."""
    if isinstance(record, RepoItem):
        return _map_repo(record, id)
    if isinstance(record, CodeItem):
        return _map_code(record, id, prefix)
    if isinstance(record, FileResItem):
        return _map_file(record, id, prefix)
    if isinstance(record, FlagItem):
        return FlagResult.model_validate(
            {**record.model_dump(), "type": ResultItemType.FLAG, "id": id}
        )
    if isinstance(record, LangItem):
        return LangResult.model_validate(
            {**record.model_dump(), "type": ResultItemType.LANG, "id": id}
        )
    raise TypeError(f"Unsupported record type: {type(record).__name__}")


def map_results(
    response: SearchResponse | Mapping[str, Any],
    local_repo_prefix: str = LOCAL_REPO_PREFIX,
) -> list[NormalizedResult]:
    """Normalize a search response.

    Each record's ``id`` is its position in ``response.data``. Records with
    an unknown kind are dropped; the remaining results keep input order.

    Args:
        response: The backend response (model or ``{"count", "data"}`` mapping)
        local_repo_prefix: Prefix stripped from repo refs of local repositories

    Returns:
        List of normalized results
    """
    if not isinstance(response, SearchResponse):
        response = SearchResponse.model_validate(response)

    if response.count == 0:
        return []

    results: list[NormalizedResult] = []
    for id, payload in enumerate(response.data):
        record = parse_record(payload)
        if record is None:
            continue
        results.append(map_record(record, id, local_repo_prefix))

    dropped = len(response.data) - len(results)
    if dropped:
        logger.debug("Dropped %d of %d search records", dropped, len(response.data))

    return results
