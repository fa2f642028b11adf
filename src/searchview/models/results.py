# src/searchview/models/results.py
"""Normalized search result models.

Every backend record becomes exactly one of these variants, discriminated
by ``type``. ``id`` is the record's position in the backend response.
"""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from searchview.models.ranges import Range


class ResultItemType(str, Enum):
    """Discriminant of a normalized result."""

    REPO = "repo"
    CODE = "code"
    FILE = "file"
    FLAG = "flag"
    LANG = "lang"


class SymbolItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: str
    line: int


class SnippetItem(BaseModel):
    """A code snippet ready for rendering."""

    model_config = ConfigDict(frozen=True)

    code: str
    line_start: int
    highlights: list[Range] = Field(default_factory=list)
    symbols: list[SymbolItem] = Field(default_factory=list)


class RepoResult(BaseModel):
    """A repository whose name matched the query."""

    model_config = ConfigDict(frozen=True)

    type: Literal[ResultItemType.REPO] = ResultItemType.REPO
    id: int
    repository: str
    repo_name: str
    highlights: list[Range] = Field(default_factory=list)
    # Filled in by a later enrichment step
    branches: int = 0
    files: int = 0


class CodeResult(BaseModel):
    """Code snippets matched inside one file."""

    model_config = ConfigDict(frozen=True)

    type: Literal[ResultItemType.CODE] = ResultItemType.CODE
    id: int
    language: str | None = None
    relative_path: str
    repo_name: str
    repo_path: str
    snippets: list[SnippetItem] = Field(default_factory=list)
    # Placeholders populated by the code-fetch path
    code: str = ""
    branch: str = ""


class FileResult(BaseModel):
    """A file whose path matched the query."""

    model_config = ConfigDict(frozen=True)

    type: Literal[ResultItemType.FILE] = ResultItemType.FILE
    id: int
    relative_path: str
    repo_path: str
    repo_name: str
    language: str | None = None
    highlights: list[Range] = Field(default_factory=list)
    lines: int = 0


class FlagResult(BaseModel):
    """Flag suggestion passed through from the backend."""

    model_config = ConfigDict(frozen=True, extra="allow")

    type: Literal[ResultItemType.FLAG] = ResultItemType.FLAG
    id: int
    kind: str = "flag"


class LangResult(BaseModel):
    """Language suggestion passed through from the backend."""

    model_config = ConfigDict(frozen=True, extra="allow")

    type: Literal[ResultItemType.LANG] = ResultItemType.LANG
    id: int
    kind: str = "lang"


NormalizedResult = Annotated[
    Union[RepoResult, CodeResult, FileResult, FlagResult, LangResult],
    Field(discriminator="type"),
]
