# src/searchview/models/raw.py
"""Backend payload models.

These mirror the JSON the search backend sends for a query, a file, a
directory listing and a token-info lookup. Unknown fields are ignored so
that a newer backend does not break parsing.

Search records are a tagged union on ``kind``:

    snippets            code matches inside one file
    file_result         a file whose path matched
    repository_result   a repository whose name matched
    flag                a query flag suggestion (opaque payload)
    lang                a language suggestion (opaque payload)
"""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from searchview.models.ranges import LineSpan, Range


class _Payload(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class HighlightedString(_Payload):
    """Text with the spans that matched the query."""

    text: str
    highlights: list[Range] = Field(default_factory=list)


class LineRange(_Payload):
    """First and last line covered by a snippet."""

    start: int
    end: int


class Symbol(_Payload):
    """A symbol found inside a snippet."""

    kind: str
    range: LineSpan


class Snippet(_Payload):
    """A code excerpt returned for a ``snippets`` record."""

    data: str
    line_range: LineRange
    highlights: list[Range] = Field(default_factory=list)
    symbols: list[Symbol] = Field(default_factory=list)


class CodeData(_Payload):
    lang: str | None = None
    relative_path: str
    repo_name: str
    repo_ref: str
    snippets: list[Snippet] = Field(default_factory=list)


class CodeItem(_Payload):
    kind: Literal["snippets"]
    data: CodeData


class FileResData(_Payload):
    relative_path: HighlightedString
    repo_ref: str
    repo_name: str
    lang: str | None = None


class FileResItem(_Payload):
    kind: Literal["file_result"]
    data: FileResData


class RepoData(_Payload):
    name: HighlightedString


class RepoItem(_Payload):
    kind: Literal["repository_result"]
    data: RepoData


class FlagItem(BaseModel):
    """Opaque flag suggestion; every field is kept."""

    model_config = ConfigDict(frozen=True, extra="allow")

    kind: Literal["flag"]


class LangItem(BaseModel):
    """Opaque language suggestion; every field is kept."""

    model_config = ConfigDict(frozen=True, extra="allow")

    kind: Literal["lang"]


RawResultRecord = Annotated[
    Union[CodeItem, FileResItem, RepoItem, FlagItem, LangItem],
    Field(discriminator="kind"),
]

RESULT_KINDS = frozenset({"snippets", "file_result", "repository_result", "flag", "lang"})


class SearchResponse(_Payload):
    """Search backend response.

    Records stay as plain mappings here; they are validated one at a time
    during normalization so a single unknown or malformed record can be
    dropped without rejecting the whole response.

    ``count`` is required: a response that declares zero results has none,
    whatever ``data`` holds.
    """

    count: int
    data: list[Any] = Field(default_factory=list)


class FileEntryInfo(_Payload):
    lang: str | None = None


class FileEntryData(_Payload):
    file: FileEntryInfo = Field(alias="File")


class DirectoryEntry(_Payload):
    """One row of a directory listing or of a file's siblings."""

    name: str
    entry_data: Union[Literal["Directory"], FileEntryData]
    current_file: bool = Field(default=False, alias="currentFile")

    @property
    def is_dir(self) -> bool:
        return self.entry_data == "Directory"

    @property
    def lang(self) -> str | None:
        if isinstance(self.entry_data, FileEntryData):
            return self.entry_data.file.lang
        return None


class DirectoryData(_Payload):
    repo_name: str
    relative_path: str
    repo_ref: str
    entries: list[DirectoryEntry] = Field(default_factory=list)


class DirectoryItem(_Payload):
    kind: Literal["dir"] = "dir"
    data: DirectoryData


class FileData(_Payload):
    lang: str | None = None
    relative_path: str
    contents: str = ""
    repo_name: str
    repo_ref: str
    siblings: list[DirectoryEntry] | None = None


class FileItem(_Payload):
    kind: Literal["file"] = "file"
    data: FileData


class RefDefSnippet(_Payload):
    """Snippet attached to a reference or definition hit.

    ``token_range`` is only set on mapped items: it is the first highlight
    after whitespace trimming, locating the looked-up token in ``data``.
    """

    data: str
    highlights: list[Range] = Field(default_factory=list)
    line_range: LineRange | None = None
    symbols: list[Symbol] = Field(default_factory=list)
    token_range: Range | None = None


class RefDefDataItem(_Payload):
    """A single reference or definition hit."""

    kind: str
    range: LineSpan | None = None
    snippet: RefDefSnippet


class TokenInfoFile(_Payload):
    """All hits found in one file."""

    file: str
    data: list[RefDefDataItem] = Field(default_factory=list)
