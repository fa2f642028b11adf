# src/searchview/models/citation.py
"""Citation and excerpt models."""

from pydantic import BaseModel, ConfigDict, Field


class Citation(BaseModel):
    """A line range in one file cited by a generated answer.

    Lines are 1-based. ``None`` bounds mean the citation could not be
    anchored in the file.
    """

    model_config = ConfigDict(frozen=True)

    start_line: int | None = None
    end_line: int | None = None
    comment: str = ""
    i: int = 0  # Position in the answer


class CitationWindow(Citation):
    """A citation plus the 0-based line window displayed around it."""

    window_start: int | None = None
    window_end: int | None = None


class CitationLayout(BaseModel):
    """Windows for every citation of a file and the height they render at."""

    model_config = ConfigDict(frozen=True)

    windows: list[CitationWindow] = Field(default_factory=list)
    total_height: int = 0
    collapsed_height: int = 0
    is_overflowing: bool = False


class Token(BaseModel):
    model_config = ConfigDict(frozen=True)

    token: str
    highlight: bool = False


class TokensLine(BaseModel):
    """The tokens of one source line and its 1-based number."""

    model_config = ConfigDict(frozen=True)

    tokens: list[Token] = Field(default_factory=list)
    line_number: int


class CitationExcerpt(BaseModel):
    """The lines rendered for a single citation."""

    model_config = ConfigDict(frozen=True)

    window: CitationWindow
    lines: list[TokensLine] = Field(default_factory=list)
    is_last: bool = False
