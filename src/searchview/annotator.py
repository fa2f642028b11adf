# src/searchview/annotator.py
"""Build the excerpts rendered for an answer's citations into one file."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from searchview.citations import layout_citations
from searchview.mappers.tree import map_file_result
from searchview.models.citation import Citation, CitationExcerpt, CitationLayout, TokensLine
from searchview.models.raw import FileItem
from searchview.models.tree import FileView
from searchview.settings import Settings
from searchview.tokenizer import PlainTokenizer, Tokenizer, excerpt, number_lines


@dataclass
class AnnotatedFile:
    """A cited file with one excerpt per citation.

    Attributes:
        file: The cited file
        layout: Citation windows and rendered height
        lines: All numbered lines of the file
        excerpts: Lines shown for each citation, in answer order
    """

    file: FileView
    layout: CitationLayout
    lines: list[TokensLine] = field(default_factory=list)
    excerpts: list[CitationExcerpt] = field(default_factory=list)

    @property
    def is_overflowing(self) -> bool:
        """True when the block should start collapsed."""
        return self.layout.is_overflowing

    @classmethod
    def build(
        cls,
        file: FileView | FileItem | Mapping[str, Any],
        citations: Iterable[Citation | Mapping[str, Any]],
        tokenizer: Tokenizer | None = None,
        settings: Settings | None = None,
    ) -> AnnotatedFile:
        """Tokenize a file and cut the excerpts for its citations.

        Args:
            file: The cited file (view, backend record or raw mapping)
            citations: Citations into this file, in answer order
            tokenizer: Tokenizer for the file's language (default: plain text)
            settings: Margin and height settings (default: Settings())

        Returns:
            AnnotatedFile with one excerpt per citation
        """
        if not isinstance(file, FileView):
            file = map_file_result(file)
        tokenizer = tokenizer or PlainTokenizer()
        settings = settings or Settings()

        lines = number_lines(tokenizer.tokenize(file.code, file.language))
        layout = layout_citations(citations, settings)
        last = len(layout.windows) - 1
        excerpts = [
            CitationExcerpt(window=window, lines=excerpt(lines, window), is_last=index == last)
            for index, window in enumerate(layout.windows)
        ]
        return cls(file=file, layout=layout, lines=lines, excerpts=excerpts)
