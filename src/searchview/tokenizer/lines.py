# src/searchview/tokenizer/lines.py
"""Helpers turning token lists into numbered, sliceable lines."""

from collections.abc import Iterable, Sequence

from searchview.models.citation import CitationWindow, Token, TokensLine


def number_lines(token_lines: Iterable[Sequence[str]]) -> list[TokensLine]:
    """Attach 1-based line numbers to per-line token lists."""
    return [
        TokensLine(tokens=[Token(token=token) for token in tokens], line_number=number)
        for number, tokens in enumerate(token_lines, start=1)
    ]


def excerpt(lines: Sequence[TokensLine], window: CitationWindow) -> list[TokensLine]:
    """Return the lines shown for a citation window.

    The slice always reaches the citation's last line, even when no context
    fits below it. Unanchored windows render nothing.
    """
    if window.window_start is None or window.window_end is None:
        return []
    end = window.window_end
    if window.end_line is not None:
        end = max(end, window.end_line)
    return list(lines[window.window_start : end])
