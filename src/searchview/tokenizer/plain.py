# src/searchview/tokenizer/plain.py
"""Plain-text tokenizer implementation."""

from searchview.tokenizer.base import Tokenizer


class PlainTokenizer(Tokenizer):
    """Tokenizer that treats every line as a single token.

    Used when no syntax-aware tokenizer is available for a language.
    """

    def tokenize(self, contents: str, lang: str | None = None) -> list[list[str]]:
        """Split contents on line breaks, one token per line."""
        if not contents:
            return []
        return [[line] for line in contents.splitlines()]
