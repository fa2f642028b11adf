# src/searchview/tokenizer/base.py
"""Tokenizer abstract base class."""

from abc import ABC, abstractmethod


class Tokenizer(ABC):
    """Abstract base class for syntax tokenizers.

    Implementations must be restartable: tokenizing the same contents twice
    yields the same lines.
    """

    @abstractmethod
    def tokenize(self, contents: str, lang: str | None = None) -> list[list[str]]:
        """Split file contents into per-line token lists."""
        ...
