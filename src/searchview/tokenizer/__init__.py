# src/searchview/tokenizer/__init__.py
"""Tokenizers and line helpers for rendering file excerpts."""

from searchview.tokenizer.base import Tokenizer
from searchview.tokenizer.lines import excerpt, number_lines
from searchview.tokenizer.plain import PlainTokenizer

__all__ = ["Tokenizer", "PlainTokenizer", "number_lines", "excerpt"]
