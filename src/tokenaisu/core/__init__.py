"""Tokenization core: protected spans, rule cascade and parallel driver."""

from tokenaisu.core.cascade import CASCADE, Stage, run_cascade
from tokenaisu.core.driver import (
    Line,
    TokenizedLine,
    split_lines,
    tokenize_document,
    tokenize_text,
)
from tokenaisu.core.options import TokenizerOptions
from tokenaisu.core.pipeline import escape_tokens, tokenize_line
from tokenaisu.core.spans import ProtectedSpan, SpanKind, find_protected_spans

__all__ = [
    "CASCADE",
    "Line",
    "ProtectedSpan",
    "SpanKind",
    "Stage",
    "TokenizedLine",
    "TokenizerOptions",
    "escape_tokens",
    "find_protected_spans",
    "run_cascade",
    "split_lines",
    "tokenize_document",
    "tokenize_line",
    "tokenize_text",
]
