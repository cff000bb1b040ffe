"""Moses-style rule-based tokenizer."""

from tokenaisu.core import TokenizerOptions, tokenize_document, tokenize_line, tokenize_text
from tokenaisu.languages import Language, resolve_language

__version__ = "0.1.0"

__all__ = [
    "Language",
    "TokenizerOptions",
    "__version__",
    "resolve_language",
    "tokenize_document",
    "tokenize_line",
    "tokenize_text",
]
