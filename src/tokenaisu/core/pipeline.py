"""Single-line tokenization entry point."""

from __future__ import annotations

from tokenaisu.core.cascade import run_cascade
from tokenaisu.core.options import DEFAULT_OPTIONS, TokenizerOptions
from tokenaisu.languages import Language, get_profile

# Order matters: "&" first so later entities are not re-escaped.
_ESCAPES = (
    ("&", "&amp;"),
    ("|", "&#124;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ("'", "&apos;"),
    ('"', "&quot;"),
    ("[", "&#91;"),
    ("]", "&#93;"),
)


def tokenize_line(
    text: str,
    language: Language,
    options: TokenizerOptions | None = None,
) -> str:
    """Tokenize one line of text into space separated tokens."""
    resolved = options or DEFAULT_OPTIONS
    tokenized = run_cascade(text, get_profile(language), resolved)
    if resolved.escape:
        tokenized = escape_tokens(tokenized)
    return tokenized


def escape_tokens(text: str) -> str:
    """Apply the Moses XML/factor-separator escaping table."""
    for raw, escaped in _ESCAPES:
        text = text.replace(raw, escaped)
    return text
