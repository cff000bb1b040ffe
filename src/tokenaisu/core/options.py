"""Run-wide tokenizer options."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

import regex


@dataclass(frozen=True)
class TokenizerOptions:
    """Options shared by every line of a tokenization run."""

    aggressive_dash_splits: bool = False
    escape: bool = False
    protected_patterns: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if isinstance(self.protected_patterns, str):
            raise ValueError("protected_patterns must be a sequence of patterns, not a string")
        object.__setattr__(self, "protected_patterns", tuple(self.protected_patterns))
        compile_patterns(self.protected_patterns)

    @property
    def compiled_patterns(self) -> tuple[regex.Pattern[str], ...]:
        return compile_patterns(self.protected_patterns)


@lru_cache(maxsize=128)
def compile_patterns(patterns: tuple[str, ...]) -> tuple[regex.Pattern[str], ...]:
    """Compile protected patterns, raising ValueError for invalid ones."""
    compiled: list[regex.Pattern[str]] = []
    for pattern in patterns:
        try:
            compiled.append(regex.compile(pattern))
        except regex.error as exc:
            raise ValueError(f"invalid protected pattern {pattern!r}: {exc}") from exc
    return tuple(compiled)


DEFAULT_OPTIONS = TokenizerOptions()
