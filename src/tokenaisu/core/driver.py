"""Document-level tokenization over a process pool."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from functools import partial
from multiprocessing import Pool, cpu_count

from tokenaisu.core.options import DEFAULT_OPTIONS, TokenizerOptions
from tokenaisu.core.pipeline import tokenize_line
from tokenaisu.languages import Language

logger = logging.getLogger(__name__)

# Below this many lines the pool start-up costs more than it saves.
PARALLEL_MIN_LINES = 64


@dataclass(frozen=True)
class Line:
    """Input line tagged with its position in the document."""

    index: int
    text: str


@dataclass(frozen=True)
class TokenizedLine:
    """Tokenized output for the line at ``index``."""

    index: int
    text: str


def resolve_workers(workers: int | None = None) -> int:
    """Pool size: ``workers`` when given, capped at the hardware parallelism."""
    available = cpu_count()
    if not workers or workers < 1:
        return available
    return min(workers, available)


def tokenize_document(
    lines: Sequence[str],
    language: Language,
    options: TokenizerOptions | None = None,
    *,
    workers: int | None = None,
) -> list[str]:
    """Tokenize every line; ``output[i]`` always corresponds to ``lines[i]``."""
    resolved = options or DEFAULT_OPTIONS
    units = [Line(index=index, text=text) for index, text in enumerate(lines)]
    pool_size = min(resolve_workers(workers), len(units))

    if pool_size <= 1 or len(units) < PARALLEL_MIN_LINES:
        logger.debug("Tokenizing %d lines inline (%s)", len(units), language.value)
        results = [tokenize_unit(unit, language=language, options=resolved) for unit in units]
    else:
        chunksize = max(1, len(units) // (pool_size * 4))
        logger.debug(
            "Tokenizing %d lines on %d workers (%s, chunksize=%d)",
            len(units),
            pool_size,
            language.value,
            chunksize,
        )
        task = partial(tokenize_unit, language=language, options=resolved)
        with Pool(processes=pool_size) as pool:
            results = list(pool.imap_unordered(task, units, chunksize=chunksize))

    return _reassemble(results, len(units))


def tokenize_unit(line: Line, *, language: Language, options: TokenizerOptions) -> TokenizedLine:
    """Worker body: tokenize one line and keep its index."""
    return TokenizedLine(index=line.index, text=tokenize_line(line.text, language, options))


def tokenize_text(
    text: str,
    language: Language,
    options: TokenizerOptions | None = None,
    *,
    workers: int | None = None,
) -> str:
    """Tokenize a multi-line string; each output line ends with a newline."""
    lines = split_lines(text)
    if not lines:
        return ""
    tokenized = tokenize_document(lines, language, options, workers=workers)
    return "\n".join(tokenized) + "\n"


def split_lines(text: str) -> list[str]:
    r"""Split on ``\n`` and ``\r\n`` only; a final newline does not start a new line.

    Other Unicode line separators (``\u2028``, ``\x85``, form feed ...) stay
    inside the line and are collapsed as whitespace by the cascade.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _reassemble(results: list[TokenizedLine], count: int) -> list[str]:
    ordered: list[str | None] = [None] * count
    for result in results:
        ordered[result.index] = result.text
    missing = [index for index, text in enumerate(ordered) if text is None]
    if missing:
        raise RuntimeError(f"Tokenization lost {len(missing)} line(s), first at {missing[0]}")
    return [text for text in ordered if text is not None]
