"""Protected-span detection.

A protected span is a character range the cascade must not split: numbers
with separators, URL/email-like runs, non-breaking-prefix abbreviations,
ellipses and markup tags, plus caller supplied patterns. Categories are
scanned in priority order and a candidate is only committed when it does not
overlap anything committed before it, so the result never overlaps.
"""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from enum import Enum

import regex

from tokenaisu.languages.base import LanguageProfile, PrefixKind


class SpanKind(str, Enum):
    """Reason a span is protected, in priority order."""

    PATTERN = "pattern"
    NUMBER = "number"
    URL = "url"
    ABBREVIATION = "abbreviation"
    ELLIPSIS = "ellipsis"
    MARKUP = "markup"


@dataclass(frozen=True, order=True)
class ProtectedSpan:
    """Half-open ``[start, end)`` character range."""

    start: int
    end: int
    kind: SpanKind

    def text(self, line: str) -> str:
        return line[self.start : self.end]


_RUN_RE = regex.compile(r"\S+")
_NUMBER_RE = regex.compile(r"\p{N}+(?:[.,]\p{N}+)*")
_ELLIPSIS_RE = regex.compile(r"\.{2,}|…+")
# tags with optional name=value attributes; a bare "x<y and z>w" is not a tag
_MARKUP_RE = regex.compile(
    r"""<[/!?]?\p{L}[\w:.-]*(?:\s+[\w:.-]+=(?:"[^"<>]*"|'[^'<>]*'|[^\s"'<>]+))*\s*[/?]?>"""
)
_SCHEMES = ("http:", "https:", "ftp:", "ftps:", "sftp:", "file:", "mailto:", "www.")
_URL_LEADING = "([{<\"'“‘«"
_URL_TRAILING = ".,;:!?)]}>\"'”’»"


class SpanIndex:
    """Sorted, non-overlapping spans with overlap queries."""

    def __init__(self, spans: Iterable[ProtectedSpan] = ()) -> None:
        self._spans: list[ProtectedSpan] = []
        self._starts: list[int] = []
        for span in spans:
            self.add(span)

    def __iter__(self) -> Iterator[ProtectedSpan]:
        return iter(self._spans)

    def __len__(self) -> int:
        return len(self._spans)

    def overlaps(self, start: int, end: int) -> bool:
        """True if ``[start, end)`` shares a character with any span."""
        if start >= end:
            return False
        idx = bisect_right(self._starts, start)
        if idx > 0 and self._spans[idx - 1].end > start:
            return True
        return idx < len(self._spans) and self._spans[idx].start < end

    def covers(self, position: int) -> bool:
        return self.overlaps(position, position + 1)

    def add(self, span: ProtectedSpan) -> bool:
        """Commit ``span`` unless it overlaps; return whether it was added."""
        if span.start >= span.end or self.overlaps(span.start, span.end):
            return False
        idx = bisect_right(self._starts, span.start)
        self._starts.insert(idx, span.start)
        self._spans.insert(idx, span)
        return True

    def spans(self) -> list[ProtectedSpan]:
        return list(self._spans)


def find_protected_spans(
    text: str,
    profile: LanguageProfile,
    patterns: Sequence[regex.Pattern[str]] = (),
) -> list[ProtectedSpan]:
    """Return the protected spans of ``text``, sorted and non-overlapping."""
    return index_protected_spans(text, profile, patterns).spans()


def index_protected_spans(
    text: str,
    profile: LanguageProfile,
    patterns: Sequence[regex.Pattern[str]] = (),
) -> SpanIndex:
    index = SpanIndex()
    markup = [(m.start(), m.end()) for m in _MARKUP_RE.finditer(text)]
    urls = list(_url_candidates(text, markup))
    containers = SpanIndex(
        ProtectedSpan(start, end, SpanKind.URL) for start, end in _disjoint(urls + markup)
    )

    for pattern in patterns:
        for match in pattern.finditer(text):
            index.add(ProtectedSpan(match.start(), match.end(), SpanKind.PATTERN))
    for match in _NUMBER_RE.finditer(text):
        if not containers.overlaps(match.start(), match.end()):
            index.add(ProtectedSpan(match.start(), match.end(), SpanKind.NUMBER))
    for start, end in urls:
        index.add(ProtectedSpan(start, end, SpanKind.URL))
    for start, end in _abbreviation_candidates(text, profile):
        index.add(ProtectedSpan(start, end, SpanKind.ABBREVIATION))
    for match in _ELLIPSIS_RE.finditer(text):
        index.add(ProtectedSpan(match.start(), match.end(), SpanKind.ELLIPSIS))
    for start, end in markup:
        index.add(ProtectedSpan(start, end, SpanKind.MARKUP))
    return index


def is_url_like(token: str) -> bool:
    """True for runs that look like URLs, e-mail addresses or handles."""
    if "://" in token or "@" in token:
        return True
    return token.casefold().startswith(_SCHEMES)


def _url_candidates(
    text: str, tags: Sequence[tuple[int, int]] = ()
) -> Iterator[tuple[int, int]]:
    tag_starts = [start for start, _ in tags]
    for run in _RUN_RE.finditer(text):
        start, end = run.start(), run.end()
        # a URL never reaches into a markup tag: <b>www.x.org</b>
        idx = bisect_right(tag_starts, start)
        if idx > 0 and tags[idx - 1][1] > start:
            start = tags[idx - 1][1]
        if idx < len(tags) and tags[idx][0] < end:
            end = tags[idx][0]
        if start >= end:
            continue
        token = text[start:end]
        stripped = token.lstrip(_URL_LEADING)
        start += len(token) - len(stripped)
        trimmed = stripped.rstrip(_URL_TRAILING)
        end -= len(stripped) - len(trimmed)
        if trimmed and is_url_like(trimmed):
            yield start, end


def _abbreviation_candidates(
    text: str, profile: LanguageProfile
) -> Iterator[tuple[int, int]]:
    runs = list(_RUN_RE.finditer(text))
    # the last token never qualifies: its period ends the line
    for current, following in zip(runs, runs[1:]):
        token = current.group()
        if len(token) < 2 or not token.endswith("."):
            continue
        kind = profile.prefix_kind(token[:-1])
        if kind is PrefixKind.ALWAYS:
            yield current.start(), current.end()
        elif kind is PrefixKind.NUMERIC_ONLY and following.group()[0].isdigit():
            yield current.start(), current.end()


def _disjoint(ranges: list[tuple[int, int]]) -> list[tuple[int, int]]:
    merged: list[tuple[int, int]] = []
    for start, end in sorted(ranges):
        if merged and start < merged[-1][1]:
            merged[-1] = (merged[-1][0], max(merged[-1][1], end))
        else:
            merged.append((start, end))
    return merged
