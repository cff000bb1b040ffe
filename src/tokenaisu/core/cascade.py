"""Ordered rewrite cascade turning one line into space separated tokens.

Every stage re-derives the protected spans of the text it receives, leaves
anything inside those spans untouched and returns whitespace-collapsed text.
Stages are idempotent on their own output; their order is fixed.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from functools import lru_cache, partial

import regex

from tokenaisu.core.options import TokenizerOptions
from tokenaisu.core.spans import SpanIndex, SpanKind, index_protected_spans
from tokenaisu.languages import ApostropheStyle, Language, LanguageProfile, get_profile
from tokenaisu.languages.rules import APOSTROPHES

_CONTROL_RE = regex.compile(r"[\x00-\x08\x0e-\x1b]")
_RUN_RE = regex.compile(r"\S+")
_FINAL_PERIOD_RE = regex.compile(r"^(?P<pre>\S+)\.(?P<quote>['’]?)$")
_APOSTROPHE_RE = regex.compile(f"[{APOSTROPHES}]")
_PADDED_KINDS = frozenset({SpanKind.ELLIPSIS, SpanKind.MARKUP})

StageFn = Callable[[str, LanguageProfile, TokenizerOptions], str]


@dataclass(frozen=True)
class Stage:
    """One named rewrite step of the cascade."""

    name: str
    apply: StageFn


def collapse(text: str) -> str:
    """Collapse runs of Unicode whitespace to one space and trim."""
    return " ".join(text.split())


def normalize_whitespace(text: str, profile: LanguageProfile, options: TokenizerOptions) -> str:
    return collapse(_CONTROL_RE.sub("", text))


def isolate_symbols(text: str, profile: LanguageProfile, options: TokenizerOptions) -> str:
    """Pad punctuation and symbols outside protected spans with spaces.

    Padding can expose new whitespace runs (and with them new URL or
    abbreviation spans), so the rewrite is repeated until the text is stable.
    """
    return _until_stable(text, partial(_isolate_once, profile=profile, options=options))


def split_periods(text: str, profile: LanguageProfile, options: TokenizerOptions) -> str:
    """Isolate token-final periods that do not belong to an abbreviation.

    Splitting ``8.'.`` leaves ``8.'`` behind, which gets the same decision on
    the next round.
    """
    return _until_stable(text, partial(_split_periods_once, profile=profile, options=options))


def split_apostrophes(text: str, profile: LanguageProfile, options: TokenizerOptions) -> str:
    """Attach or isolate apostrophes following the profile's apostrophe style."""
    return _until_stable(text, partial(_split_apostrophes_once, profile=profile, options=options))


def split_contractions(text: str, profile: LanguageProfile, options: TokenizerOptions) -> str:
    """Expand fused contractions using the profile's contraction rules."""
    if not profile.contractions:
        return collapse(text)
    return _until_stable(text, partial(_split_contractions_once, profile=profile, options=options))


def collapse_whitespace(text: str, profile: LanguageProfile, options: TokenizerOptions) -> str:
    return collapse(text)


CASCADE: tuple[Stage, ...] = (
    Stage("normalize_whitespace", normalize_whitespace),
    Stage("isolate_symbols", isolate_symbols),
    Stage("split_periods", split_periods),
    Stage("split_apostrophes", split_apostrophes),
    Stage("split_contractions", split_contractions),
    Stage("collapse_whitespace", collapse_whitespace),
)


def run_cascade(text: str, profile: LanguageProfile, options: TokenizerOptions) -> str:
    """Apply every stage in order."""
    for stage in CASCADE:
        text = stage.apply(text, profile, options)
    return text


def _spans(text: str, profile: LanguageProfile, options: TokenizerOptions) -> SpanIndex:
    return index_protected_spans(text, profile, options.compiled_patterns)


def _until_stable(text: str, step: Callable[[str], str]) -> str:
    # steps only insert separators (or consume one), so this terminates
    while True:
        result = step(text)
        if result == text:
            return result
        text = result


def _isolate_once(text: str, *, profile: LanguageProfile, options: TokenizerOptions) -> str:
    pattern = _symbol_pattern(profile.language, options.aggressive_dash_splits)
    text = _rewrite(text, pattern, _pad_symbol, _spans(text, profile, options))
    text = _pad_spans(text, _spans(text, profile, options), _PADDED_KINDS)
    return collapse(text)


def _split_periods_once(text: str, *, profile: LanguageProfile, options: TokenizerOptions) -> str:
    spans = _spans(text, profile, options)
    runs = list(_RUN_RE.finditer(text))
    words: list[str] = []
    for idx, run in enumerate(runs):
        word = run.group()
        match = _FINAL_PERIOD_RE.match(word)
        if match is not None and _period_breaks(match, run.start(), idx, runs, spans):
            word = f"{match['pre']} ."
            if match["quote"]:
                word = f"{word} {match['quote']}"
        words.append(word)
    return " ".join(words)


def _split_apostrophes_once(
    text: str, *, profile: LanguageProfile, options: TokenizerOptions
) -> str:
    place = partial(_place_apostrophe, style=profile.apostrophe_style)
    return collapse(_rewrite(text, _APOSTROPHE_RE, place, _spans(text, profile, options)))


def _split_contractions_once(
    text: str, *, profile: LanguageProfile, options: TokenizerOptions
) -> str:
    for rule in profile.contractions:
        text = _rewrite(text, rule.pattern, rule.expand, _spans(text, profile, options))
    return collapse(text)


def _rewrite(
    text: str,
    pattern: regex.Pattern[str],
    replace: Callable[[regex.Match[str]], str],
    spans: SpanIndex,
) -> str:
    pieces: list[str] = []
    cursor = 0
    for match in pattern.finditer(text):
        if spans.overlaps(match.start(), match.end()):
            continue
        pieces.append(text[cursor : match.start()])
        pieces.append(replace(match))
        cursor = match.end()
    pieces.append(text[cursor:])
    return "".join(pieces)


def _pad_spans(text: str, spans: SpanIndex, kinds: frozenset[SpanKind]) -> str:
    pieces: list[str] = []
    cursor = 0
    for span in spans:
        if span.kind not in kinds:
            continue
        pieces.append(text[cursor : span.start])
        pieces.append(f" {span.text(text)} ")
        cursor = span.end
    pieces.append(text[cursor:])
    return "".join(pieces)


@lru_cache(maxsize=None)
def _symbol_pattern(language: Language, aggressive_dash_splits: bool) -> regex.Pattern[str]:
    word_internal = get_profile(language).word_internal
    kept = _class_escape(".,`-" + APOSTROPHES + word_internal)
    parts = [r"(?P<dashes>-{2,})"]
    if aggressive_dash_splits:
        parts.append(r"(?P<hyphen>(?<=[\p{L}\p{N}])-(?=[\p{L}\p{N}]))")
    parts.append(r"(?P<comma>(?<!\p{N}),|,(?!\p{N}))")
    if word_internal:
        parts.append(rf"(?P<internal>[{_class_escape(word_internal)}](?!\p{{Ll}}))")
    parts.append(rf"(?P<symbol>[^\p{{L}}\p{{M}}\p{{N}}\s{kept}])")
    return regex.compile("|".join(parts))


def _pad_symbol(match: regex.Match[str]) -> str:
    if match.lastgroup == "hyphen":
        return " @-@ "
    return f" {match.group()} "


def _period_breaks(
    match: regex.Match[str],
    offset: int,
    idx: int,
    runs: list[regex.Match[str]],
    spans: SpanIndex,
) -> bool:
    if spans.covers(offset + match.end("pre")):
        return False
    if idx == len(runs) - 1:
        return True
    pre = match["pre"]
    if "." in pre and any(char.isalpha() for char in pre):
        return False
    return not runs[idx + 1].group()[0].islower()


def _place_apostrophe(match: regex.Match[str], style: ApostropheStyle) -> str:
    text = match.string
    pos = match.start()
    mark = match.group()
    left = text[pos - 1] if pos > 0 else " "
    right = text[pos + 1] if pos + 1 < len(text) else " "

    if style is ApostropheStyle.SPLIT_RIGHT:
        # don't -> don 't ; 1990's -> 1990 's
        if right.isalpha() and (left.isalpha() or (left.isnumeric() and right == "s")):
            return f" {mark}"
        # 'tis at a word start is already attached; 5'x has no rule
        if right.isalpha() and (left.isspace() or left.isnumeric()):
            return mark
    elif style is ApostropheStyle.SPLIT_LEFT:
        # l'eau -> l' eau
        if left.isalpha() and right.isalpha():
            return f"{mark} "
        if left.isalpha() and right.isspace():
            return mark
    elif style is ApostropheStyle.KEEP_GLOTTAL:
        if left.isalpha() and right.isalpha():
            return mark

    return f" {mark} "


def _class_escape(chars: str) -> str:
    return "".join(f"\\{char}" if char in "\\]^-[" else char for char in chars)
