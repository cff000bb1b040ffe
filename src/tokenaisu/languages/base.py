"""Language profile base types."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum

import regex


class Language(str, Enum):
    """Closed set of supported language codes."""

    AS = "as"
    BN = "bn"
    CA = "ca"
    CS = "cs"
    DE = "de"
    EL = "el"
    EN = "en"
    ES = "es"
    ET = "et"
    FI = "fi"
    FR = "fr"
    GA = "ga"
    GU = "gu"
    HI = "hi"
    HU = "hu"
    IS = "is"
    IT = "it"
    KN = "kn"
    LT = "lt"
    LV = "lv"
    ML = "ml"
    MNI = "mni"
    MR = "mr"
    NL = "nl"
    OR = "or"
    PA = "pa"
    PL = "pl"
    PT = "pt"
    RO = "ro"
    RU = "ru"
    SK = "sk"
    SL = "sl"
    SO = "so"
    SV = "sv"
    TA = "ta"
    TDT = "tdt"
    TE = "te"
    YUE = "yue"
    ZH = "zh"


class PrefixKind(str, Enum):
    """How a non-breaking prefix protects the period that follows it."""

    ALWAYS = "always"
    NUMERIC_ONLY = "numeric_only"


class ApostropheStyle(str, Enum):
    """Policy for attaching apostrophes to neighboring tokens."""

    ISOLATE = "isolate"
    SPLIT_RIGHT = "split_right"
    SPLIT_LEFT = "split_left"
    KEEP_GLOTTAL = "keep_glottal"


@dataclass(frozen=True)
class ContractionRule:
    """Pattern/replacement pair expanding a fused contraction."""

    pattern: regex.Pattern[str]
    replacement: str

    @classmethod
    def compile(cls, pattern: str, replacement: str) -> ContractionRule:
        return cls(pattern=regex.compile(pattern), replacement=replacement)

    def expand(self, match: regex.Match[str]) -> str:
        return match.expand(self.replacement)


@dataclass(frozen=True)
class LanguageProfile:
    """Read-only tokenization data bound to one language."""

    language: Language
    name: str
    prefixes: Mapping[str, PrefixKind] = field(default_factory=dict)
    apostrophe_style: ApostropheStyle = ApostropheStyle.ISOLATE
    word_internal: str = ""
    contractions: tuple[ContractionRule, ...] = ()

    @property
    def code(self) -> str:
        return self.language.value

    def prefix_kind(self, prefix: str) -> PrefixKind | None:
        """Return the non-breaking prefix kind for ``prefix`` (case-sensitive)."""
        return self.prefixes.get(prefix)
