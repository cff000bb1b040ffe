"""Per-language punctuation, apostrophe and contraction rules."""

from __future__ import annotations

from dataclasses import dataclass

from tokenaisu.languages.base import ApostropheStyle, ContractionRule, Language

# Apostrophe-like characters handled by the apostrophe stage.
APOSTROPHES = "'’"

_ENGLISH_CONTRACTIONS = (
    # can 't -> ca n't ; DON 'T -> DO N'T
    ContractionRule.compile(r"(?<=\p{L})([nN]) (['’][tT])(?=\s|$)", r" \1\2"),
)


@dataclass(frozen=True)
class PunctuationRules:
    """Rule parameters shared by the cascade stages for one language."""

    apostrophe_style: ApostropheStyle = ApostropheStyle.ISOLATE
    word_internal: str = ""
    contractions: tuple[ContractionRule, ...] = ()


_RULES: dict[Language, PunctuationRules] = {
    Language.EN: PunctuationRules(
        apostrophe_style=ApostropheStyle.SPLIT_RIGHT,
        contractions=_ENGLISH_CONTRACTIONS,
    ),
    Language.FR: PunctuationRules(apostrophe_style=ApostropheStyle.SPLIT_LEFT),
    Language.IT: PunctuationRules(apostrophe_style=ApostropheStyle.SPLIT_LEFT),
    Language.GA: PunctuationRules(apostrophe_style=ApostropheStyle.SPLIT_LEFT),
    Language.CA: PunctuationRules(
        apostrophe_style=ApostropheStyle.SPLIT_LEFT,
        word_internal="·",
    ),
    Language.FI: PunctuationRules(word_internal=":"),
    Language.SV: PunctuationRules(word_internal=":"),
    Language.SO: PunctuationRules(apostrophe_style=ApostropheStyle.KEEP_GLOTTAL),
    Language.TDT: PunctuationRules(
        apostrophe_style=ApostropheStyle.KEEP_GLOTTAL,
        word_internal="'",
    ),
}

_DEFAULT_RULES = PunctuationRules()


def rules_for(language: Language) -> PunctuationRules:
    """Return punctuation rules for ``language``; most languages use the defaults."""
    return _RULES.get(language, _DEFAULT_RULES)
