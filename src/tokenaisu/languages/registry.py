"""Language profile registry and resolution."""

from __future__ import annotations

from types import MappingProxyType

from tokenaisu.languages.base import Language, LanguageProfile
from tokenaisu.languages.prefixes import build_prefix_table
from tokenaisu.languages.rules import rules_for

_NAMES = {
    Language.AS: "Assamese",
    Language.BN: "Bengali",
    Language.CA: "Catalan",
    Language.CS: "Czech",
    Language.DE: "German",
    Language.EL: "Greek",
    Language.EN: "English",
    Language.ES: "Spanish",
    Language.ET: "Estonian",
    Language.FI: "Finnish",
    Language.FR: "French",
    Language.GA: "Irish",
    Language.GU: "Gujarati",
    Language.HI: "Hindi",
    Language.HU: "Hungarian",
    Language.IS: "Icelandic",
    Language.IT: "Italian",
    Language.KN: "Kannada",
    Language.LT: "Lithuanian",
    Language.LV: "Latvian",
    Language.ML: "Malayalam",
    Language.MNI: "Manipuri",
    Language.MR: "Marathi",
    Language.NL: "Dutch",
    Language.OR: "Odia",
    Language.PA: "Punjabi",
    Language.PL: "Polish",
    Language.PT: "Portuguese",
    Language.RO: "Romanian",
    Language.RU: "Russian",
    Language.SK: "Slovak",
    Language.SL: "Slovenian",
    Language.SO: "Somali",
    Language.SV: "Swedish",
    Language.TA: "Tamil",
    Language.TDT: "Tetun Dili",
    Language.TE: "Telugu",
    Language.YUE: "Cantonese",
    Language.ZH: "Chinese",
}

_ALIASES = {
    "cat": "ca",
    "ces": "cs",
    "cze": "cs",
    "deu": "de",
    "ger": "de",
    "eng": "en",
    "spa": "es",
    "fin": "fi",
    "fra": "fr",
    "fre": "fr",
    "gle": "ga",
    "hin": "hi",
    "ita": "it",
    "nld": "nl",
    "dut": "nl",
    "pol": "pl",
    "por": "pt",
    "ron": "ro",
    "rum": "ro",
    "rus": "ru",
    "swe": "sv",
    "tet": "tdt",
    "zho": "zh",
    "chi": "zh",
    "cmn": "zh",
}


def _build_profile(language: Language) -> LanguageProfile:
    rules = rules_for(language)
    return LanguageProfile(
        language=language,
        name=_NAMES[language],
        prefixes=MappingProxyType(build_prefix_table(language)),
        apostrophe_style=rules.apostrophe_style,
        word_internal=rules.word_internal,
        contractions=rules.contractions,
    )


_PROFILES: dict[Language, LanguageProfile] = {
    language: _build_profile(language) for language in Language
}


def get_profile(language: Language) -> LanguageProfile:
    """Return the immutable profile for ``language``."""
    return _PROFILES[language]


def list_languages() -> list[str]:
    """Return all supported language codes, sorted."""
    return sorted(language.value for language in Language)


def resolve_language(language_code: str | Language) -> Language:
    """Map a user supplied code (``en``, ``EN-us``, ``pt_BR``, ``fra``) to a Language."""
    if isinstance(language_code, Language):
        return language_code
    cleaned = language_code.strip().casefold().replace("_", "-")
    canonical = _ALIASES.get(cleaned, cleaned)
    try:
        return Language(canonical)
    except ValueError:
        pass

    base = canonical.split("-")[0]
    base = _ALIASES.get(base, base)
    try:
        return Language(base)
    except ValueError as exc:
        raise ValueError(
            f"Unsupported language {language_code!r}; choose one of: "
            + ", ".join(list_languages())
        ) from exc
