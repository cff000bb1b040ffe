"""Language profiles and code resolution."""

from tokenaisu.languages.base import (
    ApostropheStyle,
    ContractionRule,
    Language,
    LanguageProfile,
    PrefixKind,
)
from tokenaisu.languages.registry import get_profile, list_languages, resolve_language

__all__ = [
    "ApostropheStyle",
    "ContractionRule",
    "Language",
    "LanguageProfile",
    "PrefixKind",
    "get_profile",
    "list_languages",
    "resolve_language",
]
