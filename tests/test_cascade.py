import random

import pytest

from tokenaisu.core import CASCADE, TokenizerOptions, run_cascade, tokenize_line
from tokenaisu.core.cascade import collapse
from tokenaisu.languages import Language, get_profile

SAMPLES = [
    "Dr. Smith arrived.",
    "The price is 1,234.56 dollars.",
    "I can't go.",
    "I cannot go.",
    "O'Neill said y'all, prud'homme",
    "He wrote 8.'. Then",
    "A-:(www.</b>)",
    "go www.x.org</b> and if x<y and z>w then",
    "Visit https://example.com/x?y=1 now.",
    'This is a somewhat "less simple" test.',
    "Moi, j'ai une apostrophe.",
    "'Hello,' she said (quietly)...",
    "Wait...what -- really?",
    "Click <b>here</b> now!",
    "rock'n'roll in the 1990's",
    "a self-evident truth, 5,a and 1, 2",
    "  spaced\t out \x01 text  ",
    "Huom: EU:n päätös",
    "",
]

LANGUAGES = [Language.EN, Language.FR, Language.DE, Language.FI, Language.SO, Language.TDT]


def test_stage_order() -> None:
    assert [stage.name for stage in CASCADE] == [
        "normalize_whitespace",
        "isolate_symbols",
        "split_periods",
        "split_apostrophes",
        "split_contractions",
        "collapse_whitespace",
    ]


@pytest.mark.parametrize("aggressive", [False, True])
@pytest.mark.parametrize("language", LANGUAGES)
def test_each_stage_is_idempotent(language: Language, aggressive: bool) -> None:
    profile = get_profile(language)
    options = TokenizerOptions(aggressive_dash_splits=aggressive)

    for stage in CASCADE:
        for text in SAMPLES:
            once = stage.apply(text, profile, options)
            assert stage.apply(once, profile, options) == once, (stage.name, text)


@pytest.mark.parametrize("language", LANGUAGES)
def test_every_stage_output_is_collapsed(language: Language) -> None:
    profile = get_profile(language)
    options = TokenizerOptions()

    for text in SAMPLES:
        for stage in CASCADE:
            text = stage.apply(text, profile, options)
            assert text == collapse(text), stage.name


def test_run_cascade_matches_tokenize_line() -> None:
    profile = get_profile(Language.EN)
    options = TokenizerOptions()

    for text in SAMPLES:
        assert run_cascade(text, profile, options) == tokenize_line(text, Language.EN)


def test_contraction_stage_only_rewrites_split_forms() -> None:
    profile = get_profile(Language.EN)
    stage = {stage.name: stage for stage in CASCADE}["split_contractions"]

    assert stage.apply("can 't", profile, TokenizerOptions()) == "ca n't"
    assert stage.apply("DON 'T", profile, TokenizerOptions()) == "DO N'T"
    assert stage.apply("can't", profile, TokenizerOptions()) == "can't"
    assert stage.apply("cannot", profile, TokenizerOptions()) == "cannot"


def test_protected_spans_survive_every_stage() -> None:
    options = TokenizerOptions(protected_patterns=(r"A\.B-C",))
    profile = get_profile(Language.EN)
    text = CASCADE[0].apply("keep A.B-C and https://x.org/a,b, intact", profile, options)

    # the URL run still carries its trailing comma until symbols are isolated
    assert "https://x.org/a,b," in text.split()
    for stage in CASCADE[1:]:
        text = stage.apply(text, profile, options)
        assert "A.B-C" in text.split()
        assert "https://x.org/a,b" in text.split()


def test_period_split_reaches_a_stable_form() -> None:
    profile = get_profile(Language.EN)
    once = {stage.name: stage for stage in CASCADE}["split_periods"].apply(
        "He wrote 8.'. Then", profile, TokenizerOptions()
    )

    assert once == "He wrote 8 . ' . Then"


def test_symbol_isolation_keeps_urls_out_of_tags() -> None:
    profile = get_profile(Language.EN)
    stage = {stage.name: stage for stage in CASCADE}["isolate_symbols"]

    once = stage.apply("A-:(www.</b>)", profile, TokenizerOptions())

    assert "</b>" in once.split()
    assert stage.apply(once, profile, TokenizerOptions()) == once


_FRAGMENTS = [
    "a", "n", "t", "s", "T", "N", "é", "ß", "中", "ि", "5", "1,2", "8.",
    "'", "’", ".", ",", ":", ";", "-", "--", "·", "…", "...", "!", "?",
    "(", ")", '"', "$", "&", "@", "/", "<", ">", "<b>", "</b>", "www.",
    "http://", "Dr.", "No.", " ", " ", " ", "\t", " ", "\x01",
]


def _random_line(rng: random.Random) -> str:
    return "".join(rng.choice(_FRAGMENTS) for _ in range(rng.randint(1, 24)))


@pytest.mark.parametrize("aggressive", [False, True])
@pytest.mark.parametrize("language", list(Language))
def test_stages_are_idempotent_on_random_lines(language: Language, aggressive: bool) -> None:
    rng = random.Random(f"cascade-{language.value}-{aggressive}")
    profile = get_profile(language)
    options = TokenizerOptions(aggressive_dash_splits=aggressive)

    for _ in range(80):
        text = _random_line(rng)
        for stage in CASCADE:
            once = stage.apply(text, profile, options)
            assert stage.apply(once, profile, options) == once, (stage.name, text)
            text = once
