import pytest

from tokenaisu import Language, TokenizerOptions, tokenize_line
from tokenaisu.core.options import DEFAULT_OPTIONS


def test_abbreviation_period_stays_attached() -> None:
    assert tokenize_line("Dr. Smith arrived.", Language.EN) == "Dr. Smith arrived ."


def test_number_with_separators_is_one_token() -> None:
    result = tokenize_line("The price is 1,234.56 dollars.", Language.EN)

    assert result == "The price is 1,234.56 dollars ."


def test_english_contraction_split() -> None:
    assert tokenize_line("I can't go.", Language.EN) == "I ca n't go ."


def test_url_is_preserved() -> None:
    result = tokenize_line("Visit https://example.com/x?y=1 now.", Language.EN)

    assert result == "Visit https://example.com/x?y=1 now ."
    assert "https://example.com/x?y=1" in result.split()


@pytest.mark.parametrize("text", ["", "   ", "\t    "])
def test_empty_and_blank_lines(text: str) -> None:
    assert tokenize_line(text, Language.EN) == ""


def test_double_quotes_are_isolated() -> None:
    result = tokenize_line('This is a somewhat "less simple" test.', Language.EN)

    assert result == 'This is a somewhat " less simple " test .'


def test_french_elision_attaches_left() -> None:
    assert tokenize_line("Voici une phrase simple.", Language.FR) == "Voici une phrase simple ."
    assert tokenize_line("Moi, j'ai une apostrophe.", Language.FR) == "Moi , j' ai une apostrophe ."
    assert (
        tokenize_line("de musique rap issus de l'immigration", Language.FR)
        == "de musique rap issus de l' immigration"
    )


def test_italian_elision() -> None:
    assert tokenize_line("Alla fine dell'anno.", Language.IT) == "Alla fine dell' anno ."


def test_non_ascii_letters_are_not_split() -> None:
    result = tokenize_line("Ich hoffe, daß Sie schöne Ferien hatten.", Language.DE)

    assert result == "Ich hoffe , daß Sie schöne Ferien hatten ."


def test_cjk_punctuation_is_isolated() -> None:
    assert tokenize_line("这是一个句子。", Language.ZH) == "这是一个句子 。"


def test_devanagari_marks_stay_in_words() -> None:
    assert tokenize_line("यह एक वाक्य है।", Language.HI) == "यह एक वाक्य है ।"


def test_protected_patterns() -> None:
    text = "Some text containing the protected pattern $'$ and /'/."

    without = tokenize_line(text, Language.EN)
    assert without == "Some text containing the protected pattern $ ' $ and / ' / ."

    options = TokenizerOptions(protected_patterns=(r"([^\p{L}])[']([^\p{L}])",))
    protected = tokenize_line(text, Language.EN, options)
    assert protected == "Some text containing the protected pattern $'$ and /'/ ."


def test_invalid_protected_pattern_rejected() -> None:
    with pytest.raises(ValueError, match="invalid protected pattern"):
        TokenizerOptions(protected_patterns=("(unclosed",))


def test_aggressive_dash_splits() -> None:
    text = "a self-evident truth"

    assert tokenize_line(text, Language.EN) == "a self-evident truth"
    options = TokenizerOptions(aggressive_dash_splits=True)
    assert tokenize_line(text, Language.EN, options) == "a self @-@ evident truth"


def test_escaping() -> None:
    options = TokenizerOptions(escape=True)

    result = tokenize_line('a & b < c "d" [e] | f', Language.EN, options)

    assert result == "a &amp; b &lt; c &quot; d &quot; &#91; e &#93; &#124; f"


def test_escaping_off_by_default() -> None:
    assert tokenize_line("a & b", Language.EN) == "a & b"


def test_numeric_only_prefix() -> None:
    assert tokenize_line("See No. 5 for details.", Language.EN) == "See No. 5 for details ."
    assert tokenize_line("Say No. Then leave.", Language.EN) == "Say No . Then leave ."


def test_acronym_and_lowercase_continuation_keep_period() -> None:
    assert tokenize_line("The U.S. Army arrived.", Language.EN) == "The U.S. Army arrived ."
    assert tokenize_line("It was approx. ten.", Language.EN) == "It was approx. ten ."


def test_last_token_period_always_split() -> None:
    assert tokenize_line("Ask the Dr.", Language.EN) == "Ask the Dr ."


def test_ellipsis_is_one_token() -> None:
    assert tokenize_line("Wait...what", Language.EN) == "Wait ... what"
    assert tokenize_line("Hmm… fine.", Language.EN) == "Hmm … fine ."


def test_markup_is_opaque() -> None:
    assert tokenize_line("Click <b>here</b> now", Language.EN) == "Click <b> here </b> now"


def test_comparison_is_not_markup() -> None:
    assert tokenize_line("if x<y and z>w then", Language.EN) == "if x < y and z > w then"


def test_url_stops_at_markup_tag() -> None:
    assert tokenize_line("go www.x.org</b>", Language.EN) == "go www.x.org </b>"
    assert tokenize_line("<b>www.x.org</b>", Language.EN) == "<b> www.x.org </b>"


def test_multi_dash_is_isolated() -> None:
    assert tokenize_line("word--word", Language.EN) == "word -- word"


def test_english_possessive_and_decades() -> None:
    assert tokenize_line("In the 1990's music changed.", Language.EN) == (
        "In the 1990 's music changed ."
    )
    assert tokenize_line("Jones's car.", Language.EN) == "Jones 's car ."


def test_typographic_apostrophe_and_uncontracted_cannot() -> None:
    assert tokenize_line("I cannot go.", Language.EN) == "I cannot go ."
    assert tokenize_line("We won’t stay.", Language.EN) == "We wo n’t stay ."


def test_english_apostrophe_attaches_right() -> None:
    assert tokenize_line("O'Neill said y'all.", Language.EN) == "O 'Neill said y 'all ."
    assert tokenize_line("rock'n'roll", Language.EN) == "rock 'n 'roll"
    assert tokenize_line("Jones' car", Language.EN) == "Jones ' car"


def test_word_initial_apostrophe_stays_attached() -> None:
    assert tokenize_line("'Tis true.", Language.EN) == "'Tis true ."


def test_french_apostrophe_between_letters_attaches_left() -> None:
    assert tokenize_line("un prud'homme", Language.FR) == "un prud' homme"
    assert tokenize_line("aujourd'hui", Language.FR) == "aujourd' hui"


def test_default_language_isolates_apostrophes() -> None:
    assert tokenize_line("rock'n'roll", Language.DE) == "rock ' n ' roll"


def test_somali_keeps_glottal_apostrophe() -> None:
    assert tokenize_line("Waa ka'a dhow.", Language.SO) == "Waa ka'a dhow ."


def test_finnish_colon() -> None:
    assert tokenize_line("Huom: EU:n päätös", Language.FI) == "Huom : EU:n päätös"


def test_catalan_middle_dot() -> None:
    assert tokenize_line("El col·legi és gran.", Language.CA) == "El col·legi és gran ."
    assert tokenize_line("El col·legi és gran.", Language.EN) == "El col · legi és gran ."


def test_control_characters_and_unicode_whitespace() -> None:
    assert tokenize_line("a\x01b   c\t\td", Language.EN) == "ab c d"


@pytest.mark.parametrize(
    "text",
    [
        "  Hello,   (world)  !  ",
        "A　B C",
        "Visit https://example.com now , please .",
        "Wait . . . and -- then",
    ],
)
def test_output_has_single_spaces_and_no_padding(text: str) -> None:
    result = tokenize_line(text, Language.EN)

    assert "  " not in result
    assert result == result.strip()


def test_default_options_apply_when_none_given() -> None:
    assert DEFAULT_OPTIONS == TokenizerOptions()
    assert tokenize_line("a self-evident truth.", Language.EN, None) == "a self-evident truth ."
