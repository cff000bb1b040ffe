import logging
from multiprocessing import cpu_count

from tokenaisu.core import driver
from tokenaisu.core.driver import (
    Line,
    TokenizedLine,
    resolve_workers,
    split_lines,
    tokenize_document,
    tokenize_text,
    tokenize_unit,
)
from tokenaisu.core.options import TokenizerOptions
from tokenaisu.core.pipeline import tokenize_line
from tokenaisu.languages import Language

_CORPUS = [
    "Dr. Smith arrived.",
    "",
    "The price is 1,234.56 dollars.",
    "I can't go.",
    "Visit https://example.com/x?y=1 now.",
    "Line {index}: self-evident, isn't it?",
]


def _document(size: int) -> list[str]:
    return [_CORPUS[index % len(_CORPUS)].format(index=index) for index in range(size)]


def test_resolve_workers() -> None:
    available = cpu_count()

    assert resolve_workers() == available
    assert resolve_workers(0) == available
    assert resolve_workers(-3) == available
    assert resolve_workers(1) == 1
    assert resolve_workers(10_000) == available


def test_empty_document() -> None:
    assert tokenize_document([], Language.EN, workers=4) == []
    assert tokenize_text("", Language.EN) == ""


def test_small_document_runs_inline(caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="tokenaisu.core.driver")

    result = tokenize_document(["Hello, world."], Language.EN, workers=8)

    assert result == ["Hello , world ."]
    assert "inline" in caplog.text


def test_parallel_output_matches_single_line_calls() -> None:
    lines = _document(300)
    options = TokenizerOptions(aggressive_dash_splits=True)

    result = tokenize_document(lines, Language.EN, options, workers=2)

    assert len(result) == len(lines)
    assert result == [tokenize_line(line, Language.EN, options) for line in lines]


def test_parallel_and_inline_agree(monkeypatch) -> None:
    lines = _document(20)
    inline = tokenize_document(lines, Language.FR, workers=1)

    monkeypatch.setattr(driver, "PARALLEL_MIN_LINES", 1)
    pooled = tokenize_document(lines, Language.FR, workers=2)

    assert pooled == inline


def test_tokenize_unit_keeps_index() -> None:
    result = tokenize_unit(Line(index=7, text="Hi."), language=Language.EN, options=TokenizerOptions())

    assert result == TokenizedLine(index=7, text="Hi .")


def test_tokenize_text_keeps_line_structure() -> None:
    text = "Dr. Smith arrived.\n\nI can't go."

    assert tokenize_text(text, Language.EN) == "Dr. Smith arrived .\n\nI ca n't go .\n"


def test_split_lines_only_breaks_on_line_feed() -> None:
    assert split_lines("") == []
    assert split_lines("a\r\nb\n\nc") == ["a", "b", "", "c"]
    assert split_lines("a\n") == ["a"]
    assert split_lines("a b\x85c\x0bd\x0ce\x1cf") == ["a b\x85c\x0bd\x0ce\x1cf"]


def test_tokenize_text_keeps_unicode_separators_inside_lines() -> None:
    text = "first\u2028second\nthird\x85fourth\n"

    assert tokenize_text(text, Language.EN) == "first second\nthird fourth\n"
