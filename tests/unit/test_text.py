from __future__ import annotations

from readermode.dom.tree import parse_document
from readermode.utils.text import count_words, extract_title


def test_count_words_splits_on_any_whitespace() -> None:
    assert count_words("  alpha\n\tbeta   gamma \r\n") == 3


def test_count_words_empty_inputs() -> None:
    assert count_words("") == 0
    assert count_words("   \n\t ") == 0
    assert count_words(None) == 0


def test_extract_title_is_trimmed() -> None:
    doc = parse_document("<html><head><title>\n  My Post  </title></head><body></body></html>")
    assert extract_title(doc) == "My Post"


def test_extract_title_missing() -> None:
    doc = parse_document("<html><body><h1>Heading only</h1></body></html>")
    assert extract_title(doc) is None


def test_count_words_uses_dom_whitespace_class() -> None:
    # Information separators are not whitespace; no-break and ideographic spaces are.
    assert count_words("a\x1cb c") == 2
    assert count_words("\u00a0alpha\u3000beta\u2009gamma\ufeff") == 3


def test_extract_title_trims_no_break_spaces() -> None:
    doc = parse_document("<html><head><title>\u00a0My Post\u00a0 </title></head></html>")
    assert extract_title(doc) == "My Post"
