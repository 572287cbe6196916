from __future__ import annotations

from readermode.dom.tree import parse_document
from readermode.services.main_block import CANDIDATE_SELECTORS, MIN_WORD_COUNT, MainBlockSelector


def _words(n: int, word: str = "word") -> str:
    return " ".join([word] * n)


def test_selects_sole_qualifying_article() -> None:
    doc = parse_document(f"<body><article><p>{_words(60)}</p></article><div>short</div></body>")
    block = MainBlockSelector().find_main_block(doc)
    assert block is not None
    assert block.name == "article"


def test_word_threshold_is_strictly_greater_than() -> None:
    doc = parse_document(f"<body><article>{_words(MIN_WORD_COUNT)}</article></body>")
    assert MainBlockSelector().find_main_block(doc) is None

    doc = parse_document(f"<body><article>{_words(MIN_WORD_COUNT + 1)}</article></body>")
    block = MainBlockSelector().find_main_block(doc)
    assert block is not None
    assert block.name == "article"


def test_longer_markup_beats_more_words() -> None:
    # Ranking uses serialized markup length: fewer words wrapped in more tags win.
    tagged = " ".join(["<span>word</span>"] * 55)
    html = f"""
    <body>
      <article><p>{_words(80)}</p></article>
      <main>{tagged}</main>
    </body>
    """
    doc = parse_document(html)
    block = MainBlockSelector().find_main_block(doc)
    assert block is not None
    assert block.name == "main"


def test_equal_markup_length_keeps_candidate_order() -> None:
    # .article-body precedes .post-content in CANDIDATE_SELECTORS, regardless of document order.
    html = f"""
    <body>
      <div class="post-content">{_words(60, "aaaa")}</div>
      <div class="article-body">{_words(60, "bbbb")}</div>
    </body>
    """
    doc = parse_document(html)
    block = MainBlockSelector().find_main_block(doc)
    assert block is not None
    assert "bbbb" in block.text


def test_only_first_match_per_pattern_is_considered() -> None:
    html = f"""
    <body>
      <article>{_words(5)}</article>
      <article><p>{_words(100)}</p></article>
    </body>
    """
    doc = parse_document(html)
    # The second article is not a tier-1 candidate, and there is no div to fall back to.
    assert MainBlockSelector().find_main_block(doc) is None


def test_role_main_attribute_is_a_candidate() -> None:
    doc = parse_document(f'<body><section role="main">{_words(70)}</section></body>')
    block = MainBlockSelector().find_main_block(doc)
    assert block is not None
    assert block.name == "section"


def test_falls_back_to_longest_qualifying_div() -> None:
    html = f"""
    <body>
      <article>{_words(10)}</article>
      <div id="small">{_words(20)}</div>
      <div id="outer">
        <div id="inner">{_words(60)}</div>
      </div>
    </body>
    """
    doc = parse_document(html)
    block = MainBlockSelector().find_main_block(doc)
    assert block is not None
    assert block.element.get("id") == "outer"


def test_returns_none_when_nothing_qualifies() -> None:
    html = f"<body><main>{_words(30)}</main><div>{_words(40)}</div><p>{_words(200)}</p></body>"
    doc = parse_document(html)
    assert MainBlockSelector().find_main_block(doc) is None


def test_collect_candidates_does_not_deduplicate() -> None:
    doc = parse_document(f'<body><article class="content post">{_words(60)}</article></body>')
    candidates = MainBlockSelector().collect_candidates(doc)
    assert len(candidates) == 3
    assert all(c == candidates[0] for c in candidates)


def test_candidate_selectors_are_fixed_and_ordered() -> None:
    assert isinstance(CANDIDATE_SELECTORS, tuple)
    assert CANDIDATE_SELECTORS[0] == "article"
    assert CANDIDATE_SELECTORS[1] == "main"
    assert CANDIDATE_SELECTORS[-1] == '[role="main"]'
