"""Main-content block selection."""

from __future__ import annotations

from typing import List, Optional

from ..dom.tree import HtmlNode
from ..observability.logger import get_logger
from ..utils.text import count_words

logger = get_logger(__name__)

# Semantic containers, checked in order; each contributes at most its first match.
CANDIDATE_SELECTORS: tuple[str, ...] = (
    "article",
    "main",
    ".content",
    ".post",
    ".article-body",
    ".entry-content",
    ".post-content",
    ".story-body",
    ".article-content",
    '[role="main"]',
)

# Generic containers scanned when no semantic candidate qualifies.
FALLBACK_SELECTOR = "div"

# Shared by both tiers. Not overridable through ReaderModeOptions.min_word_count.
MIN_WORD_COUNT = 50


def _has_enough_words(el: HtmlNode) -> bool:
    return count_words(el.text) > MIN_WORD_COUNT


def _longest_markup(elements: List[HtmlNode]) -> HtmlNode:
    # Ranked by serialized markup length, not by words or text length, so a
    # tag-heavy block can beat a wordier one. sorted() is stable: equal
    # lengths keep insertion order.
    return sorted(elements, key=lambda el: len(el.outer_html), reverse=True)[0]


class MainBlockSelector:
    """Pick the element most likely to be the article body.

    Tier 1 looks at semantic containers (``CANDIDATE_SELECTORS``); tier 2, only
    reached when tier 1 yields nothing, looks at every ``div``. In both tiers
    an element must have more than ``MIN_WORD_COUNT`` words to qualify.
    """

    def __init__(self, candidate_selectors: tuple[str, ...] = CANDIDATE_SELECTORS):
        self._candidate_selectors = candidate_selectors

    def collect_candidates(self, doc: HtmlNode) -> List[HtmlNode]:
        candidates: List[HtmlNode] = []
        for selector in self._candidate_selectors:
            el = doc.select_one(selector)
            if el is not None:
                candidates.append(el)
        return candidates

    def find_main_block(self, doc: HtmlNode) -> Optional[HtmlNode]:
        candidates = self.collect_candidates(doc)
        qualified = [el for el in candidates if _has_enough_words(el)]
        if qualified:
            chosen = _longest_markup(qualified)
            logger.debug(
                "main_block_selected",
                tier=1,
                candidates=len(candidates),
                qualified=len(qualified),
                tag=chosen.name,
            )
            return chosen

        blocks = doc.select(FALLBACK_SELECTOR)
        qualified = [el for el in blocks if _has_enough_words(el)]
        if not qualified:
            logger.debug("main_block_not_found", candidates=len(candidates), blocks=len(blocks))
            return None

        chosen = _longest_markup(qualified)
        logger.debug(
            "main_block_selected",
            tier=2,
            candidates=len(blocks),
            qualified=len(qualified),
            tag=chosen.name,
        )
        return chosen
