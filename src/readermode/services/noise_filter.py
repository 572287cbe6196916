"""Noise filtering (boilerplate removal)."""

from __future__ import annotations

from ..dom.tree import HtmlNode
from ..observability.logger import get_logger

logger = get_logger(__name__)

# Applied in order; append new patterns at the end.
NOISE_SELECTORS: tuple[str, ...] = (
    "header",
    "footer",
    "nav",
    "aside",
    ".sidebar",
    ".ad",
    ".promo",
    ".popup",
    '[class*="ad-"]',
    '[id*="ad-"]',
    ".advertisement",
    ".social-share",
    ".comments",
    ".related",
    ".newsletter",
    ".subscription",
    ".cookie-banner",
    ".modal",
    ".overlay",
    "script",
    "style",
    "noscript",
)


class NoiseFilter:
    """Processing layer component: noise filtering.

    Rules:
    - Patterns are applied in order against the already-filtered tree
    - Every current match of a pattern is detached before the next pattern runs
    """

    def __init__(self, selectors: tuple[str, ...] = NOISE_SELECTORS):
        self._selectors = selectors

    @property
    def selectors(self) -> tuple[str, ...]:
        return self._selectors

    def remove_noise(self, doc: HtmlNode) -> None:
        removed = 0
        for selector in self._selectors:
            for el in doc.select(selector):
                el.remove()
                removed += 1
        logger.debug("noise_removed", removed=removed)
