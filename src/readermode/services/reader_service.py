"""Reader-mode orchestration (business logic)."""

from __future__ import annotations

import logging

from ..dom.tree import parse_document
from ..domain.models import ContentSource, ExtractResult
from ..models.options import OptionsInput, resolve_options
from ..observability.logger import get_logger
from ..processing.template import wrap_with_css
from ..scraping.http_fetcher import HttpFetcher
from ..utils.text import count_words, extract_title
from .main_block import MainBlockSelector
from .noise_filter import NoiseFilter

logger = get_logger(__name__)


class SimpleReaderMode:
    """Service layer for readable-content extraction.

    Responsibilities:
    - Parse the document and read its title before any filtering
    - Orchestrate noise filtering -> main-block selection -> packaging
    - Fall back to the body (or whole document) when no block qualifies

    Instances hold no per-document state; one instance can serve concurrent
    calls.
    """

    def __init__(
        self,
        noise_filter: NoiseFilter | None = None,
        selector: MainBlockSelector | None = None,
        fetcher: HttpFetcher | None = None,
    ):
        self._noise = noise_filter or NoiseFilter()
        self._selector = selector or MainBlockSelector()
        self._fetcher = fetcher

    def extract(self, html_content: str, options: OptionsInput = None) -> ExtractResult:
        opts = resolve_options(options)

        doc = parse_document(html_content)
        title = extract_title(doc)

        self._noise.remove_noise(doc)
        main_block = self._selector.find_main_block(doc)

        if main_block is not None:
            source = ContentSource.MAIN_BLOCK
            inner_html = main_block.inner_html
            text = main_block.text
        else:
            body = doc.select_one("body")
            if body is not None:
                source = ContentSource.BODY
                inner_html = body.inner_html
                text = body.text
            else:
                source = ContentSource.DOCUMENT
                inner_html = doc.inner_html
                text = doc.text

        word_count = count_words(text)
        logger.log(
            logging.INFO if opts.debug else logging.DEBUG,
            "extract_completed",
            source=source.value,
            word_count=word_count,
            has_title=bool(title),
        )
        return ExtractResult(html=wrap_with_css(inner_html, title), title=title, word_count=word_count)

    async def extract_from_url(self, url: str, options: OptionsInput = None) -> ExtractResult:
        opts = resolve_options(options)
        fetcher = self._fetcher or HttpFetcher()
        page = await fetcher.fetch_html(url)
        return self.extract(page.html, opts)
