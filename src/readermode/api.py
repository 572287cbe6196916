"""Public functional surface.

Usage:
    from readermode.api import extract

    result = extract(html_text)
    print(result.title, result.word_count)
"""

from __future__ import annotations

from .domain.models import ExtractResult
from .models.options import OptionsInput
from .scraping.http_fetcher import HttpFetcher
from .services.reader_service import SimpleReaderMode

_default_reader = SimpleReaderMode()


def extract(html: str, options: OptionsInput = None) -> ExtractResult:
    """Extract readable content from an HTML string."""
    return _default_reader.extract(html, options)


async def extract_from_url(
    url: str,
    options: OptionsInput = None,
    *,
    fetcher: HttpFetcher | None = None,
) -> ExtractResult:
    """Fetch ``url`` and extract readable content from the response body.

    Raises:
        FetchError: transport failure or non-2xx status.
    """
    if fetcher is not None:
        return await SimpleReaderMode(fetcher=fetcher).extract_from_url(url, options)
    return await _default_reader.extract_from_url(url, options)


__all__ = ["ExtractResult", "SimpleReaderMode", "extract", "extract_from_url"]
