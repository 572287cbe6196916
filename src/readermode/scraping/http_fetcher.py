"""HTTP fetching of remote documents."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from urllib.parse import urlparse

import aiohttp

from ..config.settings import get_settings
from ..domain.errors import FetchError
from ..observability.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class FetchedPage:
    url: str
    status: int
    html: str


def _is_http_url(url: str) -> bool:
    parsed = urlparse(url)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


class HttpFetcher:
    """Scraping layer.

    Responsibilities:
    - GET a single URL with a fixed User-Agent
    - Require a 2xx status and decode the body as text
    - Surface every failure as FetchError (no retries)
    """

    def __init__(self, *, user_agent: str | None = None, timeout_seconds: float | None = None):
        settings = get_settings()
        self._user_agent = user_agent or settings.user_agent
        self._timeout_s = float(timeout_seconds or settings.fetch_timeout_seconds)

    @property
    def headers(self) -> dict[str, str]:
        return {"User-Agent": self._user_agent}

    async def fetch_html(self, url: str) -> FetchedPage:
        if not _is_http_url(url):
            logger.warning("fetch_failed", url=url, reason="invalid_url")
            raise FetchError(url, detail="invalid_url")

        timeout = aiohttp.ClientTimeout(total=self._timeout_s)
        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.get(url, headers=self.headers) as resp:
                    if not 200 <= resp.status < 300:
                        logger.warning("fetch_failed", url=url, status=resp.status)
                        raise FetchError(url, status=resp.status)
                    text = await resp.text(errors="replace")
                    return FetchedPage(url=url, status=resp.status, html=text)
        except asyncio.TimeoutError as e:
            logger.warning("fetch_failed", url=url, reason="timeout")
            raise FetchError(url, detail=f"timeout after {self._timeout_s}s") from e
        except aiohttp.ClientError as e:
            logger.warning("fetch_failed", url=url, reason=type(e).__name__, error=str(e))
            raise FetchError(url, detail=str(e) or type(e).__name__) from e
