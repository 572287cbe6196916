"""Domain-specific errors.

Parsing and selection never raise; only fetching a remote document can fail.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


class ReaderDomainError(Exception):
    """Base class for all domain errors."""


@dataclass(frozen=True)
class DomainErrorInfo:
    code: str
    message: str
    detail: Optional[str] = None


class FetchError(ReaderDomainError):
    """Raised when a remote document cannot be retrieved.

    Either the transport failed (``status`` is None and the original exception
    is chained as ``__cause__``) or the server answered with a non-success
    HTTP status.
    """

    def __init__(self, url: str, *, status: int | None = None, detail: str | None = None):
        if status is not None:
            reason = f"HTTP error! status: {status}"
        else:
            reason = detail or "Unknown error"
        message = f"Failed to fetch content from {url}: {reason}"
        super().__init__(message)
        self.url = url
        self.status = status
        self.detail = detail
        self.info = DomainErrorInfo(code="FETCH_FAILED", message=message, detail=detail)

