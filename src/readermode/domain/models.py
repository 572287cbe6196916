"""Framework-agnostic domain models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ContentSource(str, Enum):
    """Where the packaged markup came from."""

    MAIN_BLOCK = "MAIN_BLOCK"
    BODY = "BODY"
    DOCUMENT = "DOCUMENT"


@dataclass(frozen=True)
class ExtractResult:
    html: str
    title: Optional[str]
    word_count: int
