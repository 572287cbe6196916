"""Document tree abstraction used by the extraction core.

The noise filter and main-block selector only need to query descendants by
CSS selector, detach elements and serialize them. ``HtmlNode`` captures that
narrow surface; ``SoupNode`` implements it on top of BeautifulSoup.
"""

from __future__ import annotations

from typing import List, Optional, Protocol, Union

from bs4 import BeautifulSoup
from bs4.element import Tag


class HtmlNode(Protocol):
    """Structural interface of a queryable, mutable element."""

    @property
    def name(self) -> str: ...

    @property
    def text(self) -> str:
        """Concatenated text content of the element and its descendants."""
        ...

    @property
    def inner_html(self) -> str: ...

    @property
    def outer_html(self) -> str: ...

    def select(self, pattern: str) -> List["HtmlNode"]:
        """Return descendants matching ``pattern`` in document order."""
        ...

    def select_one(self, pattern: str) -> Optional["HtmlNode"]: ...

    def remove(self) -> None:
        """Detach the element (and its subtree) from its parent."""
        ...


class SoupNode:
    """``HtmlNode`` backed by a BeautifulSoup tag or document."""

    __slots__ = ("element",)

    def __init__(self, element: Union[BeautifulSoup, Tag]):
        self.element = element

    @property
    def name(self) -> str:
        return self.element.name

    @property
    def text(self) -> str:
        return self.element.get_text()

    @property
    def inner_html(self) -> str:
        return self.element.decode_contents()

    @property
    def outer_html(self) -> str:
        return str(self.element)

    def select(self, pattern: str) -> List[SoupNode]:
        return [SoupNode(el) for el in self.element.select(pattern)]

    def select_one(self, pattern: str) -> Optional[SoupNode]:
        el = self.element.select_one(pattern)
        return SoupNode(el) if el is not None else None

    def remove(self) -> None:
        # extract() rather than decompose(): a match nested inside an
        # already-detached match must stay safe to detach.
        self.element.extract()

    def __eq__(self, other: object) -> bool:
        return isinstance(other, SoupNode) and other.element is self.element

    def __hash__(self) -> int:
        return id(self.element)

    def __repr__(self) -> str:
        return f"SoupNode(<{self.name}>)"


def parse_document(html: str) -> SoupNode:
    # lxml only accepts text encodable as UTF-8; lone surrogates become "?".
    html = html.encode("utf-8", "replace").decode("utf-8")
    return SoupNode(BeautifulSoup(html, "lxml"))
