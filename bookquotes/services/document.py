"""Selector-based read access to a parsed HTML document.

Extraction code depends only on the `Document` / `Element` protocols so the
parser behind them can be swapped.
"""
from typing import Callable, List, Optional, Protocol

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PreformattedString, Tag


class Element(Protocol):
    def find_all(self, selector: str) -> List["Element"]: ...

    def find(self, selector: str) -> Optional["Element"]: ...

    def text(self) -> str: ...

    def own_text(self) -> str: ...

    def attr(self, name: str) -> Optional[str]: ...

    def has_class(self, name: str) -> bool: ...


class Document(Protocol):
    def find_all(self, selector: str) -> List[Element]: ...

    def find(self, selector: str) -> Optional[Element]: ...


class SoupElement:
    def __init__(self, tag: Tag):
        self._tag = tag

    def find_all(self, selector: str) -> List["SoupElement"]:
        return [SoupElement(t) for t in self._tag.select(selector)]

    def find(self, selector: str) -> Optional["SoupElement"]:
        t = self._tag.select_one(selector)
        return SoupElement(t) if t is not None else None

    def text(self) -> str:
        return self._tag.get_text()

    def own_text(self) -> str:
        """Concatenate the direct text-node children only, skipping nested tags and comments."""
        parts = []
        for node in self._tag.children:
            if isinstance(node, NavigableString) and not isinstance(node, PreformattedString):
                parts.append(str(node))
        return "".join(parts)

    def attr(self, name: str) -> Optional[str]:
        value = self._tag.get(name)
        if isinstance(value, list):
            return " ".join(value)
        return value

    def has_class(self, name: str) -> bool:
        return name in (self._tag.get("class") or [])


class SoupDocument:
    def __init__(self, soup: BeautifulSoup):
        self._root = SoupElement(soup)

    def find_all(self, selector: str) -> List[SoupElement]:
        return self._root.find_all(selector)

    def find(self, selector: str) -> Optional[SoupElement]:
        return self._root.find(selector)


def _default_soup_factory(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def parse_html(html: str, soup_factory: Optional[Callable[[str], BeautifulSoup]] = None) -> SoupDocument:
    factory = soup_factory or _default_soup_factory
    return SoupDocument(factory(html or ""))
