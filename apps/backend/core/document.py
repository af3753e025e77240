"""
Queryable wrapper around rendered HTML.

Thin layer over BeautifulSoup/lxml that exposes the two lookups the
extraction plugins need: first non-empty text for an ordered selector list,
and iteration over every element matching any selector in a list.
"""
import logging
from functools import lru_cache
from typing import Iterator, Optional, Sequence, Union

import soupsieve
from bs4 import BeautifulSoup, Tag

logger = logging.getLogger(__name__)

Selectors = Union[str, Sequence[str]]


@lru_cache(maxsize=512)
def _is_valid_selector(selector: str) -> bool:
    try:
        soupsieve.compile(selector)
        return True
    except soupsieve.SelectorSyntaxError as e:
        logger.warning(f"[document] Ignoring invalid selector {selector!r}: {e}")
        return False


def _as_list(selectors: Selectors) -> list:
    if isinstance(selectors, str):
        return [selectors]
    return [s for s in selectors if s]


class Element:
    """A single matched element."""

    def __init__(self, tag: Tag):
        self._tag = tag

    @property
    def name(self) -> str:
        return self._tag.name

    @property
    def text(self) -> str:
        """Concatenated text of the element and its descendants, trimmed."""
        return self._tag.get_text().strip()

    def __repr__(self):
        return f"<Element {self._tag.name}>"


class ElementSet:
    """
    Every element matching any of the selectors, in document order.

    Iteration is lazy and can be repeated; each pass re-runs the query
    against the (immutable) parsed tree.
    """

    def __init__(self, root: Tag, selectors: Selectors):
        self._root = root
        self._selectors = [s for s in _as_list(selectors) if _is_valid_selector(s)]

    def __iter__(self) -> Iterator[Element]:
        if not self._selectors:
            return
        for tag in self._root.css.iselect(", ".join(self._selectors)):
            yield Element(tag)

    def texts(self) -> Iterator[str]:
        """Trimmed text of every matched element."""
        for element in self:
            yield element.text

    def __repr__(self):
        return f"<ElementSet selectors={self._selectors!r}>"


class Document:
    """Parsed HTML document."""

    def __init__(self, soup: BeautifulSoup):
        self.soup = soup

    def select_first_text(self, selectors: Selectors) -> str:
        """
        Try the selectors in order; for each, take the first matching
        element and return its trimmed text if non-empty.

        Order matters: a selector only gets a chance when every selector
        before it matched nothing or matched an empty element.

        Returns:
            Trimmed text, or an empty string when nothing matched
        """
        for selector in _as_list(selectors):
            if not _is_valid_selector(selector):
                continue
            tag = self.soup.select_one(selector)
            if tag is None:
                continue
            text = tag.get_text().strip()
            if text:
                return text
        return ""

    def select_all(self, selectors: Selectors) -> ElementSet:
        """All elements matching any selector, document order, no duplicates."""
        return ElementSet(self.soup, selectors)


def parse(html: Optional[str]) -> Document:
    """Parse an HTML string into a queryable Document."""
    return Document(BeautifulSoup(html or "", 'lxml'))
