"""Minimal query interface over parsed HTML documents.

Extraction strategies only depend on the ``DocumentTree`` and ``Element``
protocols; ``parse_document`` provides the BeautifulSoup-backed
implementation.
"""

from typing import Protocol

from bs4 import BeautifulSoup, Tag


class Element(Protocol):
    """A single node in a document tree."""

    def get(self, attribute: str) -> str | None:
        """Return an attribute value, or None if absent."""
        ...

    def find(self, tag: str) -> "Element | None":
        """Return the first descendant with the given tag name."""
        ...

    def inner_html(self) -> str:
        """Return the markup contained inside this element."""
        ...

    def text(self) -> str:
        """Return the concatenated text content."""
        ...


class DocumentTree(Protocol):
    """A queryable document."""

    def find_by_attribute(self, tag: str, attribute: str, value: str) -> Element | None:
        """Return the first ``tag`` whose ``attribute`` equals ``value``."""
        ...

    def find_by_class(self, class_name: str) -> Element | None:
        """Return the first element carrying ``class_name``."""
        ...


class SoupElement:
    """Element backed by a BeautifulSoup tag."""

    def __init__(self, tag: Tag) -> None:
        self._tag = tag

    def get(self, attribute: str) -> str | None:
        value = self._tag.get(attribute)
        if value is None:
            return None
        # Multi-valued attributes (class, rel) come back as lists
        if isinstance(value, list):
            return " ".join(value)
        return str(value)

    def find(self, tag: str) -> "SoupElement | None":
        found = self._tag.find(tag)
        return SoupElement(found) if isinstance(found, Tag) else None

    def inner_html(self) -> str:
        return self._tag.decode_contents()

    def text(self) -> str:
        return self._tag.get_text()


class SoupDocument:
    """DocumentTree backed by BeautifulSoup."""

    def __init__(self, soup: BeautifulSoup) -> None:
        self._soup = soup

    def find_by_attribute(self, tag: str, attribute: str, value: str) -> SoupElement | None:
        found = self._soup.find(tag, attrs={attribute: value})
        return SoupElement(found) if isinstance(found, Tag) else None

    def find_by_class(self, class_name: str) -> SoupElement | None:
        found = self._soup.find(class_=class_name)
        return SoupElement(found) if isinstance(found, Tag) else None


def parse_document(markup: str) -> SoupDocument:
    """Parse HTML markup into a queryable document.

    Uses the stdlib-backed ``html.parser`` so malformed markup still yields a
    (possibly empty) tree rather than an error.
    """
    return SoupDocument(BeautifulSoup(markup, "html.parser"))
