"""
Parsed-document capability used by the extractor.

The extractor only needs "first element by tag and attribute" lookups, so
that is all a parser backend has to provide.
"""
import logging
from typing import Optional, Protocol

from bs4 import BeautifulSoup
from bs4.element import Tag

logger = logging.getLogger(__name__)


class ParsedDocument(Protocol):
    def text_of(self, tag: str) -> str:
        """Text content of the first `tag` element, or ""."""
        ...

    def attribute_of(self, tag: str, attribute: str, **match: str) -> Optional[str]:
        """`attribute` of the first `tag` whose attributes equal `match`; None if no such element."""
        ...

    def attribute_of_first_with(self, tag: str, attribute: str) -> str:
        """`attribute` of the first `tag` that carries it at all, or ""."""
        ...


class SoupDocument:
    """ParsedDocument backed by BeautifulSoup's lenient html.parser."""

    PARSER = "html.parser"

    def __init__(self, soup: BeautifulSoup):
        self.soup = soup

    @classmethod
    def from_html(cls, html: str) -> "SoupDocument":
        try:
            soup = BeautifulSoup(html or "", cls.PARSER)
        except Exception as e:
            # html.parser can still choke on pathological markup; treat it as an empty page
            logger.warning(f"Could not parse document, treating it as empty: {e}")
            soup = BeautifulSoup("", cls.PARSER)
        return cls(soup)

    @staticmethod
    def _attribute_value(element: Tag, attribute: str) -> str:
        value = element.get(attribute)
        if value is None:
            return ""
        # multi-valued attributes such as rel come back as lists
        if isinstance(value, list):
            return " ".join(value)
        return value

    def text_of(self, tag: str) -> str:
        element = self.soup.find(tag)
        return element.get_text() if element is not None else ""

    def attribute_of(self, tag: str, attribute: str, **match: str) -> Optional[str]:
        element = self.soup.find(tag, attrs=match)
        if element is None:
            return None
        return self._attribute_value(element, attribute)

    def attribute_of_first_with(self, tag: str, attribute: str) -> str:
        element = self.soup.find(tag, attrs={attribute: True})
        if element is None:
            return ""
        return self._attribute_value(element, attribute)
