from typing import Callable

from seo_analyzer.features.seo_analysis.schemas.analysis import MetadataRecord
from seo_analyzer.features.seo_analysis.services.document import ParsedDocument, SoupDocument


class ExtractorService:
    """Pull SEO tag values out of raw HTML into a MetadataRecord."""

    OPEN_GRAPH_FIELDS = {
        "og_title": "og:title",
        "og_description": "og:description",
        "og_image": "og:image",
        "og_type": "og:type",
    }

    TWITTER_FIELDS = {
        "twitter_card": "twitter:card",
        "twitter_title": "twitter:title",
        "twitter_description": "twitter:description",
        "twitter_image": "twitter:image",
    }

    def __init__(self, document_factory: Callable[[str], ParsedDocument] = SoupDocument.from_html):
        self.document_factory = document_factory

    @staticmethod
    def _meta_content(document: ParsedDocument, key: str) -> str:
        """
        content of <meta name="key">, falling back to <meta property="key">.
        The fallback only applies when no name= element exists at all.
        """
        content = document.attribute_of("meta", "content", name=key)
        if content is None:
            content = document.attribute_of("meta", "content", property=key)
        return content or ""

    @staticmethod
    def _meta_property(document: ParsedDocument, key: str) -> str:
        return document.attribute_of("meta", "content", property=key) or ""

    def extract(self, html: str, source_url: str) -> MetadataRecord:
        """
        Extract metadata from a fetched page.

        Never raises on malformed markup: any tag that can't be located
        leaves its field as "".
        """
        document = self.document_factory(html)

        fields = {
            "url": source_url,
            "title": document.text_of("title"),
            "description": self._meta_content(document, "description"),
            "keywords": self._meta_content(document, "keywords"),
            "h1": document.text_of("h1"),
            "canonical": document.attribute_of("link", "href", rel="canonical") or "",
            "lang": document.attribute_of("html", "lang") or "",
            "viewport": self._meta_content(document, "viewport"),
            "charset": document.attribute_of_first_with("meta", "charset"),
            "meta_robots": self._meta_content(document, "robots"),
        }

        for field, prop in self.OPEN_GRAPH_FIELDS.items():
            fields[field] = self._meta_property(document, prop)

        for field, key in self.TWITTER_FIELDS.items():
            fields[field] = self._meta_content(document, key)

        return MetadataRecord(**fields)
