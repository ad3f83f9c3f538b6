"""Parse response bodies into namespace-aware element trees."""
import logging
from typing import Optional, Union

import lxml.html
from lxml import etree

from .element import XHTML_NAMESPACE, LxmlElement

logger = logging.getLogger(__name__)

LINK_PATH = ".//xhtml:a[@href]"
FORM_PATH = ".//xhtml:form"


class DocumentParseError(ValueError):
    """Raised when a response body cannot be parsed as markup."""


class Document:
    """A parsed markup document and the URL it was retrieved from."""

    def __init__(self, root: LxmlElement, url: Optional[str] = None) -> None:
        self.root = root
        self.url = url

    def select(self, path: str) -> list[LxmlElement]:
        return self.root.select(path)

    def select_one(self, path: str) -> Optional[LxmlElement]:
        return self.root.select_one(path)

    def links(self) -> list[LxmlElement]:
        """All hyperlinks carrying an href, in document order."""
        return self.select(LINK_PATH)

    def forms(self) -> list[LxmlElement]:
        """All forms, in document order."""
        return self.select(FORM_PATH)


class XhtmlParser:
    """Parses XHTML strictly and falls back to lenient HTML parsing.

    Either way the resulting elements live in the XHTML namespace, so the
    same ``xhtml:`` path expressions work on both.
    """

    def parse(
        self, content: Union[bytes, str], base_url: Optional[str] = None
    ) -> Document:
        """Parse markup into a Document.

        Args:
            content: Response body.
            base_url: URL the body was retrieved from, if known.

        Returns:
            Document rooted at the top-level element.

        Raises:
            DocumentParseError: If the content is empty or not markup at all.
        """
        if isinstance(content, str):
            content = content.encode("utf-8")
        if not content.strip():
            raise DocumentParseError("cannot parse an empty document")

        root = self._parse_xhtml(content)
        if root is None:
            root = self._parse_html(content)
        return Document(LxmlElement(root), url=base_url)

    def _parse_xhtml(self, content: bytes) -> Optional[etree._Element]:
        try:
            # lxml parser objects must not be shared between threads.
            parser = etree.XMLParser(resolve_entities=False, no_network=True)
            root = etree.fromstring(content, parser=parser)
        except etree.XMLSyntaxError as e:
            logger.debug(f"Not well-formed XML, parsing as HTML: {e}")
            return None
        if etree.QName(root).namespace != XHTML_NAMESPACE:
            logger.debug("Document is not in the XHTML namespace, parsing as HTML")
            return None
        return root

    def _parse_html(self, content: bytes) -> etree._Element:
        try:
            root = lxml.html.document_fromstring(content)
        except (etree.ParserError, ValueError) as e:
            raise DocumentParseError(f"cannot parse document: {e}") from e
        lxml.html.html_to_xhtml(root)
        return root
