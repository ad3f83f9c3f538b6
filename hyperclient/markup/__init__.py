"""Markup element capability and the lxml-backed parser."""
from .element import XHTML_NAMESPACE, Element, LxmlElement, compile_path
from .parser import Document, DocumentParseError, XhtmlParser

__all__ = [
    "XHTML_NAMESPACE",
    "Element",
    "LxmlElement",
    "compile_path",
    "Document",
    "DocumentParseError",
    "XhtmlParser",
]
