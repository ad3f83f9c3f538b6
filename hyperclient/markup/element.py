"""Markup element capability and its lxml implementation."""
import functools
import threading
from typing import Callable, Optional, Protocol, runtime_checkable

from lxml import etree

XHTML_NAMESPACE = "http://www.w3.org/1999/xhtml"
NAMESPACES: dict[str, str] = {"xhtml": XHTML_NAMESPACE}

PATH_CACHE_SIZE = 256

_local = threading.local()


def _compile(expression: str) -> etree.XPath:
    return etree.XPath(expression, namespaces=NAMESPACES)


def _thread_compiler() -> Callable[[str], etree.XPath]:
    compiler = getattr(_local, "compile", None)
    if compiler is None:
        compiler = functools.lru_cache(maxsize=PATH_CACHE_SIZE)(_compile)
        _local.compile = compiler
    return compiler


def compile_path(expression: str) -> etree.XPath:
    """Return a compiled XPath for the expression, cached per thread.

    Compiled lxml XPath objects must not be evaluated concurrently from
    several threads, so every thread keeps its own bounded cache.
    """
    return _thread_compiler()(expression)


@runtime_checkable
class Element(Protocol):
    """A node of a parsed markup tree.

    Path expressions are XPath evaluated relative to the element, with the
    ``xhtml`` prefix bound to the XHTML namespace.
    """

    @property
    def tag(self) -> str:
        """Local tag name, lowercase."""
        ...

    def get(self, name: str) -> Optional[str]:
        """Attribute value, or None when the attribute is absent."""
        ...

    def select(self, path: str) -> list["Element"]:
        """All elements matching the path expression, in document order."""
        ...

    def select_one(self, path: str) -> Optional["Element"]:
        """First element matching the path expression, or None."""
        ...


class LxmlElement:
    """Element backed by an lxml node."""

    def __init__(self, node: etree._Element) -> None:
        self._node = node

    @property
    def raw(self) -> etree._Element:
        """Access the underlying lxml node."""
        return self._node

    @property
    def tag(self) -> str:
        return etree.QName(self._node).localname.lower()

    def get(self, name: str) -> Optional[str]:
        return self._node.get(name)

    def select(self, path: str) -> list["LxmlElement"]:
        result = compile_path(path)(self._node)
        return [LxmlElement(n) for n in result if isinstance(n, etree._Element)]

    def select_one(self, path: str) -> Optional["LxmlElement"]:
        matches = self.select(path)
        return matches[0] if matches else None

    def text(self) -> str:
        """Concatenated text content of the element."""
        return "".join(self._node.itertext()).strip()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LxmlElement):
            return NotImplemented
        return self._node is other._node

    def __hash__(self) -> int:
        return id(self._node)

    def __repr__(self) -> str:
        return f"<LxmlElement {self.tag} {dict(self._node.attrib)!r}>"
