"""HTTP transport adapter for request descriptors."""
from .client import HypermediaClient, Page

__all__ = ["HypermediaClient", "Page"]
