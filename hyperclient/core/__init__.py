"""Core utilities: configuration and logging."""
from .config import Settings, HttpConfig
from .logging import setup_logging

__all__ = ["Settings", "HttpConfig", "setup_logging"]
