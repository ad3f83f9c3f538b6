"""Hypermedia-driven HTTP client: build requests from links and forms."""
from .request import (
    FormBody,
    HttpMethod,
    InvalidElementKind,
    InvalidOptionValue,
    MissingAttribute,
    RequestBuildError,
    RequestBuilder,
    RequestDescriptor,
    UnsupportedFormMethod,
    UrlResolutionError,
)

__version__ = "0.1.0"

__all__ = [
    "FormBody",
    "HttpMethod",
    "InvalidElementKind",
    "InvalidOptionValue",
    "MissingAttribute",
    "RequestBuildError",
    "RequestBuilder",
    "RequestDescriptor",
    "UnsupportedFormMethod",
    "UrlResolutionError",
]
