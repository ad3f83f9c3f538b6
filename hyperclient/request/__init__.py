"""Request construction from links and forms."""
from .builder import RequestBuilder
from .errors import (
    InvalidElementKind,
    InvalidOptionValue,
    MissingAttribute,
    RequestBuildError,
    UnsupportedFormMethod,
    UrlResolutionError,
)
from .models import FORM_CONTENT_TYPE, FormBody, HttpMethod, RequestDescriptor
from .urls import MalformedReference, resolve_url

__all__ = [
    "RequestBuilder",
    "InvalidElementKind",
    "InvalidOptionValue",
    "MissingAttribute",
    "RequestBuildError",
    "UnsupportedFormMethod",
    "UrlResolutionError",
    "FORM_CONTENT_TYPE",
    "FormBody",
    "HttpMethod",
    "RequestDescriptor",
    "MalformedReference",
    "resolve_url",
]
