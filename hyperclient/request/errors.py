"""Typed failures raised while building requests from hypermedia controls."""
from typing import Sequence


class RequestBuildError(ValueError):
    """Base class for every request construction failure."""


class InvalidElementKind(RequestBuildError):
    def __init__(self, tag: str, expected: str = "a") -> None:
        self.tag = tag
        self.expected = expected
        super().__init__(
            f"operation requires a link element: expected <{expected}>, got <{tag}>"
        )


class MissingAttribute(RequestBuildError):
    def __init__(self, tag: str, attribute: str, message: str | None = None) -> None:
        self.tag = tag
        self.attribute = attribute
        super().__init__(message or f"<{tag}> has no @{attribute} attribute")


class UrlResolutionError(RequestBuildError):
    def __init__(self, base: str, reference: str, reason: str = "") -> None:
        self.base = base
        self.reference = reference
        self.reason = reason
        detail = f": {reason}" if reason else ""
        super().__init__(
            f"cannot resolve reference '{reference}' against '{base}'{detail}"
        )


class UnsupportedFormMethod(RequestBuildError):
    def __init__(self, method: str) -> None:
        self.method = method
        super().__init__(f"form method must be GET or POST, got '{method}'")


class InvalidOptionValue(RequestBuildError):
    def __init__(self, field: str, value: str, available: Sequence[str]) -> None:
        self.field = field
        self.value = value
        self.available = tuple(available)
        choices = ", ".join(f"'{v}'" for v in self.available) or "none"
        super().__init__(
            f"value '{value}' was not one of the available options for select "
            f"'{field}' (available: {choices})"
        )
