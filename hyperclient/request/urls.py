"""Relative URL resolution (RFC 3986 reference resolution)."""
from urllib.parse import SplitResult, urljoin, urlsplit, uses_relative

HIERARCHICAL_SCHEMES = frozenset({"http", "https", "ftp", "ws", "wss"})

# urljoin only merges paths for the schemes in uses_relative.
STAND_IN_SCHEME = "http"


class MalformedReference(ValueError):
    """Raised when a base and reference cannot form an absolute URL."""


def _split(url: str, role: str) -> SplitResult:
    try:
        return urlsplit(url)
    except ValueError as e:
        raise MalformedReference(f"malformed {role} '{url}': {e}") from e


def _join(base: SplitResult, reference: SplitResult) -> str:
    if reference.scheme or base.scheme in uses_relative:
        return urljoin(base.geturl(), reference.geturl())
    stand_in = base._replace(scheme=STAND_IN_SCHEME).geturl()
    merged = urlsplit(urljoin(stand_in, reference.geturl()))
    return merged._replace(scheme=base.scheme).geturl()


def resolve_url(base: str, reference: str) -> str:
    """Resolve a possibly-relative reference against an absolute base URL.

    References are merged per RFC 3986 whatever the base's scheme.

    Args:
        base: Absolute URL of the document the reference came from.
        reference: Reference found in the document (href or action).

    Returns:
        The absolute URL.

    Raises:
        MalformedReference: If the base is not absolute, either string cannot
            be parsed, or the result is not an absolute URL.
    """
    parts = _split(base, "base")
    if not parts.scheme:
        raise MalformedReference(f"base URL '{base}' is not absolute")
    if parts.scheme in HIERARCHICAL_SCHEMES and not parts.netloc:
        raise MalformedReference(f"base URL '{base}' has no host")
    ref = _split(reference.strip(), "reference")

    resolved = _join(parts, ref)
    result = _split(resolved, "result")
    if not result.scheme:
        raise MalformedReference(f"'{resolved}' is not an absolute URL")
    if result.scheme in HIERARCHICAL_SCHEMES and not result.netloc:
        raise MalformedReference(f"'{resolved}' has no host")
    return resolved
