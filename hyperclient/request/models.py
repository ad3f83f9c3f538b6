"""Request descriptors produced from links and forms."""
from enum import Enum
from typing import Optional
from urllib.parse import urlencode

from pydantic import BaseModel, ConfigDict

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded; charset=UTF-8"


class HttpMethod(Enum):
    """HTTP methods a hypermedia control can produce."""
    GET = "GET"
    POST = "POST"

    @classmethod
    def parse(cls, value: str) -> Optional["HttpMethod"]:
        """Case-insensitive lookup; None for anything but GET or POST."""
        try:
            return cls(value.upper())
        except ValueError:
            return None


class FormBody(BaseModel):
    """Ordered name/value pairs of a submitted form."""

    model_config = ConfigDict(frozen=True)

    pairs: tuple[tuple[str, str], ...]
    content_type: str = FORM_CONTENT_TYPE

    def encode(self) -> str:
        """URL-encode the pairs in order, spaces as '+', UTF-8 octets."""
        return urlencode(self.pairs, encoding="utf-8")

    def to_bytes(self) -> bytes:
        return self.encode().encode("ascii")


class RequestDescriptor(BaseModel):
    """A ready-to-send request: method, absolute URL and optional body."""

    model_config = ConfigDict(frozen=True)

    method: HttpMethod
    url: str
    body: Optional[FormBody] = None

    @property
    def content_type(self) -> Optional[str]:
        return self.body.content_type if self.body else None

    @property
    def headers(self) -> dict[str, str]:
        if self.body is None:
            return {}
        return {"Content-Type": self.body.content_type}

    def content(self) -> Optional[bytes]:
        """Encoded body, or None when the request carries no body."""
        return self.body.to_bytes() if self.body else None

    def __str__(self) -> str:
        return f"{self.method.value} {self.url}"
