"""Execute request descriptors over HTTP and parse the responses."""
import logging
from typing import Mapping, Optional

import httpx

from ..core.config import Settings
from ..markup.element import Element
from ..markup.parser import Document, XhtmlParser
from ..request.builder import RequestBuilder
from ..request.models import RequestDescriptor

logger = logging.getLogger(__name__)


class Page:
    """A fetched response and its parsed document.

    ``document`` is None when the response has no body, e.g. 204 No Content.
    """

    def __init__(
        self,
        url: str,
        status_code: int,
        headers: Mapping[str, str],
        document: Optional[Document],
    ) -> None:
        self.url = url
        self.status_code = status_code
        self.headers = dict(headers)
        self.document = document

    @property
    def content_type(self) -> str:
        return self.headers.get("content-type", "")

    def __repr__(self) -> str:
        return f"<Page {self.status_code} {self.url}>"


class HypermediaClient:
    """Navigates an application by following its links and submitting its forms."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        """Initialize the client.

        Args:
            settings: Client settings; defaults are used when omitted.
            transport: Optional httpx transport, mainly for tests.
        """
        self._settings = settings or Settings()
        http = self._settings.http
        self._client = httpx.Client(
            timeout=httpx.Timeout(http.timeout),
            follow_redirects=http.follow_redirects,
            max_redirects=http.max_redirects,
            headers={"User-Agent": http.user_agent, "Accept": http.accept},
            transport=transport,
        )
        self._builder = RequestBuilder()
        self._parser = XhtmlParser()

    @property
    def builder(self) -> RequestBuilder:
        return self._builder

    def fetch(self, url: str) -> Page:
        """GET a URL and parse the response body."""
        logger.info(f"Fetching {url}")
        return self._execute(self._client.build_request("GET", url))

    def send(self, request: RequestDescriptor) -> Page:
        """Execute a request descriptor and parse the response body."""
        logger.info(f"Sending {request}")
        return self._execute(
            self._client.build_request(
                request.method.value,
                request.url,
                content=request.content(),
                headers=request.headers,
            )
        )

    def follow(self, link: Element, page: Page) -> Page:
        """Follow a link found on a page."""
        return self.send(self._builder.follow_link(link, page.url))

    def submit(
        self,
        form: Element,
        page: Page,
        args: Optional[Mapping[str, str]] = None,
    ) -> Page:
        """Submit a form found on a page, overriding fields from args."""
        return self.send(self._builder.submit_form(form, page.url, args))

    def _execute(self, request: httpx.Request) -> Page:
        try:
            response = self._client.send(request)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning(
                f"{request.method} {request.url} returned {e.response.status_code}"
            )
            raise
        except httpx.TransportError as e:
            logger.warning(f"{request.method} {request.url} failed: {e}")
            raise

        final_url = str(response.url)
        document: Optional[Document] = None
        if response.content.strip():
            document = self._parser.parse(response.content, base_url=final_url)
        else:
            logger.debug(f"{request.method} {final_url} returned no body")
        return Page(
            url=final_url,
            status_code=response.status_code,
            headers=response.headers,
            document=document,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "HypermediaClient":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()
