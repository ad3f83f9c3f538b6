"""Construct HTTP requests from hypermedia controls (links and forms)."""
import logging
from typing import Mapping, Optional

from ..markup.element import Element
from .errors import (
    InvalidElementKind,
    InvalidOptionValue,
    MissingAttribute,
    UnsupportedFormMethod,
    UrlResolutionError,
)
from .models import FormBody, HttpMethod, RequestDescriptor
from .urls import MalformedReference, resolve_url

logger = logging.getLogger(__name__)

INPUT_PATH = ".//xhtml:input[@name]"
SELECT_PATH = ".//xhtml:select"
OPTION_PATH = ".//xhtml:option"
SELECTED_OPTION_PATH = ".//xhtml:option[@selected]"

Pairs = list[tuple[str, str]]


def _resolve(context: str, reference: str) -> str:
    try:
        return resolve_url(context, reference)
    except MalformedReference as e:
        raise UrlResolutionError(context, reference, str(e)) from e


class RequestBuilder:
    """Builds requests by reading the links and forms a server presents.

    The builder holds no state; one instance can serve any number of
    threads.
    """

    def follow_link(self, a: Element, context: str) -> RequestDescriptor:
        """Build the GET request that follows a link.

        Args:
            a: The <a> element to follow.
            context: URL the current document was retrieved from, used to
                resolve a relative @href.

        Returns:
            GET request descriptor for the resolved URL.

        Raises:
            InvalidElementKind: If the element is not an <a> tag.
            MissingAttribute: If the link has no (or an empty) @href.
            UrlResolutionError: If @href cannot be resolved against context.
        """
        if a.tag.lower() != "a":
            raise InvalidElementKind(a.tag, expected="a")
        href = a.get("href")
        if not href:
            raise MissingAttribute("a", "href", "link has no target reference")

        url = _resolve(context, href)
        logger.debug(f"Following link to {url}")
        return RequestDescriptor(method=HttpMethod.GET, url=url)

    def submit_form(
        self,
        form: Element,
        context: str,
        args: Optional[Mapping[str, str]] = None,
    ) -> RequestDescriptor:
        """Build the GET or POST request that submits a form.

        For each <input> or <select> in the form, a value in ``args`` under
        the field's @name replaces the field's default.

        Args:
            form: The <form> element to submit.
            context: URL the current document was retrieved from, used if
                @action is relative.
            args: Field overrides keyed by field name.

        Returns:
            Request descriptor. GET forms carry their fields in the query
            string; POST forms in a URL-encoded body.

        Raises:
            MissingAttribute: If the form has no @method or @action.
            UnsupportedFormMethod: If @method is neither GET nor POST.
            UrlResolutionError: If @action cannot be resolved against context.
            InvalidOptionValue: If an override names a select option that
                does not exist.
        """
        raw_method = form.get("method")
        if raw_method is None:
            raise MissingAttribute(form.tag, "method")
        method = HttpMethod.parse(raw_method)
        if method is None:
            raise UnsupportedFormMethod(raw_method)

        action = form.get("action")
        if action is None:
            raise MissingAttribute(form.tag, "action")
        url = _resolve(context, action)

        body = self.marshal_arguments(form, args or {})

        if method is HttpMethod.GET:
            # Appended verbatim: a query already on the action URL is kept.
            if body is not None:
                url = f"{url}?{body.encode()}"
            logger.debug(f"Built GET form submission to {url}")
            return RequestDescriptor(method=HttpMethod.GET, url=url)

        logger.debug(
            f"Built POST form submission to {url} "
            f"with {len(body.pairs) if body else 0} fields"
        )
        return RequestDescriptor(method=HttpMethod.POST, url=url, body=body)

    def marshal_arguments(
        self, form: Element, args: Mapping[str, str]
    ) -> Optional[FormBody]:
        """Collect the name/value pairs a form submits.

        All <input> fields come first, then all <select> fields, each group
        in document order. Servers can be sensitive to field order, so this
        ordering is part of the contract.

        Returns:
            The ordered pairs, or None when the form submits nothing.
        """
        pairs: Pairs = []
        self._marshal_inputs(form, args, pairs)
        self._marshal_selects(form, args, pairs)
        return FormBody(pairs=tuple(pairs)) if pairs else None

    def _marshal_inputs(
        self, form: Element, args: Mapping[str, str], pairs: Pairs
    ) -> None:
        for field in form.select(INPUT_PATH):
            name = field.get("name")
            if not name:
                continue
            if name in args:
                pairs.append((name, args[name]))
                continue
            value = field.get("value")
            if value is not None:
                pairs.append((name, value))

    def _marshal_selects(
        self, form: Element, args: Mapping[str, str], pairs: Pairs
    ) -> None:
        for select in form.select(SELECT_PATH):
            name = select.get("name")
            if name is None:
                continue
            if name in args:
                pairs.append((name, self._available_option(select, name, args[name])))
            else:
                default = self._default_option(select)
                if default is not None:
                    pairs.append((name, default))

    def _available_option(self, select: Element, name: str, chosen: str) -> str:
        available = [
            value
            for value in (o.get("value") for o in select.select(OPTION_PATH))
            if value is not None
        ]
        if chosen not in available:
            raise InvalidOptionValue(name, chosen, available)
        return chosen

    def _default_option(self, select: Element) -> Optional[str]:
        option = select.select_one(SELECTED_OPTION_PATH)
        if option is None:
            return None
        return option.get("value") or ""
