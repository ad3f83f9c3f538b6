"""CLI entry point: build (and optionally send) a request from a link or form."""
import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

import httpx
from lxml import etree

from hyperclient.core.config import Settings
from hyperclient.core.logging import setup_logging
from hyperclient.markup.parser import DocumentParseError
from hyperclient.request.errors import RequestBuildError
from hyperclient.request.models import RequestDescriptor
from hyperclient.transport.client import HypermediaClient

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_NOT_FOUND = 2


def parse_fields(values: list[str]) -> dict[str, str]:
    """Turn NAME=VALUE arguments into a field override map."""
    fields: dict[str, str] = {}
    for item in values:
        name, sep, value = item.partition("=")
        if not sep or not name:
            raise argparse.ArgumentTypeError(f"expected NAME=VALUE, got '{item}'")
        fields[name] = value
    return fields


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Build an HTTP request from a link or form on a page"
    )
    parser.add_argument(
        "url",
        help="URL of the page holding the link or form"
    )
    target = parser.add_mutually_exclusive_group(required=True)
    target.add_argument(
        "--link", "-l",
        metavar="XPATH",
        help="XPath of the <a> element to follow, e.g. \"//xhtml:a[@rel='next']\""
    )
    target.add_argument(
        "--form", "-f",
        metavar="XPATH",
        help="XPath of the <form> element to submit, e.g. \"//xhtml:form[@id='search']\""
    )
    parser.add_argument(
        "--field",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Form field override (repeatable)"
    )
    parser.add_argument(
        "--send", "-s",
        action="store_true",
        help="Execute the built request instead of only printing it"
    )
    parser.add_argument(
        "--config", "-c",
        default="config/settings.yaml",
        help="Path to settings YAML file"
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Enable debug logging"
    )
    return parser


def load_settings(path: Path) -> Settings:
    if path.exists():
        return Settings.from_yaml(path)
    return Settings()


def describe(request: RequestDescriptor) -> str:
    lines = [str(request)]
    if request.body is not None:
        lines.append(f"Content-Type: {request.content_type}")
        lines.append("")
        lines.append(request.body.encode())
    return "\n".join(lines)


def main(argv: Optional[list[str]] = None) -> int:
    """Run the command line."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        fields = parse_fields(args.field)
    except argparse.ArgumentTypeError as e:
        parser.error(str(e))

    setup_logging("DEBUG" if args.debug else "INFO")
    logger = logging.getLogger(__name__)

    settings = load_settings(Path(args.config))

    with HypermediaClient(settings) as client:
        try:
            page = client.fetch(args.url)
        except (httpx.HTTPError, DocumentParseError) as e:
            logger.error(f"Could not load {args.url}: {e}")
            return EXIT_FAILED

        if page.document is None:
            logger.error(f"{args.url} returned no document")
            return EXIT_NOT_FOUND

        expression = args.link or args.form
        try:
            element = page.document.select_one(expression)
        except etree.XPathError as e:
            logger.error(f"Invalid XPath {expression}: {e}")
            return EXIT_FAILED
        if element is None:
            logger.error(f"No element matches {expression}")
            return EXIT_NOT_FOUND

        try:
            if args.link:
                request = client.builder.follow_link(element, page.url)
            else:
                request = client.builder.submit_form(element, page.url, fields)
        except RequestBuildError as e:
            logger.error(f"Cannot build request: {e}")
            return EXIT_FAILED

        print(describe(request))

        if args.send:
            try:
                result = client.send(request)
            except (httpx.HTTPError, DocumentParseError) as e:
                logger.error(f"Request failed: {e}")
                return EXIT_FAILED
            print(f"\nStatus: {result.status_code}")
            print(f"URL: {result.url}")

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
