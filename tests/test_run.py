"""Tests for the run.py command line."""
from __future__ import annotations

import argparse
from pathlib import Path
from unittest.mock import patch

import httpx
import pytest

from hyperclient.markup.element import XHTML_NAMESPACE
from hyperclient.transport.client import HypermediaClient
from run import EXIT_FAILED, EXIT_NOT_FOUND, EXIT_OK, main, parse_fields

PAGE = f"""<html xmlns="{XHTML_NAMESPACE}"><body>
<a rel="next" href="/page/2">Next</a>
<form id="search" method="get" action="/search">
  <input name="q" value="x"/>
  <select name="sort"><option value="new">New</option><option value="old">Old</option></select>
</form>
<form id="login" method="post" action="/session"><input name="user" value="bob"/></form>
</body></html>"""


def handler(request: httpx.Request) -> httpx.Response:
    if request.url.path == "/empty":
        return httpx.Response(204)
    return httpx.Response(200, content=PAGE.encode("utf-8"))


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    return tmp_path / "missing.yaml"


@pytest.fixture(autouse=True)
def mock_transport():
    def make_client(settings):
        return HypermediaClient(settings, transport=httpx.MockTransport(handler))

    with patch("run.HypermediaClient", side_effect=make_client) as factory:
        yield factory


class TestParseFields:
    def test_parses_pairs(self) -> None:
        assert parse_fields(["a=1", "b=x=y", "c="]) == {"a": "1", "b": "x=y", "c": ""}

    @pytest.mark.parametrize("item", ["novalue", "=1"])
    def test_rejects_malformed(self, item: str) -> None:
        with pytest.raises(argparse.ArgumentTypeError):
            parse_fields([item])


class TestMain:
    def test_prints_link_request(
        self, config_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        result = main([
            "http://example.com/", "--link", "//xhtml:a[@rel='next']",
            "--config", str(config_path),
        ])
        assert result == EXIT_OK
        assert "GET http://example.com/page/2" in capsys.readouterr().out

    def test_prints_get_form_request(
        self, config_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        result = main([
            "http://example.com/", "--form", "//xhtml:form[@id='search']",
            "--field", "q=hello world", "--field", "sort=old",
            "--config", str(config_path),
        ])
        assert result == EXIT_OK
        out = capsys.readouterr().out
        assert "GET http://example.com/search?q=hello+world&sort=old" in out

    def test_prints_post_body(
        self, config_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        result = main([
            "http://example.com/", "--form", "//xhtml:form[@id='login']",
            "--config", str(config_path),
        ])
        assert result == EXIT_OK
        out = capsys.readouterr().out
        assert "POST http://example.com/session" in out
        assert "user=bob" in out

    def test_page_without_document(self, config_path: Path) -> None:
        result = main([
            "http://example.com/empty", "--link", "//xhtml:a",
            "--config", str(config_path),
        ])
        assert result == EXIT_NOT_FOUND

    def test_missing_element(self, config_path: Path) -> None:
        result = main([
            "http://example.com/", "--link", "//xhtml:a[@rel='prev']",
            "--config", str(config_path),
        ])
        assert result == EXIT_NOT_FOUND

    def test_invalid_xpath(self, config_path: Path) -> None:
        result = main([
            "http://example.com/", "--link", "//xhtml:a[",
            "--config", str(config_path),
        ])
        assert result == EXIT_FAILED

    def test_build_error(self, config_path: Path) -> None:
        result = main([
            "http://example.com/", "--form", "//xhtml:form[@id='search']",
            "--field", "sort=random", "--config", str(config_path),
        ])
        assert result == EXIT_FAILED

    def test_send_executes_request(
        self, config_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        result = main([
            "http://example.com/", "--link", "//xhtml:a[@rel='next']",
            "--send", "--config", str(config_path),
        ])
        assert result == EXIT_OK
        out = capsys.readouterr().out
        assert "Status: 200" in out
        assert "URL: http://example.com/page/2" in out

    def test_bad_field_argument_exits(self, config_path: Path) -> None:
        with pytest.raises(SystemExit) as exc:
            main([
                "http://example.com/", "--form", "//xhtml:form", "--field", "oops",
                "--config", str(config_path),
            ])
        assert exc.value.code == 2
