"""Tests for relative URL resolution."""
import pytest

from hyperclient.request.urls import MalformedReference, resolve_url

BASE = "http://a/b/c/d;p?q"


class TestResolveUrl:
    @pytest.mark.parametrize("reference,expected", [
        ("g", "http://a/b/c/g"),
        ("./g", "http://a/b/c/g"),
        ("g/", "http://a/b/c/g/"),
        ("/g", "http://a/g"),
        ("//g", "http://g"),
        ("?y", "http://a/b/c/d;p?y"),
        ("g?y", "http://a/b/c/g?y"),
        ("#s", "http://a/b/c/d;p?q#s"),
        ("../g", "http://a/b/g"),
        ("../../g", "http://a/g"),
        ("", "http://a/b/c/d;p?q"),
    ])
    def test_reference_resolution_examples(self, reference: str, expected: str) -> None:
        assert resolve_url(BASE, reference) == expected

    def test_absolute_reference_replaces_base(self) -> None:
        assert resolve_url(BASE, "https://example.org/x") == "https://example.org/x"

    def test_surrounding_whitespace_is_ignored(self) -> None:
        assert resolve_url("http://example.com/a/b", "  next \n") == "http://example.com/a/next"

    @pytest.mark.parametrize("base,reference,expected", [
        ("custom://host/a/b", "c", "custom://host/a/c"),
        ("custom://host/a/b", "../d", "custom://host/d"),
        ("app://catalog/items/1", "/orders?page=2", "app://catalog/orders?page=2"),
    ])
    def test_relative_reference_under_any_scheme(
        self, base: str, reference: str, expected: str
    ) -> None:
        assert resolve_url(base, reference) == expected

    def test_non_hierarchical_scheme_reference(self) -> None:
        assert resolve_url(BASE, "mailto:someone@example.com") == "mailto:someone@example.com"

    @pytest.mark.parametrize("base", [
        "",
        "example.com/path",
        "/relative/path",
        "http:///no-host",
        "http://[::1/broken",
    ])
    def test_rejects_bad_base(self, base: str) -> None:
        with pytest.raises(MalformedReference):
            resolve_url(base, "next")

    def test_rejects_malformed_reference(self) -> None:
        with pytest.raises(MalformedReference):
            resolve_url(BASE, "http://[bad/path")

    def test_malformed_reference_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            resolve_url("nope", "x")
