"""Unit tests for the transform fold, index collapsing, and path helpers."""

from __future__ import annotations

import pytest

from df12_permalinks.permalink import (
    UrlTransformInput,
    apply_url_transforms,
    build_output_path,
    collapse_index,
    generate_build_link,
)
from df12_permalinks.permalink.output_path import join_link, normalize_slashes
from df12_permalinks.transforms import language_suffix_to_directory


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("/a/index.html", "/a/"),
        ("/a/index", "/a/"),
        ("/a/index/", "/a/"),
        ("/index.html", "/"),
        ("/a/index.htm", "/a/index.htm"),
        ("/a/myindex", "/a/myindex"),
        ("/a/index/index.html", "/a/index/"),
        ("", ""),
    ],
)
def test_collapse_index(url: str, expected: str) -> None:
    """Only one trailing index suffix is collapsed."""
    assert collapse_index(url) == expected, f"expected {expected!r} for {url!r}"


def test_apply_url_transforms_with_no_transforms() -> None:
    """An empty pipeline returns the candidate unchanged."""
    assert apply_url_transforms("/x/index.es/index.html", []) == "/x/index.es/index.html"


def test_apply_url_transforms_accepts_empty_string_results() -> None:
    """Only ``None`` is a no-op; an empty string replaces the value."""
    assert apply_url_transforms("/x/", [lambda _data: ""]) == ""


def test_apply_url_transforms_calls_each_transform_once() -> None:
    """Every transform runs exactly once even after a rewrite."""
    calls: list[str] = []

    def first(data: UrlTransformInput) -> str:
        calls.append("first")
        return data.output_path + "a/"

    def second(data: UrlTransformInput) -> None:
        calls.append("second")

    assert apply_url_transforms("/", [first, second]) == "/a/"
    assert calls == ["first", "second"]


@pytest.mark.parametrize(
    ("segments", "expected"),
    [
        ((".", "", "index.html"), "index.html"),
        (("", "", "index.html"), "index.html"),
        (("/", "", "index.html"), "/index.html"),
        (("a/b", "../c", "x.html"), "a/c/x.html"),
        (("", "", ""), "."),
    ],
)
def test_join_link(segments: tuple[str, ...], expected: str) -> None:
    """Segments are joined with forward slashes and normalized."""
    assert join_link(*segments) == expected


def test_build_output_path_root_link() -> None:
    """A bare ``/`` permalink writes the root index."""
    assert build_output_path("/") == "/index.html"


def test_normalize_slashes() -> None:
    """Backslashes convert and duplicate or trailing slashes disappear."""
    assert normalize_slashes("out\\\\blog//post/") == "out/blog/post"
    assert normalize_slashes("/") == "/"


@pytest.mark.parametrize(
    ("args", "expected"),
    [
        (("", "about"), "about/index.html"),
        (("blog", "index"), "blog/index.html"),
        (("blog", "blog"), "blog/index.html"),
        (("feeds", "atom", None, "xml"), "feeds/atom.xml"),
        (("feeds", "feeds", "-v2", "xml"), "feeds/feeds-v2.xml"),
    ],
)
def test_generate_build_link(args: tuple[str | None, ...], expected: str) -> None:
    """Html pages nest into folders; other extensions stay flat."""
    actual = generate_build_link(*args)
    assert actual == expected, f"expected {expected!r} for {args!r}, got {actual!r}"


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("/about.es.html", "/about/"),
        ("/docs/index.FR.html", "/docs/index/"),
        ("/about.html", None),
        ("/about.eng.html", None),
    ],
)
def test_language_suffix_to_directory(url: str, expected: str | None) -> None:
    """Two-letter language suffixes turn into directory URLs."""
    assert language_suffix_to_directory(UrlTransformInput(url)) == expected
