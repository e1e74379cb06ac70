"""Unit tests for serverless URL pattern substitution."""

from __future__ import annotations

import pytest

from df12_permalinks.permalink import ServerlessUrlError, render_serverless_url
from df12_permalinks.permalink.serverless import stringify_url_pattern


@pytest.mark.parametrize(
    ("pattern", "data", "expected"),
    [
        ("/serverless/:test/", {"test": "yeearg"}, "/serverless/yeearg/"),
        ("/:year/:month/", {"year": 2024, "month": "05"}, "/2024/05/"),
        ("/static/", {}, "/static/"),
        ("/blog(/:page)/", {}, "/blog/"),
        ("/blog(/:page)/", {"page": "3"}, "/blog/3/"),
        ("/files/*", {"_": "a/b.txt"}, "/files/a/b.txt"),
        ("/time\\:now/", {}, "/time:now/"),
        ("https://example.com/:id", {"id": "x"}, "https://example.com/x"),
    ],
)
def test_stringify_url_pattern(
    pattern: str, data: dict[str, object], expected: str
) -> None:
    """Named, optional, wildcard, and escaped segments render as expected."""
    actual = stringify_url_pattern(pattern, data)
    assert actual == expected, f"expected {expected!r} for {pattern!r}, got {actual!r}"


def test_none_value_is_treated_as_missing() -> None:
    """A ``None`` parameter counts as absent rather than rendering 'None'."""
    with pytest.raises(ServerlessUrlError, match="`id`"):
        stringify_url_pattern("/s/:id/", {"id": None})
    assert stringify_url_pattern("/blog(/:page)/", {"page": None}) == "/blog/"
    assert render_serverless_url(["/s/:id/", "/all/"], {"id": None}) == ["/all/"]


def test_missing_value_names_the_key() -> None:
    """A required segment without data fails with the key in the message."""
    with pytest.raises(ServerlessUrlError, match="`slug`"):
        render_serverless_url("/blog/:slug/", {})


@pytest.mark.parametrize("pattern", ["/a(/:b/", "/a)/"])
def test_unbalanced_parentheses_are_rejected(pattern: str) -> None:
    """Malformed optional segments are reported rather than guessed."""
    with pytest.raises(ServerlessUrlError):
        stringify_url_pattern(pattern, {})


def test_array_keeps_only_renderable_patterns() -> None:
    """Array patterns drop entries the data cannot satisfy."""
    rendered = render_serverless_url(
        ["/tag/:tag/", "/page/:page/", "/all/"], {"page": "2"}
    )
    assert rendered == ["/page/2/", "/all/"]


def test_array_without_matches_reports_every_failure() -> None:
    """When no pattern renders, the error lists each missing key."""
    with pytest.raises(ServerlessUrlError) as excinfo:
        render_serverless_url(["/tag/:tag/", "/page/:page/"], {})
    message = str(excinfo.value)
    assert "`tag`" in message, f"expected tag failure in {message!r}"
    assert "`page`" in message, f"expected page failure in {message!r}"
