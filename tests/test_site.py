"""Unit tests for whole-site resolution and the serverless content map."""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import msgspec.json as msgspec_json
import pytest

from df12_permalinks import ConfigurationError
from df12_permalinks.config import PageEntry, SiteConfig, SiteConfigError
from df12_permalinks.site import (
    build_content_map,
    resolve_site,
    write_content_map,
)
from df12_permalinks.transforms import language_suffix_to_directory

if typ.TYPE_CHECKING:
    import collections.abc as cabc


def _site(
    *pages: PageEntry, overrides: cabc.Mapping[str, typ.Any] | None = None
) -> SiteConfig:
    """Construct a SiteConfig fixture rooted at ``src`` with output in ``dist``."""
    config = SiteConfig(
        pages={page.key: page for page in pages},
        input_dir="src",
        output_dir=Path("dist"),
    )
    if overrides:
        for key, value in overrides.items():
            setattr(config, key, value)
    return config


def test_resolve_site_generates_and_paginates() -> None:
    """Pages without a permalink are generated; each subdir is its own entry."""
    config = _site(
        PageEntry(key="home", input_path="src/index.md"),
        PageEntry(key="about", input_path="src/about.md", permalink="/about-us/"),
        PageEntry(
            key="blog",
            input_path="src/blog/blog.md",
            pagination_subdirs=["", "1/"],
        ),
        PageEntry(key="feed", input_path="src/feed.njk", file_extension="xml"),
    )
    resolved = resolve_site(config)

    summary = [(entry.key, entry.output_path, entry.href) for entry in resolved]
    assert summary == [
        ("home", "index.html", "/"),
        ("about", "/about-us/index.html", "/about-us/"),
        ("blog", "blog/index.html", "/blog/"),
        ("blog", "blog/1/index.html", "/blog/1/"),
        ("feed", "feed.xml", "/feed.xml"),
    ], f"unexpected resolution summary: {summary!r}"
    assert resolved[0].path == "dist/index.html"
    assert resolved[1].path == "dist/about-us/index.html"


def test_resolve_site_applies_shared_transforms() -> None:
    """Configured transforms run for every page."""
    config = _site(
        PageEntry(key="about-es", input_path="src/about.es.md", permalink="about.es.html"),
        PageEntry(key="index-es", input_path="src/index.es.md", permalink="index.es.html"),
        overrides={"url_transforms": (language_suffix_to_directory,)},
    )
    hrefs = [entry.href for entry in resolve_site(config)]
    assert hrefs == ["/about/", "/"], f"expected language suffixes stripped, got {hrefs!r}"


def test_resolve_site_selected_pages_only() -> None:
    """``page_keys`` limits resolution to the requested pages."""
    config = _site(
        PageEntry(key="home", input_path="src/index.md"),
        PageEntry(key="about", input_path="src/about.md"),
    )
    resolved = resolve_site(config, page_keys=["about"])
    assert [entry.key for entry in resolved] == ["about"]


def test_resolve_site_rejects_true_permalink() -> None:
    """``permalink: true`` surfaces as a ConfigurationError."""
    config = _site(PageEntry(key="bad", input_path="src/bad.md", permalink=True))
    with pytest.raises(ConfigurationError):
        resolve_site(config)


def test_resolve_site_rejects_inputs_outside_input_dir() -> None:
    """Generated permalinks need an input path under the input directory."""
    config = _site(PageEntry(key="stray", input_path="elsewhere/stray.md"))
    with pytest.raises(SiteConfigError, match="outside the input directory"):
        resolve_site(config)


def test_build_content_map_collects_every_variant(
    caplog: pytest.LogCaptureFixture,
) -> None:
    """All declared variants map to their input; conflicts keep the first."""
    config = _site(
        PageEntry(
            key="post",
            input_path="src/post.md",
            permalink={
                "build": "/post/",
                "serverless": "/post/:slug/",
                "alternates": ["/p/:slug/", "/posts/:slug/"],
                "disabled": False,
            },
            pagination_subdirs=["", "1/"],
        ),
        PageEntry(
            key="clash",
            input_path="src/clash.md",
            permalink={"serverless": "/post/:slug/"},
        ),
    )
    with caplog.at_level(logging.WARNING, logger="df12_permalinks.site"):
        content_map = build_content_map(resolve_site(config))

    assert content_map == {
        "/post/:slug/": "src/post.md",
        "/p/:slug/": "src/post.md",
        "/posts/:slug/": "src/post.md",
    }, f"unexpected content map: {content_map!r}"
    assert "already claimed by src/post.md" in caplog.text, (
        "expected a warning for the conflicting serverless URL"
    )


def test_write_content_map_round_trips_json(tmp_path: Path) -> None:
    """The content map is written as JSON under a created directory."""
    target = tmp_path / "nested" / "serverless-map.json"
    written = write_content_map(target, {"/s/:id/": "src/s.md"})
    assert written == target
    payload = msgspec_json.decode(target.read_bytes())
    assert payload == {"/s/:id/": "src/s.md"}
