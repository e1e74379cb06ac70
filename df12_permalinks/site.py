"""Resolve every configured page and build the serverless content map.

This module is the glue between :mod:`df12_permalinks.config` and the
permalink engine. :func:`resolve_site` creates one
:class:`~df12_permalinks.permalink.Permalink` per page and pagination subdir,
sharing the build's URL transforms, and records the resulting output paths
and URLs. :func:`build_content_map` collects every declared serverless URL
pattern so a request router can find the input file behind a URL, and
:func:`write_content_map` persists that mapping as JSON.

Example
-------
>>> from pathlib import Path
>>> from df12_permalinks.config import load_site_config
>>> from df12_permalinks.site import build_content_map, resolve_site
>>> config = load_site_config(Path("permalinks.yaml"))  # doctest: +SKIP
>>> pages = resolve_site(config)  # doctest: +SKIP
>>> build_content_map(pages)  # doctest: +SKIP
{'/blog/:slug/': 'src/blog/post.md'}
"""

from __future__ import annotations

import dataclasses as dc
import json
import logging
import posixpath
import typing as typ

from df12_permalinks.config import SiteConfigError
from df12_permalinks.permalink import Permalink

if typ.TYPE_CHECKING:
    from pathlib import Path

    from df12_permalinks.config import PageEntry, SiteConfig
    from df12_permalinks.permalink.models import ServerlessUrlValue

logger = logging.getLogger(__name__)


@dc.dataclass(slots=True)
class ResolvedPage:
    """Output location and URL computed for one page or pagination entry.

    Attributes
    ----------
    key : str
        Page identifier from the configuration.
    input_path : str
        Source file the entry was resolved for.
    extra_subdir : str
        Pagination subdir of this entry; ``""`` for the first page.
    output_path : str | Literal[False]
        Path relative to the output directory, or ``False`` when not written.
    href : str | Literal[False]
        Public URL, or ``False`` when the page has no URL.
    path : str | Literal[False]
        Output path joined onto the configured output directory.
    serverless_urls : dict[str, ServerlessUrlValue]
        Every declared non-build URL variant.
    """

    key: str
    input_path: str
    extra_subdir: str
    output_path: str | typ.Literal[False]
    href: str | typ.Literal[False]
    path: str | typ.Literal[False]
    serverless_urls: dict[str, ServerlessUrlValue]


def build_permalink(
    page: PageEntry, config: SiteConfig, extra_subdir: str = ""
) -> Permalink:
    """Return the permalink for ``page``, generating one when none was authored."""
    if page.permalink is not None:
        return Permalink(
            page.permalink, extra_subdir, url_transforms=config.url_transforms
        )

    relative = _relative_input_path(page.input_path, config.input_dir)
    directory, filename = posixpath.split(relative)
    stem, _ = posixpath.splitext(filename)
    return Permalink.generate(
        directory,
        stem,
        extra_subdir,
        page.suffix,
        page.file_extension,
        url_transforms=config.url_transforms,
    )


def resolve_site(
    config: SiteConfig, *, page_keys: typ.Iterable[str] | None = None
) -> list[ResolvedPage]:
    """Resolve output paths and URLs for the configured pages.

    Parameters
    ----------
    config : SiteConfig
        Loaded site configuration.
    page_keys : Iterable[str] or None, optional
        Restrict resolution to these page keys; all pages when ``None``.

    Returns
    -------
    list[ResolvedPage]
        One entry per page and pagination subdir, in configuration order.

    Raises
    ------
    ConfigurationError
        If a page declares ``permalink: true`` or ``permalink: {build: true}``.
    KeyError
        If ``page_keys`` names an unknown page.
    """
    if page_keys is None:
        pages = list(config.pages.values())
    else:
        pages = [config.get_page(key) for key in page_keys]

    resolved: list[ResolvedPage] = []
    for page in pages:
        for extra_subdir in page.pagination_subdirs:
            permalink = build_permalink(page, config, extra_subdir)
            entry = ResolvedPage(
                key=page.key,
                input_path=page.input_path,
                extra_subdir=extra_subdir,
                output_path=permalink.to_output_path(),
                href=permalink.to_href(),
                path=permalink.to_path(config.output_dir),
                serverless_urls=permalink.get_serverless_urls(),
            )
            logger.debug(
                "resolved %s%s: %r -> %r",
                page.key,
                f" [{extra_subdir}]" if extra_subdir else "",
                entry.output_path,
                entry.href,
            )
            resolved.append(entry)
    return resolved


def build_content_map(pages: typ.Iterable[ResolvedPage]) -> dict[str, str]:
    """Map every declared serverless URL pattern to its input path.

    Array variants contribute each of their patterns and ``False`` variants
    are skipped. When two inputs claim the same pattern the first one keeps
    it and a warning is logged.
    """
    content_map: dict[str, str] = {}
    for page in pages:
        for name, value in page.serverless_urls.items():
            if value is False:
                continue
            patterns = [value] if isinstance(value, str) else list(value)
            for pattern in patterns:
                existing = content_map.get(pattern)
                if existing is None:
                    content_map[pattern] = page.input_path
                elif existing != page.input_path:
                    logger.warning(
                        "serverless URL %r (%s) from %s is already claimed by %s",
                        pattern,
                        name,
                        page.input_path,
                        existing,
                    )
    return content_map


def write_content_map(path: Path, content_map: typ.Mapping[str, str]) -> Path:
    """Persist ``content_map`` as JSON and return the written path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(dict(content_map), indent=2) + "\n", encoding="utf-8")
    return path


def _relative_input_path(input_path: str, input_dir: str) -> str:
    """Return ``input_path`` relative to ``input_dir``."""
    if input_dir in ("", "."):
        return input_path
    prefix = input_dir.rstrip("/") + "/"
    if not input_path.startswith(prefix):
        msg = f"Input path '{input_path}' is outside the input directory '{input_dir}'."
        raise SiteConfigError(msg)
    return input_path[len(prefix) :]


__all__ = [
    "ResolvedPage",
    "build_content_map",
    "build_permalink",
    "resolve_site",
    "write_content_map",
]
