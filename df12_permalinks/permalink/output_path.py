"""Derive on-disk output paths from a resolved build link."""

from __future__ import annotations

import posixpath
import re
import typing as typ

from df12_permalinks._constants import DEFAULT_LINK_FILENAME

_REPEATED_SLASHES = re.compile(r"/{2,}")


def add_default_link_filename(link: str) -> str:
    """Append ``index.html`` to links that name a directory."""
    return link + (DEFAULT_LINK_FILENAME if link.endswith("/") else "")


def join_link(*segments: str) -> str:
    """Join and normalize forward-slash path segments.

    Empty segments are skipped, ``.``/``..`` components are resolved, repeated
    slashes collapse, and a leading ``/`` on the first segment is preserved.

    Examples
    --------
    >>> join_link("./docs", "", "index.html")
    'docs/index.html'
    >>> join_link("/docs", "1/", "index.html")
    '/docs/1/index.html'
    """
    joined = "/".join(segment for segment in segments if segment)
    if not joined:
        return "."
    normalized = posixpath.normpath(joined)
    # POSIX keeps a double leading slash; URLs never want one.
    return _REPEATED_SLASHES.sub("/", normalized)


def normalize_slashes(path: str) -> str:
    """Convert backslashes, collapse repeated slashes, and drop a trailing slash."""
    normalized = _REPEATED_SLASHES.sub("/", path.replace("\\", "/"))
    if len(normalized) > 1 and normalized.endswith("/"):
        normalized = normalized[:-1]
    return normalized


def build_output_path(
    build_link: str | None, extra_subdir: str = ""
) -> str | typ.Literal[False]:
    """Return the filesystem-relative output path for ``build_link``.

    Parameters
    ----------
    build_link : str or None
        Build link from the resolved permalink; empty or ``None`` means the
        content unit is not written.
    extra_subdir : str, optional
        Pagination directory inserted between the folder and the filename.

    Returns
    -------
    str or Literal[False]
        Forward-slash path such as ``"blog/1/index.html"``, or ``False`` when
        there is no build link.

    Examples
    --------
    >>> build_output_path("permalinksubfolder/test.html", "1/")
    'permalinksubfolder/1/test.html'
    >>> build_output_path("/about/")
    '/about/index.html'
    >>> build_output_path(None)
    False
    """
    if not build_link:
        return False
    directory, base = posixpath.split(add_default_link_filename(build_link))
    return join_link(directory, extra_subdir, base)


__all__ = [
    "add_default_link_filename",
    "build_output_path",
    "join_link",
    "normalize_slashes",
]
