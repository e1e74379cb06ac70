"""Fold registered URL transforms over a candidate href and collapse indexes."""

from __future__ import annotations

import logging
import typing as typ

from df12_permalinks._constants import INDEX_SUFFIXES

from .models import UrlTransformInput

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .models import UrlTransform

logger = logging.getLogger(__name__)


def apply_url_transforms(url: str, transforms: cabc.Iterable[UrlTransform]) -> str:
    """Run every transform in order over ``url`` and return the final value.

    Each transform receives the running value. A ``None`` result keeps the
    running value and the fold continues; exceptions raised by a transform
    propagate to the caller.

    Examples
    --------
    >>> apply_url_transforms("/a/", [lambda _: None, lambda data: data.output_path + "b/"])
    '/a/b/'
    """
    current = url
    for transform in transforms:
        result = transform(UrlTransformInput(output_path=current))
        if result is None:
            continue
        if result != current:
            logger.debug("url transform %r rewrote %r to %r", transform, current, result)
        current = result
    return current


def collapse_index(url: str) -> str:
    """Replace a trailing ``/index.html``, ``/index`` or ``/index/`` with ``/``.

    Only the first matching suffix is stripped.

    Examples
    --------
    >>> collapse_index("/blog/index.html")
    '/blog/'
    >>> collapse_index("/blog/index/")
    '/blog/'
    >>> collapse_index("/blog/testindex.html")
    '/blog/testindex.html'
    """
    for suffix in INDEX_SUFFIXES:
        if url.endswith(suffix):
            return url[: -len(suffix)] + "/"
    return url


__all__ = ["apply_url_transforms", "collapse_index"]
