"""Permalink resolution for df12 static-site builds.

This package turns a page's declarative permalink (``False``, a path string,
or an ordered mapping of ``build`` and serverless variants) into the on-disk
output path and the canonical public URL, and exposes the ``permalinks``
console script that resolves a whole ``permalinks.yaml`` site.

Exports
-------
- ``Permalink``: Resolver for one page or pagination entry.
- ``ConfigurationError``: Raised for unsupported ``permalink: true`` values.
- ``app`` / ``main``: Cyclopts application and its convenience runner.

Examples
--------
>>> from df12_permalinks import Permalink
>>> Permalink("blog/post/").to_output_path()
'blog/post/index.html'
>>> Permalink("blog/post/").to_href()
'/blog/post/'
"""

from __future__ import annotations

from .cli import app, main
from .permalink import (
    ConfigurationError,
    Permalink,
    PermalinkStateError,
    ServerlessUrlError,
    UrlTransformInput,
)

__all__ = [
    "ConfigurationError",
    "Permalink",
    "PermalinkStateError",
    "ServerlessUrlError",
    "UrlTransformInput",
    "app",
    "main",
]
