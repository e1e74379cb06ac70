"""Optional URL transforms that sites can register in their configuration.

Transforms are plain callables taking a
:class:`~df12_permalinks.permalink.UrlTransformInput` and returning a
replacement URL or ``None``. Register them by reference in ``permalinks.yaml``:

.. code-block:: yaml

    defaults:
      url_transforms:
        - df12_permalinks.transforms:language_suffix_to_directory
"""

from __future__ import annotations

import re
import typing as typ

if typ.TYPE_CHECKING:
    from df12_permalinks.permalink import UrlTransformInput

_LANGUAGE_SUFFIX = re.compile(r"\.[a-z]{2}\.html$", re.IGNORECASE)


def language_suffix_to_directory(data: UrlTransformInput) -> str | None:
    """Serve Apache content-negotiation files from their directory URL.

    ``/about.es.html`` becomes ``/about/`` and ``/index.es.html`` becomes
    ``/index/``, which index collapsing then turns into ``/``.

    Examples
    --------
    >>> from df12_permalinks.permalink import UrlTransformInput
    >>> language_suffix_to_directory(UrlTransformInput("/about.es.html"))
    '/about/'
    >>> language_suffix_to_directory(UrlTransformInput("/about.html")) is None
    True
    """
    match = _LANGUAGE_SUFFIX.search(data.output_path)
    if match is None:
        return None
    return data.output_path[: match.start()] + "/"


__all__ = ["language_suffix_to_directory"]
