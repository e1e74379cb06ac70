"""Normalize raw permalink values into :class:`PermalinkSpec` records.

A raw permalink arrives from rendered front matter as ``False``, a string, or
an ordered mapping whose ``build`` key names the on-disk output and whose
remaining keys declare serverless URL variants. :func:`parse_permalink` is the
only place that interprets that shape.

Examples
--------
>>> from df12_permalinks.permalink.spec import parse_permalink
>>> spec = parse_permalink({"serverless": "/s/", "build": "/b/"})
>>> spec.build_link, spec.primary_serverless_name
('/b/', 'serverless')
>>> parse_permalink(False).write_to_file_system
False
"""

from __future__ import annotations

import collections.abc as cabc
import logging
import typing as typ

from df12_permalinks._constants import BUILD_KEY

from .models import ConfigurationError, PermalinkSpec

if typ.TYPE_CHECKING:
    from .models import RawPermalinkValue, ServerlessUrlValue

logger = logging.getLogger(__name__)


def parse_permalink(
    value: RawPermalinkValue, extra_subdir: str | None = ""
) -> PermalinkSpec:
    """Return the normalized record for a raw permalink value.

    Parameters
    ----------
    value : RawPermalinkValue
        ``False``, a path string, or an ordered mapping of variant name to
        URL (``build`` being the on-disk variant).
    extra_subdir : str or None, optional
        Pagination directory inserted before the output filename.

    Returns
    -------
    PermalinkSpec
        The resolved build link, serverless variants, and write flags.

    Raises
    ------
    ConfigurationError
        If ``value`` (or its ``build`` entry) is ``True``.
    """
    is_mapping = isinstance(value, cabc.Mapping)
    is_rendered = True
    raw_build: object = None
    primary_name: str | None = None
    serverless_urls: dict[str, ServerlessUrlValue] = {}

    if is_mapping:
        mapping = typ.cast("cabc.Mapping[str, typ.Any]", value)
        raw_build = mapping.get(BUILD_KEY)
        serverless_urls = _copy_serverless_urls(mapping)
        primary_name = _find_primary_serverless_name(serverless_urls)
        if BUILD_KEY not in mapping:
            is_rendered = False
    else:
        raw_build = value

    build_link = _resolve_build_link(raw_build, nested=is_mapping)
    spec = PermalinkSpec(
        build_link=build_link,
        write_to_file_system=bool(build_link) and is_rendered,
        is_rendered=is_rendered,
        serverless_urls=serverless_urls,
        primary_serverless_name=primary_name,
        extra_pagination_subdir=extra_subdir or "",
    )
    logger.debug(
        "parsed permalink %r: build=%r primary=%r subdir=%r",
        value,
        spec.build_link,
        spec.primary_serverless_name,
        spec.extra_pagination_subdir,
    )
    return spec


def _copy_serverless_urls(
    mapping: cabc.Mapping[typ.Any, typ.Any],
) -> dict[str, ServerlessUrlValue]:
    """Return the non-build entries with string keys and copied URL lists."""
    variants: dict[str, ServerlessUrlValue] = {}
    for key, entry in mapping.items():
        name = str(key)
        if name == BUILD_KEY:
            continue
        variants[name] = copy_serverless_value(entry)
    return variants


def copy_serverless_value(entry: typ.Any) -> typ.Any:
    """Return ``entry`` with list and tuple values copied into a new list."""
    if isinstance(entry, list | tuple):
        return list(entry)
    return entry


def _find_primary_serverless_name(
    variants: cabc.Mapping[str, ServerlessUrlValue],
) -> str | None:
    """Return the first variant name whose value is not ``False``."""
    for key, entry in variants.items():
        if entry is not False:
            return key
    return None


def _resolve_build_link(raw: object, *, nested: bool) -> str | None:
    """Validate the build entry and return it as a usable link or ``None``."""
    match raw:
        case bool():
            if raw:
                prefix = f"{BUILD_KEY}: " if nested else ""
                msg = (
                    f"`permalink: {prefix}true` is not a supported permalink value. "
                    f"Did you mean `permalink: {prefix}false`?"
                )
                raise ConfigurationError(msg)
            return None
        case str() if raw:
            return raw
        case _:
            # Empty strings and unset values both mean "nothing to build".
            return None


__all__ = ["copy_serverless_value", "parse_permalink"]
