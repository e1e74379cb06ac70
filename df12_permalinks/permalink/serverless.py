"""Substitute request path data into serverless URL patterns.

Serverless permalink variants are route templates such as ``/blog/:slug/``.
At request time the URL matcher supplies the captured parameters, and
:func:`render_serverless_url` turns the template back into a concrete URL.

The pattern dialect:

- ``:name`` is a named segment; names use ASCII letters and digits.
- ``*`` is a wildcard, filled from the ``_`` key of the path data.
- ``( ... )`` wraps an optional part, rendered only when the path data
  provides at least one of the segments inside it.
- ``\\`` escapes the next character.

Examples
--------
>>> render_serverless_url("/serverless/:test/", {"test": "yeearg"})
'/serverless/yeearg/'
>>> render_serverless_url("/blog(/:page)/", {})
'/blog/'
>>> render_serverless_url(["/a/:missing/", "/b/:id/"], {"id": "7"})
['/b/7/']
"""

from __future__ import annotations

import dataclasses as dc
import logging
import string
import typing as typ

from .models import ServerlessUrlError

if typ.TYPE_CHECKING:
    import collections.abc as cabc

logger = logging.getLogger(__name__)

WILDCARD_KEY = "_"
_NAME_CHARS = frozenset(string.ascii_letters + string.digits)


@dc.dataclass(frozen=True, slots=True)
class _Named:
    name: str


@dc.dataclass(frozen=True, slots=True)
class _Wildcard:
    pass


@dc.dataclass(frozen=True, slots=True)
class _Optional:
    children: tuple[_Node, ...]


_Node: typ.TypeAlias = str | _Named | _Wildcard | _Optional


def render_serverless_url(
    value: str | cabc.Sequence[str], path_data: cabc.Mapping[str, object]
) -> str | list[str]:
    """Render one pattern, or every renderable pattern of a list.

    Parameters
    ----------
    value : str or Sequence[str]
        A single URL pattern or an ordered list of alternatives.
    path_data : Mapping[str, object]
        Parameter values captured by the request URL matcher.

    Returns
    -------
    str or list[str]
        The rendered URL for a single pattern; for a list, the rendered URLs
        of every pattern the data satisfies, in declaration order.

    Raises
    ------
    ServerlessUrlError
        If a single pattern lacks a required value, or if no pattern of a list
        can be rendered.
    """
    if isinstance(value, str):
        return stringify_url_pattern(value, path_data)

    rendered: list[str] = []
    errors: list[str] = []
    for pattern in value:
        try:
            rendered.append(stringify_url_pattern(pattern, path_data))
        except ServerlessUrlError as exc:
            errors.append(str(exc))
    if not rendered:
        msg = (
            "Looked through an array of serverless URLs but found no matches, "
            f"errors: {'; '.join(errors)}"
        )
        raise ServerlessUrlError(msg)
    return rendered


def stringify_url_pattern(pattern: str, path_data: cabc.Mapping[str, object]) -> str:
    """Fill the named segments of ``pattern`` from ``path_data``."""
    nodes, _ = _parse_nodes(pattern, 0, nested=False)
    url = _render(nodes, path_data)
    logger.debug("rendered serverless pattern %r as %r", pattern, url)
    return url


def _parse_nodes(
    pattern: str, pos: int, *, nested: bool
) -> tuple[tuple[_Node, ...], int]:
    """Parse ``pattern`` from ``pos`` until the end or a closing parenthesis."""
    nodes: list[_Node] = []
    text: list[str] = []

    def flush() -> None:
        if text:
            nodes.append("".join(text))
            text.clear()

    while pos < len(pattern):
        char = pattern[pos]
        if char == "\\":
            text.append(pattern[pos + 1 : pos + 2])
            pos += 2
        elif char == "(":
            flush()
            children, pos = _parse_nodes(pattern, pos + 1, nested=True)
            nodes.append(_Optional(children))
        elif char == ")":
            if not nested:
                msg = f"Unexpected ')' at position {pos} in URL pattern {pattern!r}."
                raise ServerlessUrlError(msg)
            flush()
            return tuple(nodes), pos + 1
        elif char == ":" and pattern[pos + 1 : pos + 2] in _NAME_CHARS:
            end = pos + 1
            while end < len(pattern) and pattern[end] in _NAME_CHARS:
                end += 1
            flush()
            nodes.append(_Named(pattern[pos + 1 : end]))
            pos = end
        elif char == "*":
            flush()
            nodes.append(_Wildcard())
            pos += 1
        else:
            text.append(char)
            pos += 1

    if nested:
        msg = f"Unclosed optional segment in URL pattern {pattern!r}."
        raise ServerlessUrlError(msg)
    flush()
    return tuple(nodes), pos


def _render(nodes: tuple[_Node, ...], path_data: cabc.Mapping[str, object]) -> str:
    parts: list[str] = []
    for node in nodes:
        match node:
            case str():
                parts.append(node)
            case _Named(name=name):
                parts.append(_lookup(name, path_data))
            case _Wildcard():
                parts.append(_lookup(WILDCARD_KEY, path_data))
            case _Optional(children=children):
                if _provides_any(children, path_data):
                    parts.append(_render(children, path_data))
    return "".join(parts)


def _lookup(key: str, path_data: cabc.Mapping[str, object]) -> str:
    if path_data.get(key) is None:
        msg = f"no values provided for key `{key}`"
        raise ServerlessUrlError(msg)
    return str(path_data[key])


def _provides_any(
    nodes: tuple[_Node, ...], path_data: cabc.Mapping[str, object]
) -> bool:
    """Return whether ``path_data`` fills any segment within ``nodes``."""
    for node in nodes:
        match node:
            case _Named(name=name) if path_data.get(name) is not None:
                return True
            case _Wildcard() if path_data.get(WILDCARD_KEY) is not None:
                return True
            case _Optional(children=children) if _provides_any(children, path_data):
                return True
    return False


__all__ = ["WILDCARD_KEY", "render_serverless_url", "stringify_url_pattern"]
