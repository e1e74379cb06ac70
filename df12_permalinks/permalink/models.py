"""Shared dataclasses, aliases, and errors used by the permalink engine."""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ

ServerlessUrlValue: typ.TypeAlias = str | list[str] | typ.Literal[False]
RawPermalinkValue: typ.TypeAlias = (
    bool | str | cabc.Mapping[str, ServerlessUrlValue | bool] | None
)


class ConfigurationError(ValueError):
    """Raised when a permalink value cannot designate an output location."""


class ServerlessUrlError(ValueError):
    """Raised when path data cannot satisfy a serverless URL pattern."""


class PermalinkStateError(RuntimeError):
    """Raised when a set-once permalink input is assigned twice or too late."""


@dc.dataclass(frozen=True, slots=True)
class UrlTransformInput:
    """Record handed to every registered URL transform.

    Attributes
    ----------
    output_path : str
        The running URL candidate, already rooted with ``/`` and possibly
        rewritten by earlier transforms.
    """

    output_path: str


UrlTransform: typ.TypeAlias = cabc.Callable[[UrlTransformInput], str | None]


@dc.dataclass(frozen=True, slots=True)
class PermalinkSpec:
    """A normalized permalink value.

    Attributes
    ----------
    build_link : str | None
        Path template used for on-disk output; ``None`` when nothing is built.
    write_to_file_system : bool
        Whether the content unit is written to disk at all.
    is_rendered : bool
        ``False`` only for mapping values that declare no ``build`` key.
    serverless_urls : dict[str, ServerlessUrlValue]
        Every non-``build`` entry of a mapping value, in declaration order.
    primary_serverless_name : str | None
        First non-``build`` key whose value is not ``False``.
    extra_pagination_subdir : str
        Directory inserted between the build link's folder and filename.
    """

    build_link: str | None
    write_to_file_system: bool
    is_rendered: bool
    serverless_urls: dict[str, ServerlessUrlValue]
    primary_serverless_name: str | None
    extra_pagination_subdir: str = ""

    @property
    def primary_serverless_url(self) -> ServerlessUrlValue | None:
        """Return the value stored under the primary serverless key, if any."""
        if self.primary_serverless_name is None:
            return None
        return self.serverless_urls[self.primary_serverless_name]


__all__ = [
    "ConfigurationError",
    "PermalinkSpec",
    "PermalinkStateError",
    "RawPermalinkValue",
    "ServerlessUrlError",
    "ServerlessUrlValue",
    "UrlTransform",
    "UrlTransformInput",
]
