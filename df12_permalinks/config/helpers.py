"""Utility helpers shared by the permalink configuration loader."""

from __future__ import annotations

import importlib
import typing as typ

from .models import SiteConfigError

if typ.TYPE_CHECKING:
    from df12_permalinks.permalink import UrlTransform


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _normalize_input_path(value: object) -> str:
    """Return ``value`` as a forward-slash path without a leading ``./``."""
    text = str(value).strip().replace("\\", "/")
    while text.startswith("./"):
        text = text[2:]
    return text


def _normalize_subdirs(value: object | None) -> list[str]:
    """Normalize pagination subdirs into a non-empty list of strings."""
    match value:
        case None:
            return [""]
        case str():
            return [value]
        case list() if value:
            return ["" if entry is None else str(entry) for entry in value]
        case list():
            return [""]
        case _:
            msg = f"pagination_subdirs must be a string or a list, got {value!r}."
            raise SiteConfigError(msg)


def _load_url_transform(reference: str) -> UrlTransform:
    """Import a ``module:attribute`` reference and return the callable."""
    module_name, sep, attribute = reference.partition(":")
    if not sep or not module_name or not attribute:
        msg = f"URL transform '{reference}' must look like 'package.module:function'."
        raise SiteConfigError(msg)
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        msg = f"Cannot import module '{module_name}' for URL transform '{reference}'."
        raise SiteConfigError(msg) from exc

    target: object = module
    for part in attribute.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as exc:
            msg = f"Module '{module_name}' has no attribute '{attribute}'."
            raise SiteConfigError(msg) from exc
    if not callable(target):
        msg = f"URL transform '{reference}' is not callable."
        raise SiteConfigError(msg)
    return typ.cast("UrlTransform", target)


def _load_url_transforms(references: object | None) -> tuple[UrlTransform, ...]:
    """Resolve the configured transform references in declaration order."""
    match references:
        case None:
            return ()
        case str():
            return (_load_url_transform(references),)
        case list():
            return tuple(_load_url_transform(str(entry)) for entry in references)
        case _:
            msg = "url_transforms must be a list of 'module:function' references."
            raise SiteConfigError(msg)


__all__ = [
    "_load_url_transform",
    "_load_url_transforms",
    "_normalize_input_path",
    "_normalize_subdirs",
    "_optional_str",
]
