"""Load permalink site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from df12_permalinks._constants import DEFAULT_FILE_EXTENSION

from .helpers import (
    _load_url_transforms,
    _normalize_input_path,
    _normalize_subdirs,
    _optional_str,
)
from .models import (
    DEFAULT_CONTENT_MAP_OUTPUT,
    DEFAULT_OUTPUT_DIR,
    PageEntry,
    SiteConfig,
    SiteConfigError,
)


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing the pages to resolve.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``permalinks.yaml``).

    Returns
    -------
    SiteConfig
        Parsed configuration with page entries, build directories, and the
        imported URL transforms.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If no pages are defined, a page lacks ``input_path``, or a URL
        transform reference cannot be imported.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from df12_permalinks.config import load_site_config
    >>> config = load_site_config(Path("permalinks.yaml"))  # doctest: +SKIP
    >>> config.get_page("about").permalink  # doctest: +SKIP
    '/about/'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    defaults = raw.get("defaults", {}) or {}

    pages_raw = raw.get("pages") or {}
    if not pages_raw:
        msg = "No pages defined in permalink configuration."
        raise SiteConfigError(msg)

    default_extension = str(defaults.get("file_extension", DEFAULT_FILE_EXTENSION))
    output_dir = Path(defaults.get("output_dir", DEFAULT_OUTPUT_DIR))
    content_map_output = Path(
        defaults.get("content_map_output")
        or output_dir / DEFAULT_CONTENT_MAP_OUTPUT.name
    )

    pages: dict[str, PageEntry] = {}
    for key, payload in pages_raw.items():
        match payload:
            case dict():
                pages[str(key)] = _build_page_entry(
                    key=str(key),
                    payload=payload,
                    default_extension=default_extension,
                )
            case _:
                continue

    return SiteConfig(
        pages=pages,
        input_dir=_normalize_input_path(defaults.get("input_dir", ".")) or ".",
        output_dir=output_dir,
        content_map_output=content_map_output,
        url_transforms=_load_url_transforms(defaults.get("url_transforms")),
    )


def _build_page_entry(
    *,
    key: str,
    payload: typ.Mapping[str, typ.Any],
    default_extension: str,
) -> PageEntry:
    """Build a PageEntry for a single page using defaults and overrides."""
    input_path = _optional_str(payload.get("input_path"))
    if not input_path:
        msg = f"Page '{key}' is missing 'input_path'."
        raise SiteConfigError(msg)

    return PageEntry(
        key=key,
        input_path=_normalize_input_path(input_path),
        permalink=payload.get("permalink"),
        pagination_subdirs=_normalize_subdirs(payload.get("pagination_subdirs")),
        suffix=_optional_str(payload.get("suffix")),
        file_extension=str(payload.get("file_extension", default_extension)),
    )


__all__ = ["load_site_config"]
