"""Typed dataclasses describing permalink site configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from df12_permalinks._constants import DEFAULT_FILE_EXTENSION
from df12_permalinks.permalink.models import (  # noqa: TC001 - dataclass field types
    RawPermalinkValue,
    UrlTransform,
)

DEFAULT_OUTPUT_DIR = Path("_site")
DEFAULT_CONTENT_MAP_OUTPUT = DEFAULT_OUTPUT_DIR / "serverless-map.json"


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class PageEntry:
    """A content unit whose permalink should be resolved.

    Attributes
    ----------
    key : str
        Identifier of the page within the configuration.
    input_path : str
        Forward-slash path of the source file.
    permalink : RawPermalinkValue
        Authored permalink value; ``None`` means one is generated from the
        input path.
    pagination_subdirs : list[str]
        One resolved entry is produced per subdir; ``""`` is the first page.
    suffix : str or None
        Filename suffix used when the permalink is generated.
    file_extension : str
        Output extension used when the permalink is generated.
    """

    key: str
    input_path: str
    permalink: RawPermalinkValue = None
    pagination_subdirs: list[str] = dc.field(default_factory=lambda: [""])
    suffix: str | None = None
    file_extension: str = DEFAULT_FILE_EXTENSION


@dc.dataclass(slots=True)
class SiteConfig:
    """Collection of page entries alongside shared build settings."""

    pages: dict[str, PageEntry]
    input_dir: str = "."
    output_dir: Path = DEFAULT_OUTPUT_DIR
    content_map_output: Path = DEFAULT_CONTENT_MAP_OUTPUT
    url_transforms: tuple[UrlTransform, ...] = ()

    def get_page(self, page_id: str) -> PageEntry:
        """Return the requested page entry."""
        try:
            return self.pages[page_id]
        except KeyError as exc:
            available = ", ".join(sorted(self.pages))
            msg = f"Unknown page '{page_id}'. Known pages: {available}"
            raise KeyError(msg) from exc


__all__ = [
    "DEFAULT_CONTENT_MAP_OUTPUT",
    "DEFAULT_OUTPUT_DIR",
    "PageEntry",
    "SiteConfig",
    "SiteConfigError",
]
