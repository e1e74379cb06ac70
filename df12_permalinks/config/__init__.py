"""Load and validate permalink site configuration YAML.

This subpackage parses the project's ``permalinks.yaml`` file, applies build
defaults, imports the registered URL transforms, and produces typed
dataclasses (:class:`SiteConfig`, :class:`PageEntry`) that the site resolver
consumes. The primary entry point is :func:`load_site_config`.

Examples
--------
>>> from pathlib import Path
>>> from df12_permalinks.config import load_site_config
>>> site = load_site_config(Path("permalinks.yaml"))  # doctest: +SKIP
>>> site.get_page("about").input_path  # doctest: +SKIP
'src/about.md'
"""

from .loader import load_site_config
from .models import PageEntry, SiteConfig, SiteConfigError

__all__ = [
    "PageEntry",
    "SiteConfig",
    "SiteConfigError",
    "load_site_config",
]
