"""Cyclopts CLI entrypoint for resolving permalinks of a configured site.

The ``permalinks`` console script defined here reads a ``permalinks.yaml``
site configuration, prints the output path and public URL resolved for every
page (and pagination entry), and writes the serverless content map that a
request router uses to find the input file behind a URL pattern.

Examples
--------
Print every resolved page for the default configuration:

>>> from df12_permalinks.cli import main
>>> main()  # doctest: +SKIP

Write the content map to a custom location:

>>> from df12_permalinks.cli import app
>>> app(
...     ["content-map", "--output", "dist/serverless-map.json"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import load_site_config
from .site import build_content_map, resolve_site, write_content_map

DEFAULT_CONFIG = Path("permalinks.yaml")

app = App(name="permalinks", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _configure_logging(*, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command(help="Print the output path and URL resolved for each page.")
def resolve(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    page: typ.Annotated[
        str | None, Parameter(help="Page identifier", env_var="INPUT_PAGE")
    ] = None,
    verbose: typ.Annotated[
        bool, Parameter(help="Log resolution details")
    ] = False,
) -> None:
    """Resolve permalinks for the requested site configuration.

    Parameters
    ----------
    config : Path, optional
        Path to the ``permalinks.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).
    page : str or None, optional
        Specific page key to resolve; when ``None`` (default) all pages are
        resolved.
    verbose : bool, optional
        Enable debug logging of parse and transform steps.

    Returns
    -------
    None
        Prints one ``<key>: <output path> -> <url>`` line per entry.
    """
    _configure_logging(verbose=verbose)
    site_config = load_site_config(config)
    page_keys = [page] if page else None
    for entry in resolve_site(site_config, page_keys=page_keys):
        label = entry.key
        if entry.extra_subdir:
            label = f"{label} [{entry.extra_subdir}]"
        output_path = entry.output_path or "(not written)"
        href = entry.href or "(no url)"
        print(f"{label}: {output_path} -> {href}")


@app.command(
    name="content-map",
    help="Write the JSON map of serverless URL patterns to input files.",
)
def content_map(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    output: typ.Annotated[
        Path | None,
        Parameter(help="Override the content map path", env_var="INPUT_OUTPUT"),
    ] = None,
    verbose: typ.Annotated[
        bool, Parameter(help="Log resolution details")
    ] = False,
) -> None:
    """Write the serverless content map for the site configuration.

    Parameters
    ----------
    config : Path, optional
        Path to the ``permalinks.yaml`` configuration file.
    output : Path or None, optional
        Destination JSON file; defaults to ``content_map_output`` from the
        configuration.
    verbose : bool, optional
        Enable debug logging of parse and transform steps.

    Returns
    -------
    None
        Writes the JSON file and prints its path.
    """
    _configure_logging(verbose=verbose)
    site_config = load_site_config(config)
    mapping = build_content_map(resolve_site(site_config))
    written = write_content_map(output or site_config.content_map_output, mapping)
    print(f"wrote {_format_path(written)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``permalinks`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
