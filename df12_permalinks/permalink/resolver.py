"""Resolve a page's output path and public URL from its permalink.

:class:`Permalink` is constructed once per rendered page (and per pagination
entry). It exposes :meth:`Permalink.to_output_path` for the file writer,
:meth:`Permalink.to_href` for the ``page.url`` template value, and
:meth:`Permalink.get_serverless_urls` for route-table builders.

Example
-------
>>> from df12_permalinks import Permalink
>>> Permalink.generate(".", "test", "1/").to_href()
'/test/1/'
>>> link = Permalink({"serverless": "/s/:id/"})
>>> link.set_serverless_path_data({"id": "42"})
>>> link.to_output_path(), link.to_href()
(False, '/s/42/')
"""

from __future__ import annotations

import os
import typing as typ

from df12_permalinks._constants import DEFAULT_FILE_EXTENSION

from .generate import generate_build_link, has_duplicate_folder
from .models import PermalinkStateError
from .output_path import build_output_path, normalize_slashes
from .serverless import render_serverless_url
from .spec import copy_serverless_value, parse_permalink
from .transforms import apply_url_transforms, collapse_index

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .models import (
        PermalinkSpec,
        RawPermalinkValue,
        ServerlessUrlValue,
        UrlTransform,
    )


class Permalink:
    """Public URL and output path for a single content unit."""

    def __init__(
        self,
        value: RawPermalinkValue,
        extra_subdir: str | None = "",
        *,
        url_transforms: cabc.Iterable[UrlTransform] | None = None,
    ) -> None:
        """Parse the permalink value.

        Parameters
        ----------
        value : RawPermalinkValue
            Rendered permalink: ``False``, a path string, or an ordered
            mapping of ``build`` and serverless variants.
        extra_subdir : str or None, optional
            Pagination directory inserted before the output filename.
        url_transforms : Iterable[UrlTransform] or None, optional
            Build-wide URL transforms. Passing them here counts as the single
            allowed assignment.

        Raises
        ------
        ConfigurationError
            If ``value`` or its ``build`` entry is ``True``.
        """
        self._spec = parse_permalink(value, extra_subdir)
        self._url_transforms: tuple[UrlTransform, ...] = ()
        self._transforms_set = False
        self._serverless_path_data: dict[str, object] | None = None
        self._resolved = False
        if url_transforms is not None:
            self.set_url_transforms(url_transforms)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(build_link={self.build_link!r}, "
            f"extra_subdir={self.extra_pagination_subdir!r}, "
            f"serverless_urls={self.serverless_urls!r})"
        )

    @classmethod
    def generate(
        cls,
        directory: str,
        filename_no_ext: str,
        extra_subdir: str | None = None,
        suffix: str | None = None,
        file_extension: str = DEFAULT_FILE_EXTENSION,
        *,
        url_transforms: cabc.Iterable[UrlTransform] | None = None,
    ) -> Permalink:
        """Build the conventional permalink for a page with no authored one.

        See :func:`~df12_permalinks.permalink.generate.generate_build_link`
        for the naming rules.
        """
        link = generate_build_link(directory, filename_no_ext, suffix, file_extension)
        return cls(link, extra_subdir, url_transforms=url_transforms)

    has_duplicate_folder = staticmethod(has_duplicate_folder)

    @property
    def spec(self) -> PermalinkSpec:
        return self._spec

    @property
    def build_link(self) -> str | None:
        return self._spec.build_link

    @property
    def write_to_file_system(self) -> bool:
        return self._spec.write_to_file_system

    @property
    def is_rendered(self) -> bool:
        return self._spec.is_rendered

    @property
    def serverless_urls(self) -> dict[str, ServerlessUrlValue]:
        return {
            name: copy_serverless_value(entry)
            for name, entry in self._spec.serverless_urls.items()
        }

    @property
    def primary_serverless_name(self) -> str | None:
        return self._spec.primary_serverless_name

    @property
    def primary_serverless_url(self) -> ServerlessUrlValue | None:
        return copy_serverless_value(self._spec.primary_serverless_url)

    @property
    def extra_pagination_subdir(self) -> str:
        return self._spec.extra_pagination_subdir

    @property
    def url_transforms(self) -> tuple[UrlTransform, ...]:
        return self._url_transforms

    @property
    def serverless_path_data(self) -> dict[str, object] | None:
        return self._serverless_path_data

    def set_url_transforms(self, transforms: cabc.Iterable[UrlTransform]) -> None:
        """Register the ordered URL transforms applied by :meth:`to_href`.

        Raises
        ------
        PermalinkStateError
            If transforms were already assigned or a path was already read.
        """
        self._ensure_assignable("url transforms", already_set=self._transforms_set)
        self._url_transforms = tuple(transforms)
        self._transforms_set = True

    def set_serverless_path_data(self, data: cabc.Mapping[str, object]) -> None:
        """Provide the request's path parameters for serverless URL patterns.

        Raises
        ------
        PermalinkStateError
            If path data was already assigned or a path was already read.
        """
        self._ensure_assignable(
            "serverless path data",
            already_set=self._serverless_path_data is not None,
        )
        self._serverless_path_data = dict(data)

    def get_serverless_urls(self) -> dict[str, ServerlessUrlValue]:
        """Return every declared non-build URL variant, in declaration order."""
        return self.serverless_urls

    def to_output_path(self) -> str | typ.Literal[False]:
        """Return the output path relative to the output directory.

        Returns
        -------
        str or Literal[False]
            A forward-slash path such as ``"blog/1/index.html"``, or ``False``
            when the page is not written to disk.
        """
        self._resolved = True
        return build_output_path(self.build_link, self.extra_pagination_subdir)

    def to_href(self) -> str | typ.Literal[False]:
        """Return the canonical public URL for the page.

        A primary serverless variant wins over the build link and is returned
        as declared (after path-data substitution when data was supplied).
        Otherwise the output path is rooted, passed through the URL transforms,
        and a trailing ``index.html``/``index``/``index/`` collapses to ``/``.

        Returns
        -------
        str or Literal[False]
            The URL, or ``False`` when the page has neither a serverless
            variant nor a build link.

        Raises
        ------
        ServerlessUrlError
            If the supplied path data cannot satisfy the primary pattern.
        """
        self._resolved = True
        primary = self._spec.primary_serverless_url
        if primary:
            return self._serverless_href(primary)

        output_path = self.to_output_path()
        if output_path is False:
            return False

        rooted = output_path if output_path.startswith("/") else f"/{output_path}"
        return collapse_index(apply_url_transforms(rooted, self._url_transforms))

    def to_path(self, output_dir: str | os.PathLike[str]) -> str | typ.Literal[False]:
        """Return the output path joined onto ``output_dir``."""
        output_path = self.to_output_path()
        if output_path is False:
            return False
        return normalize_slashes(f"{os.fspath(output_dir)}/{output_path}")

    def to_path_from_root(self) -> str | typ.Literal[False]:
        """Return the output path with slashes normalized."""
        output_path = self.to_output_path()
        if output_path is False:
            return False
        return normalize_slashes(output_path)

    def _serverless_href(self, primary: str | list[str]) -> str:
        if self._serverless_path_data is not None:
            primary = render_serverless_url(primary, self._serverless_path_data)
        if isinstance(primary, str):
            return primary
        return primary[0]

    def _ensure_assignable(self, label: str, *, already_set: bool) -> None:
        if already_set:
            msg = f"Permalink {label} can only be set once."
            raise PermalinkStateError(msg)
        if self._resolved:
            msg = f"Permalink {label} must be set before the first path is resolved."
            raise PermalinkStateError(msg)


__all__ = ["Permalink"]
