"""Build conventional permalink strings for pages without an authored one."""

from __future__ import annotations

from df12_permalinks._constants import DEFAULT_FILE_EXTENSION, INDEX_STEM


def has_duplicate_folder(directory: str, base: str) -> bool:
    """Return whether the last folder of ``directory`` is named ``base``.

    Examples
    --------
    >>> has_duplicate_folder("component/", "component")
    True
    >>> has_duplicate_folder(".", "component")
    False
    """
    folders = directory.split("/")
    if not folders[-1]:
        folders.pop()
    return bool(folders) and folders[-1] == base


def generate_build_link(
    directory: str,
    filename_no_ext: str,
    suffix: str | None = None,
    file_extension: str = DEFAULT_FILE_EXTENSION,
) -> str:
    """Return the raw build link for a source file.

    HTML output is nested into a folder named after the file
    (``about`` → ``about/index.html``) unless the file is already an index
    page or its parent folder bears the same name. Other extensions stay flat.

    Parameters
    ----------
    directory : str
        Source directory relative to the input root; may be empty.
    filename_no_ext : str
        Source filename without its extension.
    suffix : str or None, optional
        Appended to the filename stem (``index-o.html``).
    file_extension : str, optional
        Output extension without the leading dot. Defaults to ``"html"``.

    Returns
    -------
    str
        The link to feed to the permalink parser.

    Examples
    --------
    >>> generate_build_link(".", "test")
    './test/index.html'
    >>> generate_build_link("styles", "site", file_extension="css")
    'styles/site.css'
    """
    prefix = f"{directory}/" if directory else ""
    suffix = suffix or ""
    if file_extension != DEFAULT_FILE_EXTENSION:
        return f"{prefix}{filename_no_ext}{suffix}.{file_extension}"

    if filename_no_ext == INDEX_STEM or has_duplicate_folder(
        directory, filename_no_ext
    ):
        return f"{prefix}{INDEX_STEM}{suffix}.html"
    return f"{prefix}{filename_no_ext}/{INDEX_STEM}{suffix}.html"


__all__ = ["generate_build_link", "has_duplicate_folder"]
