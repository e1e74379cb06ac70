"""Permalink parsing, output-path derivation, and href resolution."""

from .generate import generate_build_link, has_duplicate_folder
from .models import (
    ConfigurationError,
    PermalinkSpec,
    PermalinkStateError,
    ServerlessUrlError,
    UrlTransform,
    UrlTransformInput,
)
from .output_path import build_output_path
from .resolver import Permalink
from .serverless import render_serverless_url
from .spec import parse_permalink
from .transforms import apply_url_transforms, collapse_index

__all__ = [
    "ConfigurationError",
    "Permalink",
    "PermalinkSpec",
    "PermalinkStateError",
    "ServerlessUrlError",
    "UrlTransform",
    "UrlTransformInput",
    "apply_url_transforms",
    "build_output_path",
    "collapse_index",
    "generate_build_link",
    "has_duplicate_folder",
    "parse_permalink",
    "render_serverless_url",
]
