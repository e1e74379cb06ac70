"""Common literal values used across df12_permalinks.

These constants keep the default filename, reserved permalink keys, and the
index-collapsing suffixes centralized so the parser, resolvers, and tests can
import the same values without drifting. Intended for internal use within the
df12_permalinks package.

Examples
--------
>>> from df12_permalinks import _constants
>>> _constants.BUILD_KEY
'build'
>>> "docs/" + _constants.DEFAULT_LINK_FILENAME
'docs/index.html'
"""

BUILD_KEY = "build"
DEFAULT_LINK_FILENAME = "index.html"
DEFAULT_FILE_EXTENSION = "html"
INDEX_STEM = "index"

# Checked in order; only the first match is collapsed.
INDEX_SUFFIXES = ("/index.html", "/index", "/index/")
