"""Common literal values used across academy_pages.

These constants keep filenames, extensions, and template names centralized so
the loader, renderer, emitter, and tests import the same values without
drifting. Intended for internal use within the academy_pages package.

Examples
--------
>>> from academy_pages import _constants
>>> _constants.OUTPUT_EXTENSION
'.html'
>>> ".qmd" in _constants.DEFAULT_CONTENT_EXTENSIONS
True
"""

DEFAULT_CONFIG_FILENAME = "site.yaml"
DEFAULT_OUTPUT_DIR = "_site"
DEFAULT_CONTENT_EXTENSIONS = (".md", ".qmd", ".markdown")
DEFAULT_INCLUDE_PATTERNS = ("**/*.md", "**/*.qmd")
DEFAULT_TEMPLATE = "page.jinja"
DEFAULT_PYGMENTS_STYLE = "friendly"
OUTPUT_EXTENSION = ".html"
INDEX_STEM = "index"
SEARCH_INDEX_FILENAME = "search.json"
METADATA_DELIMITER = "---"
