"""Build the ``search.json`` document consumed by the navbar search box."""

from __future__ import annotations

import typing as typ

import msgspec.json as msgspec_json

from academy_pages._constants import SEARCH_INDEX_FILENAME
from academy_pages.generator import RenderedPage

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from academy_pages.generator import RenderResult

# Characters of body text stored per entry.
MAX_TEXT_LENGTH = 2000


def build_search_index(results: cabc.Iterable[RenderResult]) -> RenderedPage:
    """Return the search index as a page, entries sorted by ``href``."""
    entries = sorted((result.search_entry for result in results), key=lambda e: e.href)
    payload = [
        {
            "title": entry.title,
            "href": entry.href,
            "section": entry.section,
            "categories": list(entry.categories),
            "text": entry.text[:MAX_TEXT_LENGTH],
        }
        for entry in entries
    ]
    return RenderedPage(
        output_path=SEARCH_INDEX_FILENAME,
        content=msgspec_json.encode(payload) + b"\n",
    )


__all__ = ["MAX_TEXT_LENGTH", "build_search_index"]
