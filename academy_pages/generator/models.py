"""Shared dataclasses used by the page rendering pipeline."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

if typ.TYPE_CHECKING:
    from academy_pages.errors import BrokenCrossLinkError


@dc.dataclass(frozen=True, slots=True)
class RenderedPage:
    """A finished document ready to be written.

    Attributes
    ----------
    output_path : str
        POSIX path relative to the output directory.
    content : bytes
        Encoded document body.
    """

    output_path: str
    content: bytes


@dc.dataclass(frozen=True, slots=True)
class SearchEntry:
    """One record of the client-side search index."""

    title: str
    href: str
    section: str
    categories: tuple[str, ...]
    text: str


@dc.dataclass(frozen=True, slots=True)
class RenderResult:
    """Outcome of rendering one content item.

    Attributes
    ----------
    page : RenderedPage
        The rendered document.
    warnings : tuple[BrokenCrossLinkError, ...]
        Broken inline links found in the page body.
    search_entry : SearchEntry
        Plain-text record for the search index.
    """

    page: RenderedPage
    warnings: tuple[BrokenCrossLinkError, ...]
    search_entry: SearchEntry


__all__ = ["RenderResult", "RenderedPage", "SearchEntry"]
