"""Helpers for classifying links and expressing site paths relative to a page."""

from __future__ import annotations

import posixpath
from urllib.parse import urlsplit


def is_external(href: str) -> bool:
    """Return True for absolute URLs (``https:``, ``mailto:``) and ``//`` links.

    Examples
    --------
    >>> is_external("https://example.org"), is_external("teaching/index.qmd")
    (True, False)
    """
    return href.startswith("//") or bool(urlsplit(href).scheme)


def relative_url(target: str, page_path: str) -> str:
    """Return ``target`` (a site path) as a link relative to ``page_path``.

    Examples
    --------
    >>> relative_url("index.html", "teaching/courses/intro.html")
    '../../index.html'
    >>> relative_url("research/index.html#team", "index.html")
    'research/index.html#team'
    """
    if not target or is_external(target) or target.startswith("#"):
        return target
    path, sep, fragment = target.partition("#")
    start = posixpath.dirname(page_path) or "."
    relative = posixpath.relpath(path.lstrip("/") or ".", start)
    if path.endswith("/") and not relative.endswith("/"):
        relative = f"{relative}/"
    return f"{relative}{sep}{fragment}"


def root_prefix(page_path: str) -> str:
    """Return the relative prefix leading from ``page_path`` to the site root."""
    depth = page_path.count("/")
    return "../" * depth


__all__ = ["is_external", "relative_url", "root_prefix"]
