"""Static site generator for the academy's teaching and research pages.

This package exposes the CLI entry points used by ``pages build`` and
``pages check`` to turn a tree of Markdown content files and a ``site.yaml``
configuration into a navigable static website.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``SiteBuilder``: Programmatic access to the build pipeline.

Examples
--------
>>> from academy_pages import main
>>> main()  # doctest: +SKIP
>>> from academy_pages import SiteBuilder
>>> SiteBuilder.__name__
'SiteBuilder'
"""

from __future__ import annotations

from .cli import app, main
from .site import BuildReport, SiteBuilder

__all__ = ["BuildReport", "SiteBuilder", "app", "main"]
