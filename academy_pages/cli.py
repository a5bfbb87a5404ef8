"""Cyclopts CLI entrypoint for building the academy website.

The ``pages`` console script defined here renders the Markdown content tree
described by ``site.yaml`` into static HTML. ``pages build`` writes the site
and prints every file it changed; ``pages check`` runs the same pipeline
without writing, which is handy in CI to catch broken navigation and links.

Examples
--------
Build the site with the default configuration:

>>> from academy_pages.cli import main
>>> main()  # doctest: +SKIP

Build into a custom directory with four render threads:

>>> from academy_pages.cli import app
>>> app(["build", "--output-dir", "dist", "--workers", "4"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import DEFAULT_CONFIG_FILENAME
from .config import load_site_config
from .site import SiteBuilder

DEFAULT_CONFIG = Path(DEFAULT_CONFIG_FILENAME)

app = App(name="pages", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command(help="Render the content tree into static HTML.")
def build(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
    workers: typ.Annotated[
        int, Parameter(help="Threads used for loading and rendering")
    ] = 1,
    verbose: typ.Annotated[bool, Parameter(help="Enable debug logging")] = False,
) -> None:
    """Build the site described by ``config``.

    Parameters
    ----------
    config : Path, optional
        Path to the ``site.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).
    output_dir : Path or None, optional
        Override for the configured output directory.
    workers : int, optional
        Number of threads used to load and render pages.
    verbose : bool, optional
        Emit debug logging to stderr.

    Returns
    -------
    None
        Writes the site and prints each changed file and broken link.

    Raises
    ------
    SiteBuildError
        When content, navigation, or writing fails; nothing is written when
        loading or navigation fails.
    """
    _configure_logging(verbose)
    site_config = load_site_config(config)
    report = SiteBuilder(site_config, output_dir=output_dir, workers=workers).run()
    for path in report.written:
        print(f"wrote {_format_path(path)}")
    for warning in report.warnings:
        print(f"warning: {warning}")
    print(
        f"{report.pages} pages, {len(report.written)} written, "
        f"{len(report.unchanged)} unchanged"
    )


@app.command(help="Validate content, navigation, and links without writing.")
def check(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    strict: typ.Annotated[
        bool, Parameter(help="Exit non-zero when broken links are found")
    ] = False,
    workers: int = 1,
    verbose: bool = False,
) -> None:
    """Render every page in memory and report broken cross-links."""
    _configure_logging(verbose)
    site_config = load_site_config(config)
    results = SiteBuilder(site_config, workers=workers).check()
    warnings = [warning for result in results for warning in result.warnings]
    for warning in warnings:
        print(f"warning: {warning}")
    print(f"{len(results)} pages checked, {len(warnings)} broken links")
    if strict and warnings:
        raise SystemExit(1)


def main() -> None:
    """Invoke the Cyclopts application that powers the ``pages`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
