"""High-level orchestration of a site build.

:class:`SiteBuilder` runs the pipeline strictly forward: load content, build
the navigation model, render every page, then write pages, the search index,
and static assets. Navigation is resolved completely before rendering starts
and is shared read-only afterwards, so a broken navigation entry aborts the
build before anything is written.

Example
-------
>>> from pathlib import Path
>>> from academy_pages.config import load_site_config
>>> from academy_pages.site import SiteBuilder
>>> config = load_site_config(Path("site.yaml"))  # doctest: +SKIP
>>> report = SiteBuilder(config).run()  # doctest: +SKIP
>>> len(report.warnings)  # doctest: +SKIP
0
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ

from academy_pages.content import ContentLoader
from academy_pages.emitter import SiteEmitter, collect_assets
from academy_pages.errors import EmitError
from academy_pages.generator import PageRenderer
from academy_pages.navigation import NavigationBuilder
from academy_pages.search_index import build_search_index

if typ.TYPE_CHECKING:
    from pathlib import Path

    from academy_pages.config import SiteConfig
    from academy_pages.content import ContentSet
    from academy_pages.errors import BrokenCrossLinkError
    from academy_pages.generator import RenderResult
    from academy_pages.navigation import NavigationModel

logger = logging.getLogger(__name__)


@dc.dataclass(slots=True)
class BuildReport:
    """Summary of a completed build.

    Attributes
    ----------
    written : list[Path]
        Files created or changed by this run.
    unchanged : list[Path]
        Files that already held identical bytes.
    warnings : list[BrokenCrossLinkError]
        Broken inline links, in page order.
    pages : int
        Number of content pages rendered.
    """

    written: list[Path] = dc.field(default_factory=list)
    unchanged: list[Path] = dc.field(default_factory=list)
    warnings: list[BrokenCrossLinkError] = dc.field(default_factory=list)
    pages: int = 0


class SiteBuilder:
    """Run the load, navigation, render, and emit stages for one site."""

    def __init__(
        self,
        site_config: SiteConfig,
        *,
        output_dir: Path | None = None,
        workers: int = 1,
    ) -> None:
        """Initialize the builder.

        Parameters
        ----------
        site_config : SiteConfig
            Configuration loaded by :func:`academy_pages.config.load_site_config`.
        output_dir : Path, optional
            Override for the configured output directory.
        workers : int, optional
            Threads used for loading and rendering; output does not depend on
            this value.
        """
        self.site = site_config
        self.output_dir = output_dir or site_config.output_dir
        self.workers = max(1, workers)

    def load(self) -> ContentSet:
        return ContentLoader(self.site.content, workers=self.workers).load()

    def navigation(self, content: ContentSet) -> NavigationModel:
        return NavigationBuilder(
            self.site.navigation, content, footer=self.site.footer
        ).build()

    def check(self) -> list[RenderResult]:
        """Load, resolve navigation, and render without writing anything.

        Raises
        ------
        ContentLoadError
            When any content file has a malformed metadata header.
        DuplicateContentError
            When two files map to the same page.
        UnresolvedLinkError
            When a navigation entry points at missing content.
        """
        content = self.load()
        navigation = self.navigation(content)
        renderer = PageRenderer(self.site, navigation, content)
        items = [content[key] for key in sorted(content)]
        return renderer.render_all(items, workers=self.workers)

    def run(self) -> BuildReport:
        """Build the site and write it to the output directory.

        Raises
        ------
        EmitError
            When a write fails. The error lists every file written or left
            unchanged before it.
        """
        results = self.check()
        pages = [result.page for result in results]
        if self.site.search:
            pages.append(build_search_index(results))

        emitter = SiteEmitter(self.output_dir)
        emitted = emitter.emit(pages)
        assets = collect_assets(
            (self.site.base_dir,),
            self.site.content.assets,
            extra=self._asset_files(),
            exclude=self.output_dir,
        )
        try:
            copied = emitter.copy_assets(
                assets, reserved={page.output_path for page in pages}
            )
        except EmitError as exc:
            raise EmitError(
                exc.path,
                emitted.written + exc.written,
                emitted.unchanged + exc.unchanged,
            ) from exc

        report = BuildReport(
            written=emitted.written + copied.written,
            unchanged=emitted.unchanged + copied.unchanged,
            warnings=[warning for result in results for warning in result.warnings],
            pages=len(results),
        )
        logger.info(
            "Built %d pages (%d files written, %d unchanged, %d warnings)",
            report.pages,
            len(report.written),
            len(report.unchanged),
            len(report.warnings),
        )
        return report

    def _asset_files(self) -> list[str]:
        files = list(self.site.theme.stylesheets)
        if self.site.favicon:
            files.append(self.site.favicon)
        return files


__all__ = ["BuildReport", "SiteBuilder"]
