"""Render content items into themed HTML pages.

:class:`PageRenderer` combines one :class:`~academy_pages.content.ContentItem`
with the shared :class:`~academy_pages.navigation.NavigationModel` and the
:class:`~academy_pages.config.SiteConfig` through a Jinja template. A render
reads only its own item plus shared read-only state, so pages can be rendered
in any order or in parallel.

Example
-------
>>> renderer = PageRenderer(site_config, navigation, content)  # doctest: +SKIP
>>> result = renderer.render(content["teaching/index.qmd"])  # doctest: +SKIP
>>> result.page.output_path  # doctest: +SKIP
'teaching/index.html'
"""

from __future__ import annotations

import concurrent.futures as cf
import logging
import typing as typ

from academy_pages.navigation import active_trail, find_active_node, section_for
from academy_pages.urls import root_prefix

from .link_rewriter import CrossLinkExtension
from .models import RenderedPage, RenderResult, SearchEntry
from .renderer import HtmlContentRenderer
from .templates import build_environment, resolve_template_name

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from jinja2 import Environment

    from academy_pages.config import SiteConfig
    from academy_pages.content import ContentItem, ContentSet
    from academy_pages.errors import BrokenCrossLinkError
    from academy_pages.navigation import NavigationModel

logger = logging.getLogger(__name__)


class PageRenderer:
    """Turn content items into :class:`RenderResult` objects."""

    def __init__(
        self,
        site_config: SiteConfig,
        navigation: NavigationModel,
        content: ContentSet,
        *,
        environment: Environment | None = None,
    ) -> None:
        """Initialize the renderer with shared, read-only build state.

        Parameters
        ----------
        site_config : SiteConfig
            Run configuration (templates, theme, footer).
        navigation : NavigationModel
            Fully resolved navigation; never modified while rendering.
        content : ContentSet
            Every loaded item, used to resolve cross-links and listings.
        environment : Environment, optional
            Jinja environment override; defaults to the site templates layered
            over the bundled ones.
        """
        self.site = site_config
        self.navigation = navigation
        self.content = content
        theme = site_config.theme
        self.renderer = HtmlContentRenderer(
            theme.pygments_style, anchor_sections=theme.anchor_sections
        )
        self.env = environment or build_environment(site_config.templates)
        self.pygments_css = self.renderer.stylesheet

    def render(self, item: ContentItem) -> RenderResult:
        """Render ``item`` into a page and collect its broken-link warnings."""
        warnings: list[BrokenCrossLinkError] = []
        links = CrossLinkExtension(
            self.content,
            item,
            self.site.content.extensions,
            warnings,
            new_window=self.site.theme.external_links_new_window,
        )
        body = self.renderer.markdown(item.body, [links])
        template_name = resolve_template_name(item, self.site.templates)
        template = self.env.get_template(template_name)
        page_path = item.output_path
        sidebar = section_for(page_path, self.navigation)
        context = {
            "site": self.site,
            "theme": self.site.theme,
            "footer": self.site.footer,
            "page": item,
            "page_path": page_path,
            "root": root_prefix(page_path),
            "html_title": self._format_page_title(item),
            "content_html": body.html,
            "toc": body.toc if self._wants_toc(item) else [],
            "navigation": self.navigation,
            "navbar_active": find_active_node(page_path, self.navigation.navbar),
            "active": find_active_node(page_path, self.navigation.sections),
            "active_trail": active_trail(page_path, self.navigation.sections),
            "sidebar": sidebar,
            "listing": self._listing(item),
            "pygments_css": self.pygments_css,
        }
        html = template.render(**context)
        if not html.endswith("\n"):
            html += "\n"
        for warning in warnings:
            logger.debug("%s", warning)
        return RenderResult(
            page=RenderedPage(output_path=page_path, content=html.encode("utf-8")),
            warnings=tuple(warnings),
            search_entry=SearchEntry(
                title=item.title,
                href=page_path,
                section=sidebar.label if sidebar else "",
                categories=item.categories,
                text=self.renderer.plain_text(body.html),
            ),
        )

    def render_all(
        self, items: cabc.Iterable[ContentItem], *, workers: int = 1
    ) -> list[RenderResult]:
        """Render ``items`` independently, returning results in input order."""
        ordered = list(items)
        if workers <= 1 or len(ordered) < 2:
            return [self.render(item) for item in ordered]
        with cf.ThreadPoolExecutor(max_workers=workers) as pool:
            return list(pool.map(self.render, ordered))

    def _wants_toc(self, item: ContentItem) -> bool:
        value = item.metadata.get("toc")
        if value is None:
            return self.site.theme.toc
        return bool(value)

    def _listing(self, item: ContentItem) -> list[ContentItem]:
        """Return the pages below an index page, newest first."""
        if not item.is_index:
            return []
        children = self.content.items_under(item.directory)
        return sorted(
            children,
            key=lambda child: (str(child.date or ""), child.title),
            reverse=True,
        )

    def _format_page_title(self, item: ContentItem) -> str:
        """Compose the HTML title from the page and site titles."""
        if item.title == self.site.title:
            return self.site.title
        return f"{item.title} | {self.site.title}"


__all__ = ["PageRenderer"]
