"""Resolve declared navigation entries against loaded content.

The builder runs once per build, after loading and before any page is
rendered. Internal targets must resolve to a content item or to a content
directory; anything else raises :class:`~academy_pages.errors.UnresolvedLinkError`
so a broken site shell is never published. External URLs pass through
unchecked.
"""

from __future__ import annotations

import dataclasses as dc
import logging
import posixpath
import typing as typ

from academy_pages.errors import UnresolvedLinkError
from academy_pages.urls import is_external

from .models import NavigationModel, NavigationNode

if typ.TYPE_CHECKING:
    from academy_pages.config import FooterConfig, NavEntryConfig, NavigationConfig
    from academy_pages.content import ContentItem, ContentSet

logger = logging.getLogger(__name__)


@dc.dataclass(frozen=True, slots=True)
class _Resolution:
    target: str | None
    match_key: str | None
    item: ContentItem | None = None
    external: bool = False


def _scope(directory: str) -> str:
    directory = directory.strip("/")
    return f"{directory}/" if directory else ""


def _index_key(item: ContentItem) -> str:
    """Scope a section index to its directory; the site root matches exactly."""
    return _scope(item.directory) or item.output_path


class NavigationBuilder:
    """Build the immutable :class:`NavigationModel` for one run."""

    def __init__(
        self,
        navigation: NavigationConfig,
        content: ContentSet,
        *,
        footer: FooterConfig | None = None,
    ) -> None:
        self.navigation = navigation
        self.content = content
        self.footer = footer

    def build(self) -> NavigationModel:
        """Resolve every declared entry.

        Raises
        ------
        UnresolvedLinkError
            When an internal target names no content item or directory.
        """
        model = NavigationModel(
            navbar_left=self._build_nodes(self.navigation.navbar_left),
            navbar_right=self._build_nodes(self.navigation.navbar_right),
            tools=self._build_nodes(self.navigation.tools),
            sections=self._build_nodes(self.navigation.sections),
            footer_links=self._build_nodes(self.footer.links if self.footer else ()),
        )
        logger.debug(
            "Resolved %d navigation entries", sum(1 for _ in model.iter_nodes())
        )
        return model

    def _build_nodes(
        self, entries: tuple[NavEntryConfig, ...]
    ) -> tuple[NavigationNode, ...]:
        return tuple(self._build_node(entry) for entry in entries)

    def _build_node(self, entry: NavEntryConfig) -> NavigationNode:
        children = self._build_nodes(entry.children)
        resolution = self._resolve(entry, has_children=bool(children))
        return NavigationNode(
            label=self._label(entry, resolution),
            target=resolution.target,
            match_key=resolution.match_key,
            external=resolution.external,
            icon=entry.icon,
            new_window=entry.new_window,
            children=children,
        )

    def _resolve(self, entry: NavEntryConfig, *, has_children: bool) -> _Resolution:
        href = entry.href
        if href is None:
            return _Resolution(target=None, match_key=None)
        if is_external(href):
            return _Resolution(target=href, match_key=None, external=True)

        path, _, fragment = href.partition("#")
        path = path.lstrip("/")
        if path.startswith("./"):
            path = path[2:]
        path = posixpath.normpath(path) + ("/" if path.endswith("/") else "")
        if path in (".", "./"):
            path = ""

        if path and not path.endswith("/"):
            item = self.content.get(path) or self.content.by_output_path(path)
            if item is not None:
                key = _index_key(item) if item.is_index else item.output_path
                return _Resolution(
                    target=_with_fragment(item.output_path, fragment),
                    match_key=key,
                    item=item,
                )
            if not self.content.has_directory(path):
                raise UnresolvedLinkError(href, entry.label)
        return self._resolve_container(href, path, entry, has_children=has_children)

    def _resolve_container(
        self, href: str, path: str, entry: NavEntryConfig, *, has_children: bool
    ) -> _Resolution:
        directory = path.strip("/")
        index = self.content.index_for(directory)
        if index is not None:
            return _Resolution(
                target=index.output_path, match_key=_index_key(index), item=index
            )
        if has_children or self.content.has_directory(directory):
            logger.debug("'%s' has no index page; treating it as a container", href)
            return _Resolution(target=None, match_key=_scope(directory) or None)
        raise UnresolvedLinkError(href, entry.label)

    @staticmethod
    def _label(entry: NavEntryConfig, resolution: _Resolution) -> str:
        if entry.label:
            return entry.label
        if resolution.item is not None:
            return resolution.item.title
        if entry.icon:
            return entry.icon
        href = (entry.href or "").rstrip("/")
        name = posixpath.basename(href) or href
        return name.replace("-", " ").replace("_", " ").title()


def _with_fragment(path: str, fragment: str) -> str:
    return f"{path}#{fragment}" if fragment else path


__all__ = ["NavigationBuilder"]
