"""Rewrite links between content items to their rendered output paths."""

from __future__ import annotations

import posixpath
import typing as typ
from pathlib import PurePosixPath
from urllib.parse import quote, unquote, urlsplit

from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor

from academy_pages._constants import OUTPUT_EXTENSION
from academy_pages.errors import BrokenCrossLinkError
from academy_pages.urls import is_external, relative_url

if typ.TYPE_CHECKING:
    from xml.etree.ElementTree import Element

    from markdown import Markdown

    from academy_pages.content import ContentItem, ContentSet
else:  # pragma: no cover - type-checking fallback
    Markdown = typ.Any
    Element = typ.Any


class CrossLinkExtension(Extension):
    """Rewrite relative content links and decorate external ones.

    Links such as ``../research/index.qmd#team`` become
    ``../research/index.html#team`` relative to the page being rendered.
    A link carrying a content extension that matches no loaded item is
    appended to ``warnings`` as a :class:`BrokenCrossLinkError` and tagged
    with a ``broken-link`` class; the page still renders.
    """

    def __init__(
        self,
        content: ContentSet,
        page: ContentItem,
        extensions: typ.Collection[str],
        warnings: list[BrokenCrossLinkError],
        *,
        new_window: bool = True,
    ) -> None:
        super().__init__()
        self.content = content
        self.page = page
        self.extensions = frozenset(ext.lower() for ext in extensions)
        self.warnings = warnings
        self.new_window = new_window

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the cross-link treeprocessor on the Markdown instance."""
        processor = CrossLinkTreeprocessor(md, self)
        md.treeprocessors.register(processor, "academy_cross_links", 15)


class CrossLinkTreeprocessor(Treeprocessor):
    """Walk anchors in the parsed tree and resolve their targets."""

    def __init__(self, md: Markdown, extension: CrossLinkExtension) -> None:
        super().__init__(md)
        self.ext = extension

    def run(self, root: Element) -> Element:
        for element in root.iter("a"):
            href = element.get("href")
            if not href:
                continue
            if is_external(href):
                self._decorate_external(element)
                continue
            try:
                rewritten = self._rewrite(href)
            except BrokenCrossLinkError as exc:
                self.ext.warnings.append(exc)
                _add_class(element, "broken-link")
                continue
            if rewritten is not None:
                element.set("href", rewritten)
        return root

    def _rewrite(self, href: str) -> str | None:
        """Return the new href, or None when the link should stay as written.

        Raises
        ------
        BrokenCrossLinkError
            When the link names a content file that was not loaded.
        """
        if href.startswith("#"):
            return None
        parsed = urlsplit(href)
        path = unquote(parsed.path)
        if not path:
            return None
        if path.startswith("/"):
            joined = posixpath.normpath(path.lstrip("/") or ".")
        else:
            joined = posixpath.normpath(posixpath.join(self.ext.page.directory, path))
        suffix = PurePosixPath(joined).suffix.lower()

        if suffix in self.ext.extensions:
            target = self.ext.content.get(joined)
            if target is None:
                raise BrokenCrossLinkError(self.ext.page.source_path, href)
        elif suffix == OUTPUT_EXTENSION:
            target = self.ext.content.by_output_path(joined)
        elif not suffix:
            target = self.ext.content.index_for("" if joined == "." else joined)
        else:
            target = None
        if target is None:
            return None

        url = quote(relative_url(target.output_path, self.ext.page.output_path))
        if parsed.query:
            url = f"{url}?{parsed.query}"
        if parsed.fragment:
            url = f"{url}#{parsed.fragment}"
        return url

    def _decorate_external(self, element: Element) -> None:
        _add_class(element, "external")
        if self.ext.new_window and not element.get("target"):
            element.set("target", "_blank")
            element.set("rel", "noopener")


def _add_class(element: Element, name: str) -> None:
    classes = (element.get("class") or "").split()
    if name not in classes:
        classes.append(name)
    element.set("class", " ".join(classes))


__all__ = ["CrossLinkExtension", "CrossLinkTreeprocessor"]
